"""Fabric gateway adapter (gRPC + protobuf)."""

from .grpc_gateway import GrpcContract, GrpcGateway, GrpcNetwork

__all__ = ["GrpcGateway", "GrpcNetwork", "GrpcContract"]
