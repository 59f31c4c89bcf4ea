"""Domain layer for UTOPIA GATEWAY.

Holds the small immutable value objects that flow between layers (identity,
call kinds, deadlines, step results). The ledger's own entities live in the
remote contract and are only observed here as returned payloads.
"""
