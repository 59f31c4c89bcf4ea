"""UTOPIA GATEWAY

A demonstration client for the `utopiamaker` ledger contract. It connects to a
Fabric gateway peer, runs a scripted sequence of evaluate and submit calls
(users, projects, transactions, contributors, validators) and prints what the
contract returns.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
