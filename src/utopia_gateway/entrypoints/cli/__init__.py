"""Command-line interface for UTOPIA GATEWAY."""
