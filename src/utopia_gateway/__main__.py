"""Allow ``python -m utopia_gateway``."""

from utopia_gateway.entrypoints.cli.main import utopia_gateway

if __name__ == "__main__":
    utopia_gateway()  # pylint: disable=no-value-for-parameter
