"""Fixtures for end-to-end CLI tests.

Provides a test-only `log-demo` command that emits log messages at every
level, a CliRunner, and an isolated filesystem per test.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from utopia_gateway.entrypoints.cli.main import utopia_gateway

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit one message per level on a project logger and a library logger."""
    logger = logging.getLogger("utopia_gateway.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    grpc_logger = logging.getLogger("grpc._channel")
    grpc_logger.debug("This is a debug-level grpc test message.")
    grpc_logger.info("This is an info-level grpc test message.")
    grpc_logger.warning("This is a warning-level grpc test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and from its help sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register `log-demo` on the top-level group for one test."""
    utopia_gateway.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(utopia_gateway, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside `runner.isolated_filesystem()`."""
    with runner.isolated_filesystem():
        yield
