"""UTOPIA GATEWAY CLI demo commands.

Behavior
- Connection parameters are resolved from the environment once, into an
  explicit settings record, and printed to stdout before anything else.
- ``run`` executes the demo script; call banners and results go to stdout,
  diagnostics and the failure line to **stderr**.

Failure modes
- Any failure (missing credentials, malformed keys, unreachable peer, deadline
  expiry, contract rejection) aborts the script. The session is closed first,
  then a line starting with ``FAILURE_PREFIX`` is printed on stderr and the
  process exits with status 1.
"""

from __future__ import annotations

import logging

import click

from utopia_gateway.bootstrap import build_presenter, run_demo
from utopia_gateway.config import GatewaySettings

from .helpers import error, success

logger = logging.getLogger(__name__)

FAILURE_PREFIX = "******** FAILED to run the application:"


@click.command()
def params() -> None:
    """Show the resolved connection parameters."""
    build_presenter().show_parameters(GatewaySettings.from_environ().describe())


@click.command()
@click.pass_context
def run(ctx: click.Context) -> None:
    """Run the demo script against the configured peer."""
    settings = GatewaySettings.from_environ()
    presenter = build_presenter()
    presenter.show_parameters(settings.describe())

    try:
        results = run_demo(settings, presenter)
    except Exception as e:  # pylint: disable=broad-except
        logger.debug("Run aborted", exc_info=True)
        error(f"{FAILURE_PREFIX} {e}", glyph=False)
        ctx.exit(1)
    else:
        success(f"Demo finished: {len(results)} calls completed")
