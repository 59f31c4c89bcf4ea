"""Console presenter that prints script progress with Rich."""

from __future__ import annotations

from collections.abc import Sequence

from rich.console import Console
from rich.pretty import Pretty

from utopia_gateway.domain.value_objects import CallKind, StepResult
from utopia_gateway.interfaces.presenter import Presenter

PARAMETER_WIDTH = 19


class RichPresenter(Presenter):
    """Write parameters, call banners and results to a Rich console (stdout)."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def show_parameters(self, parameters: Sequence[tuple[str, str]]) -> None:
        for name, value in parameters:
            self.console.print(
                f"{name + ':':<{PARAMETER_WIDTH}}{value}",
                markup=False,
                highlight=False,
            )

    def step_started(self, kind: str, transaction: str, description: str) -> None:
        banner = f"\n--> {kind.capitalize()} Transaction: {transaction}"
        if description:
            banner = f"{banner}, {description}"
        self.console.print(banner, markup=False, highlight=False)

    def step_finished(self, result: StepResult) -> None:
        if result.kind is CallKind.SUBMIT:
            self.console.print("*** Transaction committed successfully")
            if result.payload:
                self.console.print("*** Result:", result.text, markup=False)
            return

        value = result.value
        if value is None:
            self.console.print("*** Result:", result.text, markup=False)
        else:
            self.console.print("*** Result:", Pretty(value))
