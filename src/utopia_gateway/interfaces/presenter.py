"""Interface for presenting script progress and results."""

from __future__ import annotations

import abc
from collections.abc import Sequence
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from utopia_gateway.domain.value_objects import StepResult


class Presenter(abc.ABC):
    """Contract for showing what the client is doing and what it got back."""

    @abc.abstractmethod
    def show_parameters(self, parameters: Sequence[tuple[str, str]]) -> None:
        """Display the resolved input parameters."""

    @abc.abstractmethod
    def step_started(self, kind: str, transaction: str, description: str) -> None:
        """Announce a call before it is issued."""

    @abc.abstractmethod
    def step_finished(self, result: StepResult) -> None:
        """Display the outcome of a completed call."""
