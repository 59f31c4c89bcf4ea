"""Module defining script steps.

A step describes one contract call: which transaction function, with which
literal arguments, and which earlier steps it relies on. Steps carry no
behavior; handlers execute them.
"""

from dataclasses import dataclass
from typing import ClassVar

from utopia_gateway.domain.value_objects import CallKind


@dataclass(frozen=True)
class Step:
    """Base class for all steps.

    Attributes:
        label: Unique name of the step within its script.
        transaction: Contract transaction function name.
        args: Ordered string arguments, passed through unchanged.
        description: Short human description shown before the call.
        requires: Labels of earlier steps whose ledger effects this step reads.
    """

    label: str
    transaction: str
    args: tuple[str, ...] = ()
    description: str = ""
    requires: tuple[str, ...] = ()

    kind: ClassVar[CallKind]


@dataclass(frozen=True)
class Evaluate(Step):
    """Read-only query of ledger state."""

    kind: ClassVar[CallKind] = CallKind.EVALUATE


@dataclass(frozen=True)
class Submit(Step):
    """State-changing transaction, returned once committed."""

    kind: ClassVar[CallKind] = CallKind.SUBMIT
