"""Module including value objects used across the client."""

from __future__ import annotations

import json
from dataclasses import dataclass
from enum import Enum
from typing import Any


class CallKind(Enum):
    """Enumeration of the gateway call kinds that carry their own deadline."""

    EVALUATE = "evaluate"
    ENDORSE = "endorse"
    SUBMIT = "submit"
    COMMIT_STATUS = "commit_status"


@dataclass(frozen=True)
class Identity:
    """Value object representing the client identity.

    Attributes:
        msp_id: Membership service provider identifier of the organization.
        credentials: PEM-encoded X.509 certificate of the client.
    """

    msp_id: str
    credentials: bytes


@dataclass(frozen=True)
class Deadlines:
    """Per-call-kind deadlines in seconds.

    These are ceilings, not retry budgets: a call that exceeds its deadline
    fails and is not reissued.
    """

    evaluate: float = 5.0
    endorse: float = 15.0
    submit: float = 5.0
    commit_status: float = 60.0

    def for_kind(self, kind: CallKind) -> float:
        """Return the deadline for a call kind."""
        return float(getattr(self, kind.value))


@dataclass(frozen=True)
class StepResult:
    """Value object representing what one scripted call returned."""

    label: str
    transaction: str
    kind: CallKind
    payload: bytes

    @property
    def text(self) -> str:
        """The payload decoded as UTF-8."""
        return self.payload.decode("utf-8", errors="replace")

    @property
    def value(self) -> Any:
        """The payload parsed as JSON, or ``None`` when it is not JSON.

        Payloads nested too deeply for the parser count as not JSON.
        """
        if not self.payload:
            return None
        try:
            return json.loads(self.text)
        except (json.JSONDecodeError, RecursionError):
            return None
