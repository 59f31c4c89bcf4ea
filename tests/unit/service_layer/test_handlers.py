"""Unit tests for the step handlers."""

import pytest

from utopia_gateway.domain.value_objects import CallKind
from utopia_gateway.interfaces.errors import ContractError
from utopia_gateway.service_layer import handlers
from utopia_gateway.service_layer.steps import Evaluate, Submit

# pylint: disable=magic-value-comparison


def test_registry_covers_both_step_kinds():
    """Every step type has a handler."""
    assert handlers.STEP_HANDLERS == {
        Evaluate: handlers.evaluate_transaction,
        Submit: handlers.submit_transaction,
    }


class TestEvaluateTransaction:
    """Tests for `evaluate_transaction`."""

    @staticmethod
    def test_announces_calls_and_presents(ledger_contract, presenter):
        """The banner precedes the call; the result follows it."""
        step = Evaluate("count", "GetUserCount", description="returns user count")

        result = handlers.evaluate_transaction(step, ledger_contract, presenter)

        assert result.label == "count"
        assert result.kind is CallKind.EVALUATE
        assert result.value == 0
        assert presenter.events == [
            ("started", "evaluate", "GetUserCount", "returns user count"),
            ("finished", result),
        ]
        assert ledger_contract.calls == [("evaluate", "GetUserCount", ())]

    @staticmethod
    def test_rejection_is_not_presented(ledger_contract, presenter):
        """A rejected call is announced but produces no result."""
        step = Evaluate("get", "GetUser", ("nonexistent",))

        with pytest.raises(ContractError) as excinfo:
            handlers.evaluate_transaction(step, ledger_contract, presenter)

        assert excinfo.value.not_found
        assert [event[0] for event in presenter.events] == ["started"]


class TestSubmitTransaction:
    """Tests for `submit_transaction`."""

    @staticmethod
    def test_submits_and_presents(ledger_contract, presenter):
        """Submits pass arguments through unchanged and return the response."""
        step = Submit("create", "CreateUser", ("Guy", "guy@example.com", "h"))

        result = handlers.submit_transaction(step, ledger_contract, presenter)

        assert result.text == "user0"
        assert result.kind is CallKind.SUBMIT
        assert ledger_contract.calls == [
            ("submit", "CreateUser", ("Guy", "guy@example.com", "h"))
        ]
        assert presenter.events[0] == ("started", "submit", "CreateUser", "")
        assert presenter.results == [result]
