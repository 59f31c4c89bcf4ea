"""Global pytest fixtures for UTOPIA GATEWAY."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes import InMemoryContract, RecordingPresenter

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.credentials",
]

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = ("unit", "integration", "e2e")


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark every item with the name of the top-level folder it lives in."""
    for item in items:
        try:
            folder = item.path.resolve().relative_to(TESTS_ROOT).parts[0]
        except ValueError:
            continue
        if folder in FOLDER_MARKERS and not any(
            marker.name == folder for marker in item.iter_markers()
        ):
            item.add_marker(getattr(pytest.mark, folder))


@pytest.fixture
def ledger_contract() -> InMemoryContract:
    """A utopiamaker contract backed by a fresh, empty in-memory ledger."""
    return InMemoryContract()


@pytest.fixture
def presenter() -> RecordingPresenter:
    """A presenter that records every event it receives."""
    return RecordingPresenter()
