"""The demo script run against the utopiamaker contract.

The script is a declared list of steps. Identifiers the contract assigns
(`user0`, `project0`, `transaction0`) are not read back from earlier results;
they come from `ScriptFixtures` and match what a fresh ledger assigns. Running
against a ledger that already holds users, projects or transactions makes the
later steps address the older entries.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from utopia_gateway.interfaces.errors import ScriptError

from .steps import Evaluate, Step, Submit

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True)
class ScriptFixtures:
    """Literal values used as arguments throughout the demo script."""

    key_hash: str = "57db1253b68b6802b59a969f750fa32b60cb5cc8a3cb19b87dac28f541dc4e2a"
    timestamp: str = "1688516687"
    user_id: str = "user0"
    project_id: str = "project0"
    transaction_id: str = "transaction0"
    new_member_id: str = "user2"
    new_email: str = "philippeChange@example.com"
    project_title: str = "project one"
    project_start: str = "1672531200"
    project_end: str = "1704067200"
    project_description: str = "Example description"
    project_contributors: str = "user0,user1,user2"
    transaction_payload: str = '{"time":"1 hour"}'


USERS = (
    ("Phillipe", "philippe@example.com"),
    ("Guy", "guy@example.com"),
    ("Satoshi Nakamoto", "sat@example.com"),
)


def demo_script(fixtures: ScriptFixtures | None = None) -> tuple[Step, ...]:
    """Build the demo script.

    Args:
        fixtures: Literal arguments. Defaults to `ScriptFixtures()`.

    Returns:
        The steps in execution order.
    """
    f = fixtures or ScriptFixtures()
    steps: list[Step] = [
        Submit("init", "Init"),
        Evaluate(
            "init-status",
            "GetInitStatus",
            description="function returns contract status",
            requires=("init",),
        ),
        Evaluate(
            "user-count-0",
            "GetUserCount",
            description="function returns user count",
            requires=("init",),
        ),
    ]

    for index, (name, email) in enumerate(USERS):
        steps.append(
            Submit(
                f"create-user-{index}",
                "CreateUser",
                (name, email, f.key_hash),
                description="creates new user",
                requires=("init",),
            )
        )
        steps.append(
            Evaluate(
                f"user-count-{index + 1}",
                "GetUserCount",
                description="function returns user count",
                requires=(f"create-user-{index}",),
            )
        )

    steps += [
        Evaluate(
            "get-user",
            "GetUser",
            (f.user_id,),
            description="function returns user attributes",
            requires=("create-user-0",),
        ),
        Submit(
            "update-email",
            "UpdateEmail",
            (f.user_id, f.key_hash, f.new_email),
            description="updates user email",
            requires=("create-user-0",),
        ),
        Evaluate(
            "get-user-updated",
            "GetUser",
            (f.user_id,),
            description="function returns user attributes",
            requires=("update-email",),
        ),
        Evaluate(
            "project-count-0",
            "GetProjectCount",
            description="function returns projects count",
            requires=("init",),
        ),
        Submit(
            "create-project",
            "CreateProject",
            (
                f.project_title,
                f.project_start,
                f.project_end,
                f.project_description,
                f.user_id,
                f.project_contributors,
                f.user_id,
                f.key_hash,
                f.timestamp,
            ),
            description="creates new project",
            requires=("create-user-0", "create-user-1", "create-user-2"),
        ),
        Evaluate(
            "project-count-1",
            "GetProjectCount",
            description="function returns projects count",
            requires=("create-project",),
        ),
        Evaluate(
            "get-project",
            "GetProject",
            (f.project_id,),
            description="function returns project attributes",
            requires=("create-project",),
        ),
        Evaluate(
            "transaction-count-0",
            "GetTransactionCount",
            description="function returns transactions count",
            requires=("init",),
        ),
        Submit(
            "create-transaction",
            "CreateTransaction",
            (f.project_id, f.user_id, f.key_hash, f.transaction_payload, f.timestamp),
            description="creates new transaction",
            requires=("create-project",),
        ),
        Evaluate(
            "transaction-count-1",
            "GetTransactionCount",
            description="function returns transactions count",
            requires=("create-transaction",),
        ),
        Evaluate(
            "get-transaction",
            "GetTransaction",
            (f.transaction_id,),
            description="function returns transaction attributes",
            requires=("create-transaction",),
        ),
        Evaluate(
            "get-project-after-transaction",
            "GetProject",
            (f.project_id,),
            description="function returns project attributes",
            requires=("create-transaction",),
        ),
        Submit(
            "validate-transaction",
            "ValidateTransaction",
            (f.transaction_id, f.user_id, f.key_hash, f.timestamp),
            description="validates transaction",
            requires=("create-transaction",),
        ),
        Evaluate(
            "get-transaction-validated",
            "GetTransaction",
            (f.transaction_id,),
            description="function returns transaction attributes",
            requires=("validate-transaction",),
        ),
        Evaluate(
            "get-project-validated",
            "GetProject",
            (f.project_id,),
            description="function returns project attributes",
            requires=("validate-transaction",),
        ),
        Submit(
            "add-contributor",
            "AddContributor",
            (f.project_id, f.user_id, f.key_hash, f.new_member_id),
            description="adds project contributor",
            requires=("create-project",),
        ),
        Submit(
            "add-validator",
            "AddValidator",
            (f.project_id, f.user_id, f.key_hash, f.new_member_id),
            description="adds project validator",
            requires=("create-project",),
        ),
        Evaluate(
            "get-project-final",
            "GetProject",
            (f.project_id,),
            description="function returns project attributes",
            requires=("add-contributor", "add-validator"),
        ),
    ]
    return tuple(steps)


def validate_script(steps: Sequence[Step]) -> None:
    """Check that labels are unique and dependencies point backwards.

    Raises:
        ScriptError: On a duplicate label, or a `requires` entry that does not
            name an earlier step.
    """
    seen: set[str] = set()
    for step in steps:
        if step.label in seen:
            raise ScriptError(step.label, "duplicate label")
        for required in step.requires:
            if required not in seen:
                raise ScriptError(
                    step.label, f"requires {required!r}, which does not run earlier"
                )
        seen.add(step.label)
