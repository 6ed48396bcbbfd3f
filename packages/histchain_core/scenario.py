"""Scenario replay for histchain.

Replays a list of operation steps (e.g. ``{"op": "commit", "message": "a"}``)
against a fresh CommitHistory and records what each step returned. Steps can
label commits so later steps refer to them without knowing the generated IDs,
and can declare an expected result to check.

Execution Context:
    Library module - imported by the CLI run command

Dependencies:
    - histchain_core.history: CommitHistory operations

Metadata:
    Version: 0.1.0
    Author: histchain Team
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Any

from histchain_core.history import CommitHistory
from histchain_core.history import InvalidArgument
from histchain_core.identifiers import is_commit_id

logger = logging.getLogger(__name__)


# ---- Constants ----------------------------------------------------------------------------------------------


# Operation name -> required step keys
OPERATIONS: dict[str, tuple[str, ...]] = {
    "commit": ("message",),
    "reset": ("n",),
    "drop": ("target",),
    "squash": ("target",),
    "contains": ("target",),
    "history": ("n",),
    "describe": (),
    "head": (),
}

EXPECT_INVALID_ARGUMENT = "InvalidArgument"
DEFAULT_HISTORY_NAME = "scenario"

_MISSING = object()


# ---- Exceptions ---------------------------------------------------------------------------------------------


class ScenarioError(ValueError):
    """Raised when a scenario step is malformed."""


# ---- Data Classes -------------------------------------------------------------------------------------------


@dataclass
class Step:
    """Single operation to replay.

    Attributes:
        op: Operation name (one of OPERATIONS).
        args: Operation arguments (message, n, target).
        label: Name bound to the ID returned by a commit step.
        expect: Expected return value, or _MISSING when unchecked.
    """

    op: str
    args: dict[str, Any] = field(default_factory=dict)
    label: str | None = None
    expect: Any = field(default=_MISSING, repr=False)

    @property
    def has_expectation(
            self,
    ) -> bool:
        """Whether this step declares an expected result."""
        return self.expect is not _MISSING

    @classmethod
    def from_dict(
            cls,
            data: dict[str, Any],
    ) -> Step:
        """Create step from dictionary.

        Args:
            data: Dictionary with 'op' and its arguments.

        Returns:
            Step instance.

        Raises:
            ScenarioError: If op is unknown, a required argument is missing,
                or target or label is not a string.
        """
        if not isinstance(data, dict):
            msg = f"Step must be an object, got {type(data).__name__}"
            raise ScenarioError(msg)

        op = data.get("op")
        if not isinstance(op, str) or op not in OPERATIONS:
            msg = f"Unknown operation '{op}'"
            raise ScenarioError(msg)

        missing = [key for key in OPERATIONS[op] if key not in data]
        if missing:
            msg = f"Operation '{op}' is missing: {', '.join(missing)}"
            raise ScenarioError(msg)

        if "target" in OPERATIONS[op] and not isinstance(data["target"], str):
            msg = f"Operation '{op}' target must be a string, got {type(data['target']).__name__}"
            raise ScenarioError(msg)

        label = data.get("label")
        if label is not None and not isinstance(label, str):
            msg = f"Step label must be a string, got {type(label).__name__}"
            raise ScenarioError(msg)

        return cls(
            op=op,
            args={key: data[key] for key in OPERATIONS[op]},
            label=label,
            expect=data.get("expect", _MISSING),
        )

    def describe(
            self,
    ) -> str:
        """Format step as a short human-readable call."""
        arg_text = ", ".join(f"{value!r}" for value in self.args.values())
        return f"{self.op}({arg_text})"


@dataclass
class StepResult:
    """Outcome of replaying one step.

    Attributes:
        step: The step that was replayed.
        value: Value returned by the operation.
        error: Error text if the operation raised InvalidArgument.
        passed: False if the step's expectation was not met.
    """

    step: Step
    value: Any = None
    error: str | None = None
    passed: bool = True


@dataclass
class Scenario:
    """Named list of steps.

    Attributes:
        name: History name used for the replay (optional).
        steps: Steps in replay order.
    """

    name: str | None = None
    steps: list[Step] = field(default_factory=list)

    @classmethod
    def from_dict(
            cls,
            data: dict[str, Any] | list[dict[str, Any]],
    ) -> Scenario:
        """Create scenario from a dictionary or a bare list of steps.

        Args:
            data: {'name': ..., 'steps': [...]} or [...].

        Returns:
            Scenario instance.

        Raises:
            ScenarioError: If any step is malformed.
        """
        if isinstance(data, list):
            return cls(steps=[Step.from_dict(item) for item in data])

        if not isinstance(data, dict):
            msg = "Scenario must be an object or a list of steps"
            raise ScenarioError(msg)

        return cls(
            name=data.get("name"),
            steps=[Step.from_dict(item) for item in data.get("steps", [])],
        )

    @classmethod
    def load(
            cls,
            filepath: Path,
    ) -> Scenario:
        """Load scenario from a JSON file.

        Args:
            filepath: Path to scenario JSON file.

        Returns:
            Scenario instance.

        Raises:
            RuntimeError: If scenario file cannot be loaded.
        """
        try:
            data = json.loads(Path(filepath).read_text())
            return cls.from_dict(data)
        except Exception as file_error:
            msg = f"Failed to load scenario from {filepath}: {file_error}"
            raise RuntimeError(msg) from file_error


@dataclass
class ScenarioResult:
    """Result of replaying a scenario.

    Attributes:
        history: History after the last step.
        steps: Per-step results in replay order.
        labels: Label -> commit ID bindings made by commit steps.
    """

    history: CommitHistory
    steps: list[StepResult] = field(default_factory=list)
    labels: dict[str, str] = field(default_factory=dict)

    @property
    def failures(
            self,
    ) -> list[StepResult]:
        """Steps whose expectation was not met."""
        return [result for result in self.steps if not result.passed]

    @property
    def passed(
            self,
    ) -> bool:
        """Whether every step met its expectation."""
        return not self.failures


# ---- Replay Functions ---------------------------------------------------------------------------------------


def run_scenario(
        scenario: Scenario,
        history_name: str | None = None,
) -> ScenarioResult:
    """Replay a scenario against a new history.

    Args:
        scenario: Scenario to replay.
        history_name: Overrides the scenario's name for the history.

    Returns:
        ScenarioResult with per-step outcomes.
    """
    history = CommitHistory(history_name or scenario.name or DEFAULT_HISTORY_NAME)
    result = ScenarioResult(history=history)

    for index, step in enumerate(scenario.steps, start=1):
        step_result = _apply_step(history, step, result.labels)
        result.steps.append(step_result)
        if not step_result.passed:
            logger.info(f"Step {index} {step.describe()} did not meet expectation")

    return result


def _apply_step(
        history: CommitHistory,
        step: Step,
        labels: dict[str, str],
) -> StepResult:
    """Run one step and compare against its expectation.

    Args:
        history: History being replayed.
        step: Step to run.
        labels: Label bindings, updated by labelled commit steps.

    Returns:
        StepResult for the step.
    """
    result = StepResult(step=step)

    try:
        result.value = _dispatch(history, step, labels)
    except InvalidArgument as arg_error:
        result.error = str(arg_error)
        result.passed = step.expect == EXPECT_INVALID_ARGUMENT
        return result

    if step.op == "commit" and step.label:
        labels[step.label] = result.value

    if step.has_expectation:
        result.passed = result.value == step.expect

    return result


def _dispatch(
        history: CommitHistory,
        step: Step,
        labels: dict[str, str],
) -> Any:
    args = step.args

    if step.op == "commit":
        return history.commit(str(args["message"]))
    if step.op == "reset":
        return history.reset(args["n"])
    if step.op == "history":
        return history.get_history(args["n"])
    if step.op == "describe":
        return history.describe()
    if step.op == "head":
        return history.get_head_id()

    target = resolve_target(args["target"], labels)
    if step.op == "drop":
        return history.drop(target)
    if step.op == "squash":
        return history.squash(target)
    return history.contains(target)


def resolve_target(
        target: str,
        labels: dict[str, str],
) -> str:
    """Resolve a step target to a commit ID.

    Args:
        target: Label bound by an earlier commit step, or a raw commit ID.
        labels: Current label bindings.

    Returns:
        Commit ID.
    """
    if target in labels:
        return labels[target]

    if not is_commit_id(target):
        logger.debug(f"Target '{target}' is neither a label nor a commit ID")
    return target
