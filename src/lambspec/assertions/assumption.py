"""Fluent interface for describing and verifying test assumptions.

An unmet assumption raises ``AssumptionViolatedError``, which pytest and
unittest report as a skipped test::

    def test_posix_paths():
        assume(os.sep).to(be("/"))
        ...
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, NoReturn, TypeVar

from lambspec.assertions._base import Checkable, CheckMode, CheckResult
from lambspec.predicates.base import describe, evaluate, format_value
from lambspec.testing.outcomes import AssumptionViolatedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Assumption(Checkable[T]):
    """A value assumed to satisfy every chained predicate."""

    mode = CheckMode.ASSUMPTION

    def __init__(self, target: T) -> None:
        self._target = target

    @property
    def value(self) -> T:
        return self._target

    def _check(self, p: Callable[[T], Any]) -> CheckResult:
        subject = format_value(self._target)
        description = describe(p)
        passed = evaluate(p, self._target)
        logger.debug("assume [%s] to [%s]: %s", subject, description, "holds" if passed else "does not hold")
        return CheckResult(
            mode=self.mode,
            subject=subject,
            predicate=description,
            passed=passed,
            message=None if passed else f"[{subject}] did not satisfy [{description}]",
        )

    def _raise(self, result: CheckResult) -> NoReturn:
        raise AssumptionViolatedError(result.message or "", result)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"


def assume(target: T) -> Assumption[T]:
    """Establish ``target`` as the object assumptions are made on."""
    return Assumption(target)
