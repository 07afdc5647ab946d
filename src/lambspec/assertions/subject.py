"""Fluent interface for describing and verifying expectations on a test subject.

Initiate expectations with :func:`expect`, :func:`expect_every` or
:func:`expect_at_least_one_of`, then chain as many predicates as you like
with :meth:`Subject.to` (or its synonym :meth:`Subject.must`)::

    expect("foo").to(lambda s: s.startswith("f")).to(satisfy(str.islower))
    expect_every(["foo", "fungo"]).to(lambda s: s.endswith("o"))
    expect_at_least_one_of(["a", "b", "c"]).to(be("b"))
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, NoReturn, TypeVar

from lambspec.assertions._base import Checkable, CheckMode, CheckResult
from lambspec.predicates.base import describe, evaluate, format_value
from lambspec.testing.outcomes import ExpectationFailedError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _materialize(sequence: Iterable[T]) -> tuple[T, ...]:
    if isinstance(sequence, (str, bytes, bytearray)):
        raise TypeError(f"expected a sequence of subjects, got {type(sequence).__name__}")
    try:
        iterator = iter(sequence)
    except TypeError:
        raise TypeError(f"expected a sequence of subjects, got {type(sequence).__name__}") from None
    return tuple(iterator)


class Subject(Checkable[T]):
    """Base class for test subjects; failures raise ``ExpectationFailedError``."""

    mode: CheckMode

    def _raise(self, result: CheckResult) -> NoReturn:
        raise ExpectationFailedError(result.message or "", result)


class Single(Subject[T]):
    """A single value that must satisfy every chained predicate."""

    mode = CheckMode.SINGLE

    def __init__(self, target: T) -> None:
        self._target = target

    @property
    def value(self) -> T:
        return self._target

    def _check(self, p: Callable[[T], Any]) -> CheckResult:
        subject = format_value(self._target)
        description = describe(p)
        passed = evaluate(p, self._target)
        logger.debug("expect [%s] to [%s]: %s", subject, description, "met" if passed else "unmet")
        return CheckResult(
            mode=self.mode,
            subject=subject,
            predicate=description,
            passed=passed,
            message=None if passed else f"[{subject}] did not satisfy [{description}]",
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"


class EachOf(Subject[T]):
    """Elements of a sequence, all of which must satisfy every chained predicate.

    The first element failing a predicate stops the check; later elements
    are not evaluated.
    """

    mode = CheckMode.EACH_OF

    def __init__(self, sequence: Iterable[T]) -> None:
        self._sequence = _materialize(sequence)

    @property
    def values(self) -> tuple[T, ...]:
        return self._sequence

    def _check(self, p: Callable[[T], Any]) -> CheckResult:
        subject = format_value(self._sequence)
        description = describe(p)
        for each in self._sequence:
            if not evaluate(p, each):
                offending = format_value(each)
                logger.debug("expect every of [%s] to [%s]: unmet by [%s]", subject, description, offending)
                return CheckResult(
                    mode=self.mode,
                    subject=subject,
                    predicate=description,
                    passed=False,
                    offending=offending,
                    message=f"[{offending}] from sequence [{subject}] did not satisfy [{description}]",
                )
        logger.debug("expect every of [%s] to [%s]: met", subject, description)
        return CheckResult(mode=self.mode, subject=subject, predicate=description, passed=True)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._sequence)!r})"


class AtLeastOneOf(Subject[T]):
    """Elements of a sequence, at least one of which must satisfy each chained predicate.

    The scan stops at the first element satisfying the predicate.
    """

    mode = CheckMode.AT_LEAST_ONE_OF

    def __init__(self, sequence: Iterable[T]) -> None:
        self._sequence = _materialize(sequence)

    @property
    def values(self) -> tuple[T, ...]:
        return self._sequence

    def _check(self, p: Callable[[T], Any]) -> CheckResult:
        subject = format_value(self._sequence)
        description = describe(p)
        passed = any(evaluate(p, each) for each in self._sequence)
        logger.debug(
            "expect at least one of [%s] to [%s]: %s", subject, description, "met" if passed else "unmet"
        )
        return CheckResult(
            mode=self.mode,
            subject=subject,
            predicate=description,
            passed=passed,
            message=None if passed else f"No item from sequence [{subject}] satisfied [{description}]",
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._sequence)!r})"


def expect(target: T) -> Single[T]:
    """Establish ``target`` as a test subject against which expectations can be set.

    Example:
        >>> expect("foo").to(lambda s: s.startswith("f")).must(be("foo"))
    """
    return Single(target)


def expect_every(sequence: Iterable[T]) -> EachOf[T]:
    """Establish the elements of ``sequence`` as test subjects, all of which must meet expectations.

    Raises:
        TypeError: if ``sequence`` is not iterable, or is a string.
    """
    return EachOf(sequence)


expect_each_of = expect_every


def expect_at_least_one_of(sequence: Iterable[T]) -> AtLeastOneOf[T]:
    """Establish the elements of ``sequence`` as test subjects, at least one of which must meet expectations.

    Raises:
        TypeError: if ``sequence`` is not iterable, or is a string.
    """
    return AtLeastOneOf(sequence)
