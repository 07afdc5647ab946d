"""Check result types shared by subjects and assumptions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, NoReturn, TypeVar
from uuid import UUID, uuid4

from pydantic import BaseModel, Field, SerializationInfo, field_serializer, field_validator

from lambspec.config import get_settings
from lambspec.context import get_check_results_collector

S = TypeVar("S")
Self_ = TypeVar("Self_", bound="Checkable[Any]")


class CheckMode(str, Enum):
    """How a subject applies a predicate to its binding."""

    SINGLE = "single"
    EACH_OF = "each_of"
    AT_LEAST_ONE_OF = "at_least_one_of"
    ASSUMPTION = "assumption"


class CheckResult(BaseModel):
    """Result of applying one predicate to a subject.

    Attributes
    ----------
    id
        Unique identifier for this result instance.
    timestamp
        UTC time the check was evaluated.
    mode
        How the predicate was applied.
    subject
        Formatted bound value (or sequence).
    predicate
        Description of the predicate.
    passed
        Whether the check was met.
    message
        Failure message, ``None`` when the check passed.
    offending
        Formatted element that failed an ``each_of`` check.

    Notes
    -----
    - ``bool(result)`` is equivalent to ``result.passed``.
    - ``repr(result)`` returns JSON with ``None`` fields excluded and
      truncation enabled for long ``subject`` strings.
    - Creating a result appends it to the active
      :func:`~lambspec.context.check_results_collector`, if any.
    """

    id: UUID = Field(default_factory=uuid4)
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    mode: CheckMode
    subject: str
    predicate: str
    passed: bool
    message: str | None = None
    offending: str | None = None

    @field_validator("subject")
    @classmethod
    def _limit_subject(cls, v: str) -> str:
        limit = get_settings().max_value_length
        if limit is not None and len(v) > limit:
            return v[: limit - 3] + "..."
        return v

    @field_serializer("subject")
    def _truncate(self, v: str, info: SerializationInfo) -> str:
        ctx = info.context or {}
        if ctx.get("truncate"):
            max_len = 50
            return v if len(v) <= max_len else v[:max_len] + "..."
        return v

    def model_post_init(self, __context: Any) -> None:
        if not get_settings().record_results:
            return
        collector = get_check_results_collector()
        if collector is not None:
            collector.append(self)

    def __repr__(self) -> str:
        return self.model_dump_json(
            indent=2,
            exclude_none=True,
            context={"truncate": True},
        )

    def __bool__(self) -> bool:
        return self.passed


class Checkable(ABC, Generic[S]):
    """Fluent chain of checks against a binding.

    Subclasses implement :meth:`_check` to evaluate one predicate and return
    a :class:`CheckResult`, and :meth:`_raise` to turn a failed result into
    the exception kind they signal.
    """

    def to(self: Self_, p: Callable[[Any], Any]) -> Self_:
        """Establish an expectation on the binding.

        Parameters
        ----------
        p
            A predicate that represents the expectation.

        Returns
        -------
        Self
            The same object, so that checks can be chained.
        """
        if not callable(p):
            raise TypeError(f"predicate must be callable, got {type(p).__name__}")
        result = self._check(p)
        if not result.passed:
            self._raise(result)
        return self

    must = to

    @abstractmethod
    def _check(self, p: Callable[[Any], Any]) -> CheckResult:
        """Evaluate ``p`` against the binding."""

    @abstractmethod
    def _raise(self, result: CheckResult) -> NoReturn:
        """Signal a failed check."""
