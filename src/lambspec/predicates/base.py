"""Base predicate protocol, descriptions and value formatting."""

from __future__ import annotations

import logging
import types
from collections.abc import Callable, Mapping, Sequence, Set
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar, runtime_checkable

from lambspec.config import get_settings

logger = logging.getLogger(__name__)

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Predicate(Protocol[T_contra]):
    """Callable protocol for predicates.

    A predicate takes a single value and answers whether the value meets
    some condition. Any callable fits: functions, lambdas, bound methods,
    ``functools.partial`` objects and instances defining ``__call__``.

    Predicates may describe themselves for failure messages either through
    a string ``description`` attribute or by overriding ``__str__``. See
    :func:`describe` for the full resolution order.
    """

    def __call__(self, value: T_contra, /) -> Any: ...


_NAMED_CALLABLE_TYPES = (
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
    types.MethodDescriptorType,
    types.MethodWrapperType,
    types.WrapperDescriptorType,
    type,
)


def _overrides_text(obj: Any) -> bool:
    cls = type(obj)
    return cls.__str__ is not object.__str__ or cls.__repr__ is not object.__repr__


def describe(predicate: Callable[..., Any]) -> str:
    """Return the human-readable description of a predicate.

    Resolution order:

    1. the description of a :class:`DescriptivePredicate`, exactly as given
       (even when empty), or any other non-empty ``description`` attribute;
    2. the qualified name of a named function, builtin, method or class,
       without the enclosing function scope of nested definitions;
    3. the configured anonymous placeholder for lambdas;
    4. ``str(predicate)`` when its class overrides ``__str__`` or ``__repr__``;
    5. the configured anonymous placeholder.

    Parameters
    ----------
    predicate
        Any callable used as a predicate.

    Returns
    -------
    str
        The description; non-empty unless supplied empty through :func:`meet`.
    """
    if isinstance(predicate, DescriptivePredicate):
        return predicate.description

    description = getattr(predicate, "description", None)
    if isinstance(description, str) and description:
        return description

    anonymous = get_settings().anonymous_description

    if isinstance(predicate, _NAMED_CALLABLE_TYPES):
        name = getattr(predicate, "__qualname__", None) or getattr(predicate, "__name__", None)
        if not name or name.endswith("<lambda>"):
            return anonymous
        return name.rpartition("<locals>.")[2]

    if _overrides_text(predicate):
        text = str(predicate)
        return text if text else anonymous

    return anonymous


def evaluate(predicate: Callable[[T], Any], value: T) -> bool:
    """Apply ``predicate`` to ``value`` and coerce the answer to ``bool``.

    Exceptions raised by the predicate propagate unchanged.
    """
    outcome = predicate(value)
    if not isinstance(outcome, bool):
        logger.debug(
            "Predicate %s returned %s, coercing to bool",
            describe(predicate),
            type(outcome).__name__,
        )
    return bool(outcome)


def _format(value: Any, seen: frozenset[int]) -> str:
    if isinstance(value, str):
        return value

    if isinstance(value, Mapping):
        if id(value) in seen:
            return "{...}"
        inner = seen | {id(value)}
        items = ", ".join(f"{_format(k, inner)}={_format(v, inner)}" for k, v in value.items())
        return "{" + items + "}"

    if isinstance(value, (Sequence, Set)) and not isinstance(value, (bytes, bytearray)):
        if id(value) in seen:
            return "[...]"
        inner = seen | {id(value)}
        return "[" + ", ".join(_format(each, inner) for each in value) + "]"

    return str(value)


def format_value(value: Any) -> str:
    """Render a value the way failure messages show it.

    Strings are rendered without quotes, sequences and sets as
    ``[e1, e2, ...]`` and mappings as ``{k=v, ...}``, recursively. Anything
    else uses ``str()``. The full text is returned; messages always carry
    the literal value.

    Examples
    --------
    >>> format_value(["foo", "fungo", "fare"])
    '[foo, fungo, fare]'
    >>> format_value({"a": [1, 2]})
    '{a=[1, 2]}'
    """
    return _format(value, frozenset())


@dataclass(frozen=True, slots=True, repr=False)
class DescriptivePredicate(Generic[T]):
    """A predicate with a description attached.

    Evaluation is delegated unchanged; the description replaces whatever the
    delegate would otherwise report. Use :func:`meet` to build one when a
    lambda-based expectation should fail with a readable message.

    Attributes
    ----------
    description
        Text reported in failure messages.
    delegate
        The predicate that decides the outcome.
    """

    description: str
    delegate: Callable[[T], Any]

    def __call__(self, value: T) -> bool:
        return evaluate(self.delegate, value)

    def __str__(self) -> str:
        return self.description

    def __repr__(self) -> str:
        return self.description


def meet(description: str, delegate: Callable[[T], Any]) -> DescriptivePredicate[T]:
    """Make a predicate that delegates to another and reports ``description``.

    Example:
        >>> starts_with_d = meet("a string that starts with [d]", lambda s: s.startswith("d"))
        >>> str(starts_with_d)
        'a string that starts with [d]'

    Raises:
        TypeError: if ``description`` is not a string or ``delegate`` is not callable.
    """
    if not isinstance(description, str):
        raise TypeError(f"description must be a str, got {type(description).__name__}")
    if not callable(delegate):
        raise TypeError(f"delegate must be callable, got {type(delegate).__name__}")
    return DescriptivePredicate(description, delegate)
