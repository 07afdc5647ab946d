"""Sugar for building expectations out of other predicates."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from lambspec.predicates.base import DescriptivePredicate, describe, evaluate, format_value

logger = logging.getLogger(__name__)

T = TypeVar("T")
P = TypeVar("P", bound=Callable[..., Any])


def _require_callable(*predicates: Any) -> None:
    for each in predicates:
        if not callable(each):
            raise TypeError(f"predicate must be callable, got {type(each).__name__}")


def satisfy(p: P) -> P:
    """Return ``p`` unchanged.

    Reads better than a bare lambda when chaining::

        expect("foo").to(satisfy(lambda s: len(s) == 3))
    """
    return p


def satisfy_all(first: Callable[[T], Any], *rest: Callable[[T], Any]) -> DescriptivePredicate[T]:
    """Create the conjunction of one or more predicates.

    Predicates are evaluated left to right; evaluation stops at the first
    one that answers false.

    Parameters
    ----------
    first
        The first predicate to evaluate.
    *rest
        Zero or more further predicates.

    Returns
    -------
    DescriptivePredicate
        A predicate described as ``all of [d1, d2, ...]``.
    """
    predicates = (first, *rest)
    _require_callable(*predicates)

    def conjunction(value: T) -> bool:
        return all(evaluate(each, value) for each in predicates)

    description = "all of [" + ", ".join(describe(each) for each in predicates) + "]"
    logger.debug("Built conjunction: %s", description)
    return DescriptivePredicate(description, conjunction)


def satisfy_any(first: Callable[[T], Any], *rest: Callable[[T], Any]) -> DescriptivePredicate[T]:
    """Create the disjunction of one or more predicates.

    Predicates are evaluated left to right; evaluation stops at the first
    one that answers true.

    Parameters
    ----------
    first
        The first predicate to evaluate.
    *rest
        Zero or more further predicates.

    Returns
    -------
    DescriptivePredicate
        A predicate described as ``any of [d1, d2, ...]``.
    """
    predicates = (first, *rest)
    _require_callable(*predicates)

    def disjunction(value: T) -> bool:
        return any(evaluate(each, value) for each in predicates)

    description = "any of [" + ", ".join(describe(each) for each in predicates) + "]"
    logger.debug("Built disjunction: %s", description)
    return DescriptivePredicate(description, disjunction)


def not_(p: Callable[[T], Any]) -> DescriptivePredicate[T]:
    """Create the negation of a predicate."""
    _require_callable(p)

    def negation(value: T) -> bool:
        return not evaluate(p, value)

    return DescriptivePredicate(f"not [{describe(p)}]", negation)


def be(other: Any) -> DescriptivePredicate[Any]:
    """Create a predicate that answers whether its argument equals ``other``.

    Equality is value equality (``==``), not identity.
    """

    def equal_to(value: Any) -> bool:
        return bool(other == value)

    return DescriptivePredicate(f"equal to [{format_value(other)}]", equal_to)


def have_an_item_satisfying(p: Callable[[T], Any]) -> DescriptivePredicate[Iterable[T]]:
    """Create a predicate that answers whether any item of a sequence satisfies ``p``.

    The sequence is scanned in order and the scan stops at the first match.
    """
    _require_callable(p)

    def any_item(items: Iterable[T]) -> bool:
        for each in items:
            if evaluate(p, each):
                return True
        return False

    return DescriptivePredicate(f"a sequence with an item satisfying [{describe(p)}]", any_item)


def have(item: Any) -> DescriptivePredicate[Iterable[Any]]:
    """Create a predicate that answers whether ``item`` is in a sequence.

    Membership uses value equality, scanning in order.
    """
    contains = have_an_item_satisfying(be(item))
    return DescriptivePredicate(f"a sequence containing [{format_value(item)}]", contains.delegate)


always_true: DescriptivePredicate[Any] = DescriptivePredicate("anything", lambda value: True)
"""Predicate that answers true no matter its argument."""

always_false: DescriptivePredicate[Any] = DescriptivePredicate("nothing", lambda value: False)
"""Predicate that answers false no matter its argument."""
