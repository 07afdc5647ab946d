"""Adapters from foreign predicate-like objects to lambspec predicates."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from lambspec.predicates.base import DescriptivePredicate, describe, evaluate

if TYPE_CHECKING:
    from hamcrest.core.matcher import Matcher

logger = logging.getLogger(__name__)


def apply_to(adapted: Any) -> DescriptivePredicate[Any]:
    """Adapt a predicate object that answers through ``apply(value)``.

    Objects exposing ``apply`` (the style of many rule and specification
    libraries) are evaluated through that method; plain callables are
    called directly. The description is derived from the adapted object
    itself, so a class overriding ``__str__`` keeps its wording.

    Parameters
    ----------
    adapted
        An object with an ``apply`` method, or any callable.

    Returns
    -------
    DescriptivePredicate
        A predicate forwarding evaluation to ``adapted``.

    Raises
    ------
    TypeError
        If ``adapted`` has neither a callable ``apply`` nor ``__call__``.
    """
    apply = getattr(adapted, "apply", None)
    if callable(apply):
        target = apply
    elif callable(adapted):
        target = adapted
    else:
        raise TypeError(f"cannot adapt {type(adapted).__name__} as a predicate")

    def forward(value: Any) -> bool:
        return evaluate(target, value)

    description = describe(adapted)
    logger.debug("Adapted %s as predicate: %s", type(adapted).__name__, description)
    return DescriptivePredicate(description, forward)


def match(matcher: Matcher[Any]) -> DescriptivePredicate[Any]:
    """Adapt a PyHamcrest matcher.

    Evaluation forwards to ``matcher.matches``; the description is the one
    the matcher writes for itself (e.g. ``a string starting with 'd'``).

    Requires the ``hamcrest`` extra (``pip install lambspec[hamcrest]``).

    Example:
        >>> from hamcrest import starts_with
        >>> expect("foo").to(match(starts_with("f")))
    """
    from hamcrest.core.matcher import Matcher as HamcrestMatcher
    from hamcrest.core.string_description import StringDescription

    if not isinstance(matcher, HamcrestMatcher):
        raise TypeError(f"expected a hamcrest Matcher, got {type(matcher).__name__}")

    def matches(value: Any) -> bool:
        return bool(matcher.matches(value))

    description = str(StringDescription().append_description_of(matcher))
    return DescriptivePredicate(description, matches)
