"""Predicates and predicate combinators."""

from .base import DescriptivePredicate, Predicate, describe, evaluate, format_value, meet
from .combinators import (
    always_false,
    always_true,
    be,
    have,
    have_an_item_satisfying,
    not_,
    satisfy,
    satisfy_all,
    satisfy_any,
)
from .adapters import apply_to, match

__all__ = [
    # Predicate abstractions
    "Predicate",
    "DescriptivePredicate",
    "describe",
    "evaluate",
    "format_value",
    "meet",
    # Combinators
    "always_false",
    "always_true",
    "be",
    "have",
    "have_an_item_satisfying",
    "not_",
    "satisfy",
    "satisfy_all",
    "satisfy_any",
    # Adapters
    "apply_to",
    "match",
]
