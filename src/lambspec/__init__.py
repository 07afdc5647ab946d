"""Lambspec - fluent expectations built from plain predicates."""

from .assertions import (
    Assumption,
    CheckMode,
    CheckResult,
    Subject,
    assume,
    expect,
    expect_at_least_one_of,
    expect_each_of,
    expect_every,
)
from .context import check_results_collector
from .predicates import (
    DescriptivePredicate,
    Predicate,
    always_false,
    always_true,
    apply_to,
    be,
    describe,
    have,
    have_an_item_satisfying,
    match,
    meet,
    not_,
    satisfy,
    satisfy_all,
    satisfy_any,
)
from .testing import AssumptionViolatedError, ExpectationFailedError
from .version import __version__


__all__ = [
    # Subjects
    "Subject",
    "expect",
    "expect_every",
    "expect_each_of",
    "expect_at_least_one_of",
    # Assumptions
    "Assumption",
    "assume",
    # Predicates
    "Predicate",
    "DescriptivePredicate",
    "describe",
    "meet",
    "satisfy",
    "satisfy_all",
    "satisfy_any",
    "not_",
    "be",
    "have",
    "have_an_item_satisfying",
    "always_true",
    "always_false",
    # Adapters
    "apply_to",
    "match",
    # Outcomes
    "ExpectationFailedError",
    "AssumptionViolatedError",
    # Results
    "CheckMode",
    "CheckResult",
    "check_results_collector",
]
