"""Fluent expectations and assumptions."""

from lambspec.assertions._base import Checkable, CheckMode, CheckResult
from lambspec.assertions.assumption import Assumption, assume
from lambspec.assertions.subject import (
    AtLeastOneOf,
    EachOf,
    Single,
    Subject,
    expect,
    expect_at_least_one_of,
    expect_each_of,
    expect_every,
)

__all__ = [
    "Checkable",
    "CheckMode",
    "CheckResult",
    "Subject",
    "Single",
    "EachOf",
    "AtLeastOneOf",
    "Assumption",
    "expect",
    "expect_every",
    "expect_each_of",
    "expect_at_least_one_of",
    "assume",
]
