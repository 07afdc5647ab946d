"""Demonstrates fluent expectations and assumptions with lambspec.

Run with pytest: unmet expectations fail the test, unmet assumptions skip it.
"""

import os

from lambspec import (
    assume,
    be,
    expect,
    expect_at_least_one_of,
    expect_every,
    have,
    meet,
    not_,
    satisfy_all,
    satisfy_any,
)


def starts_with(prefix: str):
    """Name lambda-based predicates so failures read well."""
    return meet(f"a string that starts with [{prefix}]", lambda s: s.startswith(prefix))


def test_single_value():
    expect("foo").to(starts_with("f")).must(not_(be("bar")))


def test_combined_predicates():
    expect("foo").to(satisfy_all(str.islower, starts_with("f")))
    expect("foo").to(satisfy_any(str.isdigit, starts_with("f")))


def test_sequences():
    expect_every(["foo", "fungo", "faro"]).to(starts_with("f"))
    expect_at_least_one_of(["a", "b", "c"]).to(be("b"))
    expect(["a", "b", "c"]).to(have("b")).to(have("c"))


def test_posix_only():
    """Skipped, not failed, where the assumption does not hold."""
    assume(os.sep).to(be("/"))

    expect("/tmp").to(starts_with(os.sep))
