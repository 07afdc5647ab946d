"""Test outcome control flow."""

from .outcomes import AssumptionViolatedError, ExpectationFailedError, fail, skip


__all__ = [
    "AssumptionViolatedError",
    "ExpectationFailedError",
    "fail",
    "skip",
]
