from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from lambspec.assertions._base import CheckResult


CHECK_RESULTS_COLLECTOR: ContextVar[list[CheckResult] | None] = ContextVar(
    "check_results_collector", default=None
)


def get_check_results_collector() -> list[CheckResult] | None:
    """Get the list collecting check results, or None outside a collector."""
    return CHECK_RESULTS_COLLECTOR.get()


@contextmanager
def check_results_collector(ctx: list[CheckResult]) -> Iterator[list[CheckResult]]:
    """Append every check result produced inside the ``with`` block to ``ctx``.

    Parameters
    ----------
    ctx : list[CheckResult]
        The list receiving results. Passing and failing checks are both
        recorded, in evaluation order.
    """
    token = CHECK_RESULTS_COLLECTOR.set(ctx)
    try:
        yield ctx
    finally:
        CHECK_RESULTS_COLLECTOR.reset(token)
