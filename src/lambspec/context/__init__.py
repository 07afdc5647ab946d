from .context import (
    CHECK_RESULTS_COLLECTOR,
    check_results_collector,
    get_check_results_collector,
)

__all__ = [
    "CHECK_RESULTS_COLLECTOR",
    "check_results_collector",
    "get_check_results_collector",
]
