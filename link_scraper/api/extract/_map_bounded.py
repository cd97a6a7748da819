"""Run independent sub-extractions on a bounded worker pool."""

from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TypeVar

T = TypeVar("T")
R = TypeVar("R")


def _map_bounded(func: Callable[[T], R], items: Sequence[T], max_workers: int) -> list[R]:
    """Apply ``func`` to every item, returning results in item order.

    Returns only after every call completed, so callers can merge the
    results behind a single barrier. Runs inline for a single worker or item.
    """
    if max_workers <= 1 or len(items) <= 1:
        return [func(item) for item in items]
    with ThreadPoolExecutor(max_workers=min(max_workers, len(items))) as executor:
        return list(executor.map(func, items))
