from __future__ import annotations

"""Fixed-size collection helper."""

from itertools import islice
from typing import Iterable, Optional, Tuple, TypeVar


T = TypeVar("T")


def take_exact(items: Iterable[T], n: int) -> Optional[Tuple[T, ...]]:
    """Draw exactly ``n`` items from ``items``.

    Returns a tuple of the first ``n`` items, or ``None`` when fewer than
    ``n`` are available. Any remaining items are left unconsumed.
    """
    if n < 0:
        raise ValueError("n must be non-negative.")
    drawn = tuple(islice(items, n))
    if len(drawn) < n:
        return None
    return drawn
