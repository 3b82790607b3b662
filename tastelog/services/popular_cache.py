"""Time-boxed cache for the popular-places aggregation."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_TTL_SECONDS = 300.0
DEFAULT_MIN_FETCH = 100


@dataclass(frozen=True)
class _Slot(Generic[T]):
    computed_at: float
    items: tuple[T, ...]


class PopularPlacesCache(Generic[T]):
    """Single-slot cache that serves any ``limit`` its last fetch can satisfy.

    A refresh always fetches at least ``min_fetch`` rows, so a later request
    for fewer items is answered from the same result. Writes to visits do not
    invalidate the slot; entries simply age out after ``ttl_seconds``.

    Two requests that miss at the same time both run the loader and the last
    one to finish owns the slot. The slot is swapped in a single assignment,
    so readers never see a half-written entry.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        min_fetch: int = DEFAULT_MIN_FETCH,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.min_fetch = min_fetch
        self._clock = clock
        self._slot: _Slot[T] | None = None

    def get(self, limit: int, loader: Callable[[int], Sequence[T]]) -> list[T]:
        """Return the first ``limit`` items, running ``loader`` on a miss.

        ``loader`` receives the number of rows to fetch. Its exceptions are
        not caught and leave the current slot untouched.
        """
        now = self._clock()
        slot = self._slot
        if slot is not None:
            age = now - slot.computed_at
            if age < self.ttl_seconds and len(slot.items) >= limit:
                logger.debug(
                    "popular places cache hit (%d cached, %.0fs left)",
                    len(slot.items),
                    self.ttl_seconds - age,
                )
                return list(slot.items[:limit])

        fetch_limit = max(limit, self.min_fetch)
        items = tuple(loader(fetch_limit))
        self._slot = _Slot(computed_at=now, items=items)
        logger.info("popular places cache refreshed (%d items)", len(items))
        return list(items[:limit])
