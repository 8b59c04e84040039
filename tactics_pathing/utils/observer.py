"""Runtime observability helpers for searches."""

from __future__ import annotations

import logging
import time
from collections import deque
from typing import Any, Callable, Deque, Dict, List, TypeVar

from ..systems.movement.nodes import Node

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Rolling history of the last 1000 search durations in seconds
_SEARCH_HISTORY_LEN = 1000
_search_durations: Deque[float] = deque(maxlen=_SEARCH_HISTORY_LEN)

# Global in-memory list for logged events when no destination is supplied
_events: List[Dict[str, Any]] = []


def record_search(duration: float) -> None:
    """Append a search ``duration`` in seconds to the rolling history."""

    _search_durations.append(duration)


def average_search_ms() -> float:
    """Return the mean recorded search time in milliseconds (0 if none)."""

    if not _search_durations:
        return 0.0
    return sum(_search_durations) / len(_search_durations) * 1000.0


def timed_search(search: Callable[..., T], *args: Any, **kwargs: Any) -> T:
    """Call ``search`` with the given arguments and record how long it took."""

    start = time.perf_counter()
    try:
        return search(*args, **kwargs)
    finally:
        record_search(time.perf_counter() - start)


def log_event(
    event_type: str,
    data: Dict[str, Any],
    log: List[Dict[str, Any]] | None = None,
) -> None:
    """Append an event dict to ``log`` or the internal event buffer."""

    event = {"type": event_type}
    event.update(data)
    if log is None:
        _events.append(event)
    else:
        log.append(event)


class RelaxationRecorder:
    """Observer that records every node the search relaxes.

    Pass an instance as ``observer`` to :class:`PathFinder`. Each relaxation
    becomes a ``relax`` event carrying the tile, its accumulated depth and the
    terrain cost of the tile.
    """

    def __init__(self, log: List[Dict[str, Any]] | None = None, verbose: bool = False) -> None:
        self.events: List[Dict[str, Any]] = [] if log is None else log
        self.verbose = verbose

    def __call__(self, node: Node) -> None:
        log_event(
            "relax",
            {"pos": node.pos, "depth": node.depth, "cost": node.cost},
            self.events,
        )
        if self.verbose:
            logger.debug("relaxed (%d,%d) depth=%s cost=%s", node.x, node.y, node.depth, node.cost)

    @property
    def order(self) -> List[tuple[int, int]]:
        """Tiles in the order they were relaxed."""
        return [event["pos"] for event in self.events]

    def clear(self) -> None:
        self.events.clear()


__all__ = [
    "record_search",
    "average_search_ms",
    "timed_search",
    "log_event",
    "RelaxationRecorder",
    "_search_durations",
    "_events",
]
