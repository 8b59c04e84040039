"""cProfile helpers for measuring search performance."""

from __future__ import annotations

import cProfile
import pstats
from pathlib import Path
from typing import Callable
import time

from .observer import record_search


def profile_searches(
    n: int,
    search_callback: Callable[[], object],
    out_path: str | Path = "search.prof",
) -> pstats.Stats:
    """Profile ``search_callback`` for ``n`` iterations and dump stats to ``out_path``.

    Parameters
    ----------
    n:
        Number of iterations to profile.
    search_callback:
        Function running one query, e.g. a ``find_range`` call.
    out_path:
        File to write cProfile data to.

    Returns
    -------
    pstats.Stats
        Profiling statistics for the execution.
    """

    path = Path(out_path)
    if not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
    profiler = cProfile.Profile()
    profiler.enable()
    for _ in range(n):
        start = time.perf_counter()
        search_callback()
        record_search(time.perf_counter() - start)
    profiler.disable()
    profiler.dump_stats(str(path))
    return pstats.Stats(profiler)


__all__ = ["profile_searches"]
