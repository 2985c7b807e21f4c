"""Minimal in-process metrics shim for counters and histograms.

Histograms are exported into flattened counters by ``get_counters`` so the
CLI can dump everything as one JSON object.
"""

from __future__ import annotations

import threading
from collections import defaultdict

_counters: dict[str, int] = defaultdict(int)
_histograms: dict[str, dict[str, int]] = {}
_hist_sums: dict[str, int] = defaultdict(int)
_hist_counts: dict[str, int] = defaultdict(int)
# Rolls may run on several threads at once; every mutation and snapshot takes this.
_lock = threading.Lock()


def inc_counter(name: str, value: int = 1) -> None:
    with _lock:
        _counters[name] += int(value)


def get_counter(name: str) -> int:
    with _lock:
        return _counters.get(name, 0)


def reset_counters() -> None:
    with _lock:
        _counters.clear()
        _histograms.clear()
        _hist_sums.clear()
        _hist_counts.clear()


def get_counters() -> dict[str, int]:
    """Return a shallow copy of all counters, histograms flattened in."""
    with _lock:
        out = dict(_counters)
        for name, buckets in _histograms.items():
            for b_lbl, cnt in buckets.items():
                out[f"histo.{name}.{b_lbl}"] = cnt
            out[f"histo.{name}.sum"] = _hist_sums.get(name, 0)
            out[f"histo.{name}.count"] = _hist_counts.get(name, 0)
    return out


def observe_histogram(name: str, value: int, *, buckets: list[int] | None = None) -> None:
    """Record a value in a histogram with <=-style buckets.

    - buckets: upper bounds, ascending. Defaults to [1, 2, 5, 10, 20, 50, 100].
    - Values above the last bound land in 'gt_{last}'.
    """
    if buckets is None:
        buckets = [1, 2, 5, 10, 20, 50, 100]
    for ub in buckets:
        if value <= ub:
            key = f"le_{ub}"
            break
    else:
        key = f"gt_{buckets[-1]}"
    with _lock:
        h = _histograms.setdefault(name, {})
        h[key] = h.get(key, 0) + 1
        _hist_sums[name] += int(value)
        _hist_counts[name] += 1
