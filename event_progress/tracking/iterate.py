"""Loop helpers that drive a :class:`ProgressTracker` from an iterable.

Examples
--------
>>> import io
>>> out = io.StringIO()
>>> total = 0
>>> for x in track(range(5), "sum", stream=out):
...     total += x
>>> total
10
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, Optional, Tuple, TypeVar

import pandas as pd

from event_progress.tracking.tracker import ProgressTracker


T = TypeVar("T")


def track(
    items: Iterable[T],
    label: str = "",
    total: Optional[int] = None,
    *,
    tracker: Optional[ProgressTracker] = None,
    **tracker_kwargs: Any,
) -> Iterator[T]:
    """Iterate over ``items`` and report progress after each one is processed.

    The tick for item ``i`` happens when the consumer asks for item ``i+1``
    (or finishes the loop), i.e. after the work on item ``i`` is done.

    Parameters
    ----------
    items:
        Records to iterate over.
    label:
        Task label printed at the start of each line.
    total:
        Number of items. Defaults to ``len(items)``.
    tracker:
        Existing tracker to drive. When given, ``total`` and ``tracker_kwargs``
        are ignored.
    tracker_kwargs:
        Passed to :class:`ProgressTracker` (``max_decades``, ``stream``, ...).

    Raises
    ------
    TypeError
        At call time, if ``items`` has no ``len()`` and ``total`` is not given.
    """
    if tracker is None:
        if total is None:
            try:
                total = len(items)  # type: ignore[arg-type]
            except TypeError:
                raise TypeError("total is required for iterables without len()") from None
        if total <= 0:
            # Nothing to report on; still pass items through.
            return iter(items)
        tracker = ProgressTracker(total, **tracker_kwargs)
    return _ticking(items, label, tracker)


def _ticking(items: Iterable[T], label: str, tracker: ProgressTracker) -> Iterator[T]:
    for i, item in enumerate(items):
        yield item
        tracker.tick(i, label)


def track_frame(
    df: pd.DataFrame,
    label: str = "",
    *,
    index: bool = True,
    name: Optional[str] = "Record",
    **kwargs: Any,
) -> Iterator[Tuple[Any, ...]]:
    """Iterate the rows of ``df`` as named tuples with progress reporting.

    Each row is one record of the batch stream; ``index`` and ``name`` are
    forwarded to :meth:`pandas.DataFrame.itertuples`.
    """
    return track(df.itertuples(index=index, name=name), label, total=len(df), **kwargs)
