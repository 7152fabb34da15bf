"""Segmenter — split a slash-delimited string into path segments.

Used for both request paths and route patterns:

    "/users/andrew/"       -> ("users", "andrew")
    "//a///b?page=2"       -> ("a", "b")
    "" / "/" / "///"       -> ()

Everything from the first ``?`` onward is treated as a query string and
ignored. Segment counts are capped; exceeding the cap raises
SegmentCapacityError instead of truncating, since a truncated path could
produce a wrong routing decision.
"""

from __future__ import annotations

from itertools import islice
from typing import TYPE_CHECKING

from pathmatch._errors import SegmentCapacityError

if TYPE_CHECKING:
    from collections.abc import Iterator

MAX_PATH_SEGMENTS = 64


def iter_segments(path: str) -> Iterator[str]:
    """Yield the non-empty segments of *path* in order, lazily."""
    path, _, _ = path.partition("?")
    for part in path.split("/"):
        if part:
            yield part


def to_segments(
    path: str, capacity: int = MAX_PATH_SEGMENTS, *, source: str = "path"
) -> tuple[str, ...]:
    """Split *path* into a tuple of at most *capacity* segments.

    Raises:
        SegmentCapacityError: If *path* has more than *capacity* segments.
        ValueError: If *capacity* is not positive.
    """
    if capacity < 1:
        msg = f"segment capacity must be positive, got {capacity}"
        raise ValueError(msg)
    segments = tuple(islice(iter_segments(path), capacity + 1))
    if len(segments) > capacity:
        raise SegmentCapacityError(len(segments), capacity, source)
    return segments
