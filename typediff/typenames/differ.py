"""Shortest distinguishing dotted suffixes of two type names."""

from __future__ import annotations

from typing import Sequence

__all__ = ["diff_suffixes", "shorten_type_names"]


def diff_suffixes(segments_a: Sequence[str], segments_b: Sequence[str]) -> tuple[str, str]:
    """Return the shortest trailing fragments that tell two segment paths apart.

    Segments are compared from the right in lock-step and the scan never goes
    past the start of the shorter sequence.  The first unequal pair decides the
    cut: each side keeps its own segments from that index onward, dot-joined.
    Without a divergence (identical paths, or one path a dotted suffix of the
    other) both sides fall back to their bare last segment.

    >>> diff_suffixes(["NS", "A", "Dummy"], ["NS", "B", "Dummy"])
    ('A.Dummy', 'B.Dummy')
    >>> diff_suffixes(["NS", "Dummy"], ["Other", "NS", "Dummy"])
    ('Dummy', 'Dummy')
    """

    if not segments_a or not segments_b:
        raise ValueError("segment sequences must not be empty")

    index_a = len(segments_a) - 1
    index_b = len(segments_b) - 1
    while index_a >= 0 and index_b >= 0:
        if segments_a[index_a] != segments_b[index_b]:
            return ".".join(segments_a[index_a:]), ".".join(segments_b[index_b:])
        index_a -= 1
        index_b -= 1
    return segments_a[-1], segments_b[-1]


def shorten_type_names(name_a: str, name_b: str) -> tuple[str, str]:
    """String form of :func:`diff_suffixes` for plain dotted names."""

    return diff_suffixes(name_a.split("."), name_b.split("."))
