"""Segment handles: the read/write capability token passed to every storage operation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SegmentHandle:
    """Identifies a segment and whether the holder may write to it.

    The mode is fixed at creation; build a new handle for the other mode.
    """

    segment_name: str
    is_read_only: bool

    @classmethod
    def for_read(cls, segment_name: str) -> SegmentHandle:
        return cls(segment_name, True)

    @classmethod
    def for_write(cls, segment_name: str) -> SegmentHandle:
        return cls(segment_name, False)

    def __str__(self) -> str:
        mode = "read" if self.is_read_only else "write"
        return f"[{self.segment_name}, {mode}]"
