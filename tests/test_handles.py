"""Tests for segment handles."""

from __future__ import annotations

import dataclasses

import pytest

from segstore.handles import SegmentHandle


def test_read_and_write_handles() -> None:
    read = SegmentHandle.for_read("seg-1")
    write = SegmentHandle.for_write("seg-1")
    assert read.is_read_only is True
    assert write.is_read_only is False
    assert read.segment_name == write.segment_name == "seg-1"


def test_value_equality() -> None:
    assert SegmentHandle.for_read("s") == SegmentHandle("s", True)
    assert SegmentHandle.for_read("s") != SegmentHandle.for_write("s")
    assert len({SegmentHandle.for_read("s"), SegmentHandle.for_read("s")}) == 1


def test_handles_are_immutable() -> None:
    handle = SegmentHandle.for_write("s")
    with pytest.raises(dataclasses.FrozenInstanceError):
        handle.is_read_only = True  # type: ignore[misc]


def test_str() -> None:
    assert str(SegmentHandle.for_read("a/b")) == "[a/b, read]"
