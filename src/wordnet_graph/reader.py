"""Line reading for WNDB data files."""

from __future__ import annotations

from collections.abc import Iterator
from typing import BinaryIO


def iter_records(stream: BinaryIO) -> Iterator[tuple[int, int, bytes]]:
    """Yield ``(line_number, byte_offset, data)`` for every line.

    Line numbers start at 1. ``data`` excludes the trailing newline; a
    final line without a newline is still yielded, an empty one is not.
    """
    offset = 0
    for number, raw in enumerate(stream, start=1):
        data = raw[:-1] if raw.endswith(b"\n") else raw
        if data.endswith(b"\r"):
            data = data[:-1]
        yield number, offset, data
        offset += len(raw)

