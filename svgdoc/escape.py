"""Markup-safe text encoding and numeric formatting for SVG output."""

from __future__ import annotations

from typing import TextIO

_ENTITIES = {
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&apos;",
}


def escape_text(data: str) -> str:
    """Replace the five reserved XML characters with their entities."""
    return "".join(_ENTITIES.get(ch, ch) for ch in data)


def write_escaped(out: TextIO, data: str) -> None:
    # Runs of safe characters are written in one call.
    start = 0
    for index, ch in enumerate(data):
        entity = _ENTITIES.get(ch)
        if entity is None:
            continue
        if index > start:
            out.write(data[start:index])
        out.write(entity)
        start = index + 1
    if start < len(data):
        out.write(data[start:])


def format_number(value: float | int) -> str:
    """Format a number like a default-configured C++ output stream.

    Integers are written as-is; floats use ``%g`` with six significant digits,
    so ``40.0`` becomes ``40`` and ``59.51056516`` becomes ``59.5106``.
    """
    if isinstance(value, bool):
        return str(int(value))
    if isinstance(value, int):
        return str(value)
    return format(value, "g")


def write_attr(out: TextIO, name: str, value: object) -> None:
    """Write `` name="value"`` with a leading space and escaped value."""
    if isinstance(value, (int, float)):
        text = format_number(value)
    else:
        text = str(value)
    out.write(f' {name}="')
    write_escaped(out, text)
    out.write('"')
