"""Indentation-aware render context."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TextIO


@dataclass(frozen=True)
class RenderContext:
    """Output sink plus the indentation state for one nesting level.

    The sink is borrowed for the duration of a render call. Nested levels are
    derived with :meth:`indented`, which returns a new context and leaves this
    one untouched.
    """

    out: TextIO
    indent_step: int = 0
    indent: int = 0

    def indented(self) -> "RenderContext":
        return replace(self, indent=self.indent + self.indent_step)

    def render_indent(self) -> None:
        if self.indent > 0:
            self.out.write(" " * self.indent)
