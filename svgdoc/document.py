"""SVG document container and full-document rendering."""

from __future__ import annotations

import io
from abc import ABC, abstractmethod
from typing import Iterator, List, TextIO

from .context import RenderContext
from .elements import SvgObject

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8" ?>'
SVG_OPEN_TAG = '<svg xmlns="http://www.w3.org/2000/svg" version="1.1">'
SVG_CLOSE_TAG = "</svg>"
INDENT_STEP = 2


class ObjectContainer(ABC):
    """Anything that accepts SVG objects; the target of ``Drawable.draw``."""

    def add(self, obj: SvgObject) -> None:
        """Store an independent copy of ``obj``.

        The caller keeps its instance and may reuse it as a prototype; later
        changes to it do not reach the container.
        """
        self.add_ptr(obj.copy())

    @abstractmethod
    def add_ptr(self, obj: SvgObject) -> None:
        """Take ownership of ``obj`` itself; the caller must not touch it again."""
        raise NotImplementedError


class Document(ObjectContainer):
    def __init__(self) -> None:
        self._objects: List[SvgObject] = []

    def add_ptr(self, obj: SvgObject) -> None:
        self._objects.append(obj)

    def __len__(self) -> int:
        return len(self._objects)

    def __iter__(self) -> Iterator[SvgObject]:
        """Yield copies; owned objects never leave the document."""
        for obj in self._objects:
            yield obj.copy()

    def render(self, out: TextIO) -> None:
        out.write(XML_DECLARATION + "\n")
        out.write(SVG_OPEN_TAG + "\n")
        context = RenderContext(out, INDENT_STEP, INDENT_STEP)
        for obj in self._objects:
            obj.render(context)
        out.write(SVG_CLOSE_TAG)

    def render_to_string(self) -> str:
        buffer = io.StringIO()
        self.render(buffer)
        return buffer.getvalue()
