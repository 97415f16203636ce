"""Verify the structure and layout of a rendered SVG document."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from bs4 import BeautifulSoup, Tag

from svgdoc.document import INDENT_STEP, SVG_CLOSE_TAG, SVG_OPEN_TAG, XML_DECLARATION

ALLOWED_TAGS = {"circle", "polyline", "text"}
SVG_NAMESPACE = "http://www.w3.org/2000/svg"


def _opens_tag(line: str) -> bool:
    return line.lstrip(" ").startswith("<")


def _check_layout(lines: list[str], errors: list[str]) -> None:
    if len(lines) < 3:
        errors.append(f"Document too short: {len(lines)} line(s)")
        return
    if lines[0] != XML_DECLARATION:
        errors.append(f"Unexpected XML declaration: {lines[0]!r}")
    if lines[1] != SVG_OPEN_TAG:
        errors.append(f"Unexpected root tag: {lines[1]!r}")
    if lines[-1] != SVG_CLOSE_TAG:
        errors.append(f"Unexpected closing tag: {lines[-1]!r}")

    prefix = " " * INDENT_STEP
    for number, line in enumerate(lines[2:-1], start=3):
        # Other lines continue the content of a multi-line <text>.
        if not _opens_tag(line):
            continue
        if not line.startswith(prefix) or line[INDENT_STEP:INDENT_STEP + 1] == " ":
            errors.append(f"Line {number}: expected {INDENT_STEP}-space indent: {line!r}")


def _check_tree(text: str, element_lines: int, errors: list[str]) -> None:
    soup = BeautifulSoup(text, "html.parser")
    root = soup.find("svg")
    if not isinstance(root, Tag):
        errors.append("No <svg> root element found")
        return
    if root.get("xmlns") != SVG_NAMESPACE:
        errors.append(f"Unexpected namespace: {root.get('xmlns')!r}")

    children = [child for child in root.children if isinstance(child, Tag)]
    for child in children:
        if child.name not in ALLOWED_TAGS:
            errors.append(f"Unknown element <{child.name}>")
    if len(children) != element_lines:
        errors.append(
            f"Element count mismatch: {len(children)} parsed vs {element_lines} line(s)"
        )


def verify_svg(path: Path) -> list[str]:
    errors: list[str] = []
    if not path.exists():
        return [f"SVG file not found: {path}"]

    text = path.read_text(encoding="utf-8")
    lines = text.split("\n")
    _check_layout(lines, errors)
    element_lines = sum(1 for line in lines[2:-1] if _opens_tag(line))
    _check_tree(text, element_lines, errors)
    return errors


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Verify rendered SVG document layout.")
    parser.add_argument("--file", required=True, help="Rendered SVG file to check")
    args = parser.parse_args(argv)

    path = Path(args.file)
    errors = verify_svg(path)
    if errors:
        for message in errors:
            print(message, file=sys.stderr)
        return 1

    print(f"Verified SVG document at {path}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
