"""Command-line interface for svgdoc."""

import argparse
import sys
from pathlib import Path
from typing import Callable, Iterable, Optional

from .document import Document
from .io_utils import text_digest, warn, write_document
from .scene import DEMOS, SceneError, build_document, load_scene


def _render_checked(make_document: Callable[[], Document], *, check: bool) -> str:
    """Render a freshly built document; with ``check`` render twice and compare."""
    output = make_document().render_to_string()
    if check:
        again = make_document().render_to_string()
        if text_digest(output) != text_digest(again):
            raise SystemExit("Determinism check failed: outputs differ between runs")
        warn("Determinism check passed.")
    return output


def _emit(output: str, out_path: Optional[str]) -> None:
    if out_path is None:
        sys.stdout.write(output)
        return
    written = write_document(out_path, output)
    print(f"Wrote {written}")


def _handle_render(args: argparse.Namespace) -> None:
    scene_path = Path(args.scene)
    try:
        scene = load_scene(scene_path)
    except (FileNotFoundError, SceneError) as exc:
        raise SystemExit(str(exc)) from exc

    output = _render_checked(lambda: build_document(scene), check=args.check)
    _emit(output, args.output)


def _handle_demo(args: argparse.Namespace) -> None:
    make_document = DEMOS.get(args.name)
    if make_document is None:
        raise SystemExit(
            f"Unknown demo '{args.name}'; available: {', '.join(sorted(DEMOS))}"
        )
    output = _render_checked(make_document, check=args.check)
    _emit(output, args.output)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="svgdoc",
        description="SVG document rendering utilities",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="svgdoc 0.1.0",
        help="Show the svgdoc version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a YAML scene to SVG.",
        description="Validate a scene description and render it as an SVG document.",
    )
    render_parser.add_argument(
        "--scene",
        required=True,
        help="Path to the scene YAML file.",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Path to write the SVG document (default: stdout).",
    )
    render_parser.add_argument(
        "--check",
        action="store_true",
        help="Render twice and fail if the outputs differ.",
    )
    render_parser.set_defaults(func=_handle_render)

    demo_parser = subparsers.add_parser(
        "demo",
        help="Render one of the built-in demo pictures.",
        description="Render a built-in demo document.",
    )
    demo_parser.add_argument(
        "name",
        help=f"Demo name ({', '.join(sorted(DEMOS))}).",
    )
    demo_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Path to write the SVG document (default: stdout).",
    )
    demo_parser.add_argument(
        "--check",
        action="store_true",
        help="Render twice and fail if the outputs differ.",
    )
    demo_parser.set_defaults(func=_handle_demo)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
