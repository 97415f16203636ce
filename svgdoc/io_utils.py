"""Utility helpers for YAML and SVG file IO, digests and logging."""

from __future__ import annotations

import hashlib
import sys
from pathlib import Path
from typing import Any

import yaml


def read_yaml(path: Path) -> Any:
    with path.open("r", encoding="utf-8") as fh:
        return yaml.safe_load(fh)


def text_digest(text: str) -> str:
    """SHA-256 of the UTF-8 encoded text, used to compare render runs."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def write_document(path: Path | str, text: str) -> Path:
    """Write rendered SVG text as UTF-8, creating missing parent directories."""
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(text, encoding="utf-8")
    return target


def warn(msg: str) -> None:
    print(msg, file=sys.stderr)
