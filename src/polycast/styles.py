"""Render style save/load for JSON files."""

from __future__ import annotations

import json
from pathlib import Path

from polycast.model import RenderStyle


def save_style(path: str | Path, style: RenderStyle) -> None:
    """Save a :class:`RenderStyle` to a JSON file.

    Only non-default fields are written.  The file is human-readable
    with two-space indentation.
    """
    data = {"render_style": style.to_dict()}
    Path(path).write_text(json.dumps(data, indent=2) + "\n")


def load_style(path: str | Path) -> RenderStyle:
    """Load a :class:`RenderStyle` from a JSON file.

    The ``"render_style"`` section is optional; a file without it
    yields the default style.

    Raises:
        ValueError: If the file contains unknown top-level keys or
            unknown style fields.
    """
    data = json.loads(Path(path).read_text())

    unknown = set(data) - {"render_style"}
    if unknown:
        raise ValueError(
            f"unknown top-level keys in style file: {sorted(unknown)}"
        )
    return RenderStyle.from_dict(data.get("render_style", {}))
