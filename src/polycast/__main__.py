"""Command-line interface: ``python -m polycast``."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from polycast.defaults import DEFAULT_MODEL_SCALE, SOLIDS
from polycast.logging_config import setup_logging
from polycast.model import PolytopeScene, RenderStyle
from polycast.styles import load_style

logger = logging.getLogger("polycast.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="polycast",
        description="Ray-cast a convex solid from its vertices.",
    )
    parser.add_argument(
        "--solid", choices=sorted(SOLIDS), default="dodecahedron",
        help="Built-in vertex set to render (default: dodecahedron).",
    )
    parser.add_argument(
        "--model-scale", type=float, default=DEFAULT_MODEL_SCALE,
        help=f"Vertex scale (default: {DEFAULT_MODEL_SCALE}).",
    )
    parser.add_argument(
        "--style", default=None,
        help="JSON style file (see polycast.styles.save_style).",
    )
    parser.add_argument("--width", type=int, default=None)
    parser.add_argument("--height", type=int, default=None)
    parser.add_argument(
        "--workers", type=int, default=None,
        help="Threads sharing the pixel pass.",
    )
    parser.add_argument(
        "--angle", type=float, default=0.0,
        help="Rotation angle in radians for a single frame.",
    )
    parser.add_argument(
        "--animate", action="store_true",
        help="Animate the tumbling solid instead of rendering one frame.",
    )
    parser.add_argument(
        "--frames", type=int, default=None,
        help="Number of animation frames (required with --animate --output).",
    )
    parser.add_argument(
        "-o", "--output", default=None,
        help="Output image (or animation) file; omit to open a window.",
    )
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    style = load_style(args.style) if args.style else RenderStyle()
    overrides = {
        "width": args.width,
        "height": args.height,
        "n_workers": args.workers,
    }
    scene = PolytopeScene.from_solid(args.solid, args.model_scale, style)

    logger.info(
        "%s: %d vertices, %d planes",
        scene.title, len(scene.vertices), len(scene.polytope),
    )

    if args.animate:
        if args.output is not None and args.frames is None:
            logger.error("--frames is required when saving an animation")
            return 2
        scene.animate_mpl(
            n_frames=args.frames, output=args.output, **overrides,
        )
    else:
        scene.render_mpl(args.output, angle=args.angle, **overrides)
        if args.output is not None:
            logger.info("Rendered to %s", args.output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
