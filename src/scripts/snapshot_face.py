"""
Headless snapshot of the watch face.

Renders one frame for a given instant and mode set through the matplotlib
surface and writes a PNG for quick inspection or visual diffing.

    python -m scripts.snapshot_face --at 2026-10-19T10:08:37 --stars --out screenshots/face.png
"""

from __future__ import annotations

import argparse
import logging
from datetime import datetime
from pathlib import Path
from typing import Sequence

from common.logging import setup_default_logging
from face.compositor import WatchFaceCompositor
from face.state import FaceState
from face.theme import list_themes, resolve_theme

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Render the watch face to a PNG.")
    p.add_argument(
        "--at", type=datetime.fromisoformat, default=None, help="ISO datetime (default: now)"
    )
    p.add_argument("--theme", default=None, choices=list_themes())
    p.add_argument("--stars", action="store_true", help="draw the twinkling star field")
    p.add_argument("--lume", action="store_true", help="lume mode (markers and hands only)")
    p.add_argument("--smooth", action="store_true", help="sweeping second hand")
    p.add_argument("--bezel", type=int, default=0, help="bezel rotation in clicks (120 per turn)")
    p.add_argument("--elapsed", type=float, default=0.0, help="seconds since start (star twinkle)")
    p.add_argument("--size", type=int, default=800, help="output edge length in px")
    p.add_argument("--background", default="#000000")
    p.add_argument("--out", default="screenshots/face.png")
    return p


def render_png(
    out_path: str | Path,
    *,
    at: datetime | None = None,
    theme: str | None = None,
    stars: bool = False,
    lume: bool = False,
    smooth: bool = False,
    bezel_clicks: int = 0,
    elapsed: float = 0.0,
    size_px: int = 800,
    background: object = "#000000",
) -> tuple[Path, int]:
    """1 フレームを PNG に書き出し、`(path, 描画数)` を返す。"""
    # matplotlib は重いので描画時にだけ読み込む
    from engine.render.mpl_surface import MatplotlibSurface
    from util.color import normalize_color

    state = FaceState(stars_enabled=stars, lume_mode=lume, smooth_seconds=smooth, elapsed=elapsed)
    state.rotate_bezel(bezel_clicks)
    profile = resolve_theme(theme)
    surface = MatplotlibSurface(size_px=size_px, background=normalize_color(background))
    count = WatchFaceCompositor().draw(surface, state, profile, at or datetime.now())
    path = surface.save(out_path)
    return path, count


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_default_logging()
    path, count = render_png(
        args.out,
        at=args.at,
        theme=args.theme,
        stars=args.stars,
        lume=args.lume,
        smooth=args.smooth,
        bezel_clicks=args.bezel,
        elapsed=args.elapsed,
        size_px=args.size,
        background=args.background,
    )
    logger.info("saved %s (%d shapes)", path, count)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
