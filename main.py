from __future__ import annotations

import argparse

from api import list_themes, run


def main() -> None:
    p = argparse.ArgumentParser(description="Analog dive watch face.")
    p.add_argument("--theme", default=None, choices=list_themes())
    p.add_argument("--fps", type=int, default=None)
    p.add_argument("--size", type=int, default=None, help="initial window edge in px")
    p.add_argument("--stars", action="store_true", default=None)
    p.add_argument("--lume", action="store_true", default=None)
    p.add_argument("--smooth", action="store_true", default=None)
    args = p.parse_args()
    run(
        theme=args.theme,
        fps=args.fps,
        window_size=args.size,
        stars=args.stars,
        lume=args.lume,
        smooth=args.smooth,
    )


if __name__ == "__main__":
    main()
