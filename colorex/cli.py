#!/usr/bin/env python3
"""
colorex CLI
Report the dominant palette colours of one image or every image in a folder.

Usage:
  colorex SRC [--limit N] [--palette "#hex,#hex"] [--palette-file FILE]
              [--width W] [--workers N] [--jobs N] [--json] [--debug]

Input:
  Any Pillow-readable image, or a folder of images (png, jpg, gif, webp, bmp).

Output:
  Text: one banner per file, then "hex  name: NN%" lines in rank order.
  JSON: {"file": [{"hex": ..., "match": ...}, ...]} (or {"file": {"error": ...}}).

Exit codes:
  0 ok, 1 at least one file failed, 2 bad arguments, SRC not found or bad palette.
"""

from __future__ import annotations

import argparse
import json
import os
import re
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .constants import DEFAULT_LIMIT, DOWNSCALE_WIDTH, IMAGE_EXTS
from .core_types import Result
from .errors import ColorexError, InvalidPalette
from .extract import extract_colors
from .palette_data import NAME_OF, build_palette
from .utils import (
    debug_log,
    enable_line_buffered_stdout,
    error,
    format_total_duration_compact,
    key_value_pairs_to_string,
    log,
    print_banner,
    print_config_line,
    result_report_lines,
    warn,
)

# CLI args & small helpers


def _default_workers() -> int:
    """Leave a few cores free for the system; returns a sensible worker count."""
    n = os.cpu_count() or 4
    reserve = 1 if n <= 6 else 2 if n <= 12 else 3 if n <= 18 else 4
    return max(1, n - reserve)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="colorex",
        description="Report the dominant colours of image(s) against a reference palette.",
    )
    parser.add_argument("src", type=Path, help="Input image or folder")
    parser.add_argument(
        "--limit",
        type=int,
        default=0,
        help=f"Max colours per image. 0 => {DEFAULT_LIMIT}.",
    )
    parser.add_argument(
        "--palette",
        type=str,
        default=None,
        help='Comma-separated hex colours, e.g. "#d50000,#ffffff". Omit for HTML4.',
    )
    parser.add_argument(
        "--palette-file",
        type=Path,
        default=None,
        help="File with one hex colour per line; other '#' lines and '//' lines are comments.",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=DOWNSCALE_WIDTH,
        help="Downscale width before matching.",
    )
    parser.add_argument(
        "--workers", type=int, default=_default_workers(), help="Internal scan threads"
    )
    parser.add_argument(
        "--jobs", type=int, default=1, help="Files processed in parallel"
    )
    parser.add_argument(
        "--inclusive-edges",
        action="store_true",
        help="Also scan one clamped row/column past the image bounds.",
    )
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    parser.add_argument("--debug", action="store_true", help="Verbose stage details")
    return parser


def parse_cli_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Parse CLI arguments.

    Returns:
      argparse.Namespace with:
        src: Path to image or folder
        limit: int, 0 for default
        palette / palette_file: optional palette sources
        width: downscale width
        workers: internal scan threads
        jobs: parallel file workers
        inclusive_edges, json, debug: bool
    """
    return build_parser().parse_args(argv)


_HEX_LINE = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def read_palette_file(path: Path) -> List[str]:
    """
    One hex per line. Blank lines, '//' lines and '#' lines that are not
    a '#rgb' / '#rrggbb' colour (e.g. '#brand', '# note') are skipped.
    """
    out: List[str] = []
    for raw in path.read_text(encoding="utf-8").splitlines():
        line = raw.strip()
        if not line or line.startswith("//"):
            continue
        if line.startswith("#") and not _HEX_LINE.fullmatch(line):
            continue
        out.append(line)
    return out


def collect_palette(args: argparse.Namespace) -> List[str]:
    """Merge --palette and --palette-file, in that order. Empty means default."""
    hexes: List[str] = []
    if args.palette:
        hexes.extend(h for h in (p.strip() for p in args.palette.split(",")) if h)
    if args.palette_file is not None:
        hexes.extend(read_palette_file(args.palette_file))
    return hexes


def list_images(folder: Path) -> List[Path]:
    files = [
        p
        for p in folder.iterdir()
        if p.is_file() and p.suffix.lower() in IMAGE_EXTS
    ]
    files.sort(key=lambda p: p.name.lower())
    return files


# Per-file processing

# (results or None, error text or None, seconds)
Outcome = Tuple[Optional[List[Result]], Optional[str], float]


def _extract_one(
    src_path: Path, args: argparse.Namespace, palette: List[str], debug: bool
) -> Outcome:
    """Run extraction on one file; ColorexError/OSError become an error string."""
    t_start = time.perf_counter()
    try:
        results = extract_colors(
            src_path,
            args.limit,
            palette,
            width=args.width,
            workers=args.workers,
            inclusive_edges=args.inclusive_edges,
            debug=debug,
        )
    except (ColorexError, OSError) as e:
        return None, f"{type(e).__name__}: {e}", time.perf_counter() - t_start
    return results, None, time.perf_counter() - t_start


def _report_one(src_path: Path, args: argparse.Namespace, outcome: Outcome) -> Tuple[bool, Any]:
    """
    Print the text report for one file (unless --json).

    Returns (ok, payload) where payload is the result dicts or an error dict.
    """
    results, err, seconds = outcome
    if err is not None or results is None:
        error(f"{src_path.name}: {err}")
        return False, {"error": err}

    if not args.json:
        if results:
            log("Colours:")
            for line in result_report_lines(results, NAME_OF):
                log(line)
        else:
            log("Colours: (none above 0%)")
        log(f"Total time {format_total_duration_compact(seconds)}")
    return True, [r.to_dict() for r in results]


# Entry point


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    CLI entry point.

    Handles single file or folder. In folder mode supports --jobs parallelism
    while preserving readable output ordering.
    """
    enable_line_buffered_stdout()
    args = parse_cli_args(argv)

    if args.limit < 0 or args.width <= 0:
        error("--limit must be >= 0 and --width must be > 0")
        return 2

    src: Path = args.src
    if not src.exists():
        error(f"not found: {src}")
        return 2

    try:
        palette = collect_palette(args)
        build_palette(palette)
    except (InvalidPalette, OSError) as e:
        error(f"palette: {e}")
        return 2

    if not args.json:
        print_config_line(
            "run",
            [
                ("Workers", args.workers),
                ("Jobs", args.jobs),
                ("Width", args.width),
                ("Palette", len(palette) or "html4"),
            ],
            debug=False,
        )

    files = list_images(src) if src.is_dir() else [src]
    if not files:
        warn(f"no images found in {src}")
    if args.debug and src.is_dir() and not args.json:
        debug_log(key_value_pairs_to_string([("Images", len(files))]))

    report: Dict[str, Any] = {}
    failures = 0
    if args.jobs <= 1 or len(files) <= 1:
        for p in files:
            if not args.json:
                print_banner(p.name)
            outcome = _extract_one(p, args, palette, args.debug and not args.json)
            ok, payload = _report_one(p, args, outcome)
            report[str(p)] = payload
            failures += 0 if ok else 1
    else:
        # Workers only compute; all printing stays on this thread, in file order.
        if args.debug and not args.json:
            debug_log("per-file stage details are off when --jobs > 1")
        with ThreadPoolExecutor(max_workers=args.jobs) as ex:
            outcomes = list(ex.map(lambda p: _extract_one(p, args, palette, False), files))
        for p, outcome in zip(files, outcomes):
            if not args.json:
                print_banner(p.name)
            ok, payload = _report_one(p, args, outcome)
            report[str(p)] = payload
            failures += 0 if ok else 1

    if args.json:
        print(json.dumps(report, indent=2), flush=True)
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
