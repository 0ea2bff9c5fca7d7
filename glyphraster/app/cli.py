from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Tuple

from ..blocks import BlockError, block_types
from ..dump import dump
from ..render_job import RenderJobBuilder, RenderSettings

logger = logging.getLogger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="glyphraster",
        description="Render images and text as Unicode block glyphs, and decode them back.",
    )
    parser.add_argument("path", nargs="?", help="File to render (.png/.jpg/.gif/.bmp/.txt)")
    parser.add_argument("--text", metavar="TEXT", help="Render raw text instead of a file path")
    parser.add_argument("-t", "--type", default="", help="Block type name or verb (default: auto)")
    parser.add_argument("--width", type=int, help="Resize input to this pixel width")
    parser.add_argument("--no-dither", action="store_true", help="Threshold images instead of dithering")
    parser.add_argument("--invert", action="store_true", help="Swap set and clear pixels")
    parser.add_argument("--columns", type=int, help="Characters per line for text input (default: follows width)")
    parser.add_argument("--font", metavar="PATH", help="TrueType font for text input (default: system monospace)")
    parser.add_argument("-o", "--output", metavar="PATH", help="Write output here instead of stdout")
    parser.add_argument("--list-types", action="store_true", help="List block types and exit")
    parser.add_argument("--dump", metavar="TYPE", help="Print the glyph table for a block type and exit")
    parser.add_argument("--decode", metavar="FILE", help="Decode glyph text back to an image")
    parser.add_argument("--size", metavar="WxH", help="Raster size of the decoded image (required for --decode)")
    parser.add_argument("--scale", type=int, default=0, help="Pixel scale of the decoded image (default: 24)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def list_types() -> int:
    for typ in block_types():
        print(f"{typ.verb}  {typ.label}")
    return 0


def dump_type(name: str) -> int:
    dump(name, sys.stdout)
    return 0


def parse_size(value: str) -> Tuple[int, int]:
    try:
        width, height = (int(part) for part in value.lower().split("x"))
    except ValueError:
        raise ValueError(f"Invalid size {value!r}, expected WxH") from None
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid size {value!r}, both dimensions must be positive")
    return width, height


def decode_file(args: argparse.Namespace) -> int:
    if not args.size:
        raise ValueError("--decode requires --size WxH")
    if not args.output:
        raise ValueError("--decode requires --output")
    width, height = parse_size(args.size)
    settings = RenderSettings(block_type=args.type, scale_width=args.scale, scale_height=args.scale)
    RenderJobBuilder(settings).decode_file(args.decode, width, height).save(args.output)
    logger.debug("Wrote %s", args.output)
    return 0


def render(args: argparse.Namespace) -> int:
    settings = RenderSettings(
        block_type=args.type,
        width=args.width,
        dither=not args.no_dither,
        invert=args.invert,
        text_columns=args.columns,
        font_path=args.font,
    )
    builder = RenderJobBuilder(settings)
    if args.text is not None:
        output = builder.build_from_text(args.text)
    else:
        output = builder.build_from_file(args.path)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as handle:
            handle.write(output + "\n")
    else:
        print(output)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    try:
        if args.list_types:
            return list_types()
        if args.dump:
            return dump_type(args.dump)
        if args.decode:
            return decode_file(args)
        if args.path and args.text is not None:
            print("Provide either a file path or --text, not both. Use --help for usage.", file=sys.stderr)
            return 2
        if not args.path and args.text is None:
            print("Missing file path or --text. Use --help for usage.", file=sys.stderr)
            return 2
        return render(args)
    except (BlockError, OSError, ValueError) as exc:
        print(str(exc), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
