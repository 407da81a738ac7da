"""Command line entry point for png2flf."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import find_dotenv, load_dotenv

from . import __version__
from .errors import Png2FlfError
from .pipeline import BLANK_ENV, PIXEL_ENV, convert_font, resolve_config, write_font

DESCRIPTION = """\
Convert a PNG font sheet to a FIGlet (.flf) font.

The sheet must be 16 monospaced characters wide and 6 characters tall,
starting with space and proceeding through ASCII. Pixels must be black
and white, with white (non-zero) pixels forming the glyphs.
"""


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="png2flf",
        description=DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-i", "--input", required=True, help="Input font sheet image.")
    parser.add_argument("-o", "--output", required=True, help="Output FIGlet font file.")
    parser.add_argument(
        "-p",
        "--pixel",
        default=None,
        help=f"Character for lit pixels (default: ${PIXEL_ENV} or '█'). Only the first character is used.",
    )
    parser.add_argument(
        "-b",
        "--blank",
        default=None,
        help=f"Character for unlit pixels (default: ${BLANK_ENV} or a space). Only the first character is used.",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the conversion from CLI arguments."""
    load_dotenv(find_dotenv(usecwd=True))
    args = parse_args(argv)
    input_path = Path(args.input).expanduser()
    output_path = Path(args.output).expanduser()

    try:
        config = resolve_config(args.pixel, args.blank)
        _, text = convert_font(input_path, config, verbose=True)
        written = write_font(text, output_path)
    except Png2FlfError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    print(f"Wrote FIGlet font to {written}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
