"""Font sheet to FIGlet conversion pipeline."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional, Tuple

from .errors import WriteError
from .extract_glyphs import (
    DEFAULT_BLANK,
    DEFAULT_PIXEL,
    CellGeometry,
    Font,
    FontConfig,
    extract_font,
)
from .figlet import render_font
from .load_image import load_image

PIXEL_ENV = "PNG2FLF_PIXEL"
BLANK_ENV = "PNG2FLF_BLANK"


def resolve_config(pixel: Optional[str] = None, blank: Optional[str] = None) -> FontConfig:
    """Combine command line values with environment defaults.

    Explicit values win, then PNG2FLF_PIXEL / PNG2FLF_BLANK, then the
    built-in characters.
    """
    if pixel is None:
        pixel = os.environ.get(PIXEL_ENV, DEFAULT_PIXEL)
    if blank is None:
        blank = os.environ.get(BLANK_ENV, DEFAULT_BLANK)
    return FontConfig.from_options(pixel=pixel, blank=blank)


def convert_font(
    input_path: Path,
    config: FontConfig = FontConfig(),
    verbose: bool = False,
) -> Tuple[Font, str]:
    """Decode, sample and serialize a font sheet without touching the output."""
    image = load_image(input_path)
    geometry = CellGeometry.from_image_size(
        image.width, image.height, config.columns, config.rows
    )
    if verbose:
        print(f"Character cell: {geometry.char_width}x{geometry.char_height}px")

    font = extract_font(image, config, geometry)
    return font, render_font(font)


def write_font(text: str, output_path: Path) -> Path:
    output_path = Path(output_path)
    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(text)
    except OSError as exc:
        raise WriteError(f"unable to write {output_path}: {exc}") from exc
    return output_path
