"""Glyph extraction from a 16x6 font sheet."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .errors import InvalidCharacterConfig, InvalidDimensions
from .load_image import SheetImage

DEFAULT_PIXEL = "█"
DEFAULT_BLANK = " "
GRID_COLUMNS = 16
GRID_ROWS = 6


@dataclass(frozen=True)
class FontConfig:
    pixel_char: str = DEFAULT_PIXEL
    blank_char: str = DEFAULT_BLANK
    columns: int = GRID_COLUMNS
    rows: int = GRID_ROWS

    def __post_init__(self) -> None:
        for option, char in (("pixel", self.pixel_char), ("blank", self.blank_char)):
            if len(char) != 1:
                raise InvalidCharacterConfig(
                    f"{option} character must be a single character, got {char!r}"
                )

    @property
    def glyph_count(self) -> int:
        return self.columns * self.rows

    @classmethod
    def from_options(cls, pixel: str = DEFAULT_PIXEL, blank: str = DEFAULT_BLANK) -> "FontConfig":
        """Build a config keeping only the first character of each option."""
        if not pixel:
            raise InvalidCharacterConfig("pixel character must not be empty")
        if not blank:
            raise InvalidCharacterConfig("blank character must not be empty")
        return cls(pixel_char=pixel[0], blank_char=blank[0])


@dataclass(frozen=True)
class CellGeometry:
    char_width: int
    char_height: int

    @classmethod
    def from_image_size(
        cls,
        width: int,
        height: int,
        columns: int = GRID_COLUMNS,
        rows: int = GRID_ROWS,
    ) -> "CellGeometry":
        if width % columns != 0:
            raise InvalidDimensions(f"image width {width} is not divisible by {columns}")
        if height % rows != 0:
            raise InvalidDimensions(f"image height {height} is not divisible by {rows}")
        if width < columns or height < rows:
            raise InvalidDimensions(
                f"image {width}x{height} is smaller than the {columns}x{rows} glyph grid"
            )
        return cls(char_width=width // columns, char_height=height // rows)


@dataclass
class Glyph:
    width: int
    height: int
    cells: List[List[str]] = field(repr=False)

    @classmethod
    def blank(cls, width: int, height: int, blank_char: str = DEFAULT_BLANK) -> "Glyph":
        cells = [[blank_char] * width for _ in range(height)]
        return cls(width=width, height=height, cells=cells)

    def set(self, row: int, column: int, char: str) -> None:
        self.cells[row][column] = char

    @property
    def rows(self) -> List[str]:
        return ["".join(row) for row in self.cells]


@dataclass
class Font:
    char_width: int
    char_height: int
    glyphs: List[Glyph]

    @classmethod
    def blank(cls, geometry: CellGeometry, config: FontConfig) -> "Font":
        glyphs = [
            Glyph.blank(geometry.char_width, geometry.char_height, config.blank_char)
            for _ in range(config.glyph_count)
        ]
        return cls(
            char_width=geometry.char_width,
            char_height=geometry.char_height,
            glyphs=glyphs,
        )


def iter_cells(
    geometry: CellGeometry, config: FontConfig
) -> Iterator[Tuple[int, int, int, int, int]]:
    """Yield (glyph_index, local_y, local_x, x, y) in sheet scan order.

    Grid rows come first, then grid columns, then the pixels of each cell
    row by row. The cell size is the stride between neighbouring cells.
    """
    for glyph_y in range(config.rows):
        for glyph_x in range(config.columns):
            glyph_index = glyph_y * config.columns + glyph_x
            for local_y in range(geometry.char_height):
                for local_x in range(geometry.char_width):
                    x = glyph_x * geometry.char_width + local_x
                    y = glyph_y * geometry.char_height + local_y
                    yield glyph_index, local_y, local_x, x, y


def extract_font(
    image: SheetImage,
    config: FontConfig = FontConfig(),
    geometry: Optional[CellGeometry] = None,
) -> Font:
    if geometry is None:
        geometry = CellGeometry.from_image_size(
            image.width, image.height, config.columns, config.rows
        )
    font = Font.blank(geometry, config)

    for glyph_index, local_y, local_x, x, y in iter_cells(geometry, config):
        if image.luminance(x, y) != 0:
            char = config.pixel_char
        else:
            char = config.blank_char
        font.glyphs[glyph_index].set(local_y, local_x, char)

    return font
