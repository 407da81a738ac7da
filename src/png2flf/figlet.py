"""FIGlet font (.flf) serialization."""

from __future__ import annotations

from typing import List

from .extract_glyphs import Font, Glyph

SIGNATURE = "flf2a"
HARDBLANK = "$"
MAX_LENGTH = 20
OLD_LAYOUT = -1
BANNER = "Converted from a PNG font sheet by png2flf"
ENDMARK = "@"
# FIGlet expects 102 required characters: the 96 sheet glyphs plus 6 more.
PADDING_GLYPHS = 6


def comment_lines() -> List[str]:
    return [BANNER, ""]


def render_header(font: Font) -> str:
    # height and baseline are both the cell height
    return (
        f"{SIGNATURE}{HARDBLANK} {font.char_height} {font.char_height} "
        f"{MAX_LENGTH} {OLD_LAYOUT} {len(comment_lines())}"
    )


def render_glyph(glyph: Glyph) -> List[str]:
    rows = glyph.rows
    lines = [f"{row}{ENDMARK}" for row in rows[:-1]]
    lines.append(f"{rows[-1]}{ENDMARK}{ENDMARK}")
    return lines


def render_font(font: Font) -> str:
    """Render a populated font as the text of a FIGlet font file."""
    lines = [render_header(font)]
    lines.extend(comment_lines())

    glyphs = list(font.glyphs) + [font.glyphs[0]] * PADDING_GLYPHS
    for glyph in glyphs:
        lines.extend(render_glyph(glyph))

    return "\n".join(lines) + "\n"
