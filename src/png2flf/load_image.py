"""Font sheet decoding."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from PIL import Image

from .errors import DecodeError


@dataclass(frozen=True)
class SheetImage:
    image: Image.Image  # mode "L"

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    def luminance(self, x: int, y: int) -> int:
        return self.image.getpixel((x, y))


def load_image(path: Path) -> SheetImage:
    """Decode an image file into 8-bit luma samples.

    Pillow's "L" conversion applies the ITU-R 601-2 weights, so any pixel
    with a non-zero luma counts as lit. The whole file is decoded here, so a
    truncated image fails before any sampling starts.
    """
    path = Path(path)
    if not path.is_file():
        raise DecodeError(f"input image not found at {path}")

    try:
        with Image.open(path) as source:
            image = source.convert("L")
    except (OSError, Image.DecompressionBombError) as exc:
        raise DecodeError(f"unable to decode image {path}: {exc}") from exc

    return SheetImage(image=image)
