from __future__ import annotations

from pathlib import Path
from typing import Callable, Iterable, Tuple

import pytest
from PIL import Image


@pytest.fixture
def make_sheet(tmp_path: Path) -> Callable[..., Path]:
    """Write a font sheet PNG, optionally lighting the given pixels."""

    def _make(
        width: int,
        height: int,
        lit: Iterable[Tuple[int, int]] = (),
        background: int = 0,
        mode: str = "L",
        name: str = "sheet.png",
    ) -> Path:
        image = Image.new("L", (width, height), color=background)
        for xy in lit:
            image.putpixel(xy, 255)
        path = tmp_path / name
        image.convert(mode).save(path)
        return path

    return _make
