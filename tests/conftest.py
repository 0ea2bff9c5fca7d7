"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from glyphraster.blocks import GeometryRegistry


@pytest.fixture
def registry() -> GeometryRegistry:
    """A fresh registry with nothing built yet."""
    return GeometryRegistry()


@pytest.fixture
def corner_png(tmp_path: Path) -> Path:
    """4x4 white PNG with a black 2x2 square in the top-left corner."""
    img = Image.new("L", (4, 4), 255)
    for x in range(2):
        for y in range(2):
            img.putpixel((x, y), 0)
    path = tmp_path / "corner.png"
    img.save(path)
    return path
