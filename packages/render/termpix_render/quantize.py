"""Per-tier mapping from raw RGB to a representable terminal color."""

from __future__ import annotations

from functools import lru_cache
from typing import Callable

from .models import RGB, Color, ColorTier, IndexedColor, RgbColor
from .palette import PALETTES, nearest_index


def _truecolor(rgb: RGB) -> Color:
    return RgbColor(*rgb)


@lru_cache(maxsize=65536)
def _indexed_256(rgb: RGB) -> Color:
    return IndexedColor(ColorTier.INDEXED_256, nearest_index(ColorTier.INDEXED_256, rgb))


@lru_cache(maxsize=4096)
def _basic_8(rgb: RGB) -> Color:
    return IndexedColor(ColorTier.BASIC_8, nearest_index(ColorTier.BASIC_8, rgb))


_MAPPERS: dict[ColorTier, Callable[[RGB], Color]] = {
    ColorTier.TRUECOLOR: _truecolor,
    ColorTier.INDEXED_256: _indexed_256,
    ColorTier.BASIC_8: _basic_8,
}


def quantize(tier: ColorTier, rgb: RGB) -> Color:
    r, g, b = rgb[0], rgb[1], rgb[2]
    return _MAPPERS[ColorTier(tier)]((int(r), int(g), int(b)))


def color_to_rgb(color: Color) -> RGB:
    """Reference RGB for a quantized color."""
    if isinstance(color, RgbColor):
        return color.rgb
    return PALETTES[color.tier][color.index]
