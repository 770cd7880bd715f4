"""Typed models for the half-block rendering pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

Pixel = tuple[int, int, int, int]
RGB = tuple[int, int, int]

TRANSPARENT: Pixel = (0, 0, 0, 0)

UPPER_HALF_BLOCK = "▀"
LOWER_HALF_BLOCK = "▄"


class ColorTier(str, Enum):
    TRUECOLOR = "truecolor"
    INDEXED_256 = "256"
    BASIC_8 = "ansi"


class VerticalAlignment(str, Enum):
    # Only matters for odd heights: which end gets the transparent filler row.
    PAD_TOP = "top"
    PAD_BOTTOM = "bottom"


@dataclass(frozen=True)
class RgbColor:
    r: int
    g: int
    b: int

    @property
    def rgb(self) -> RGB:
        return (self.r, self.g, self.b)


@dataclass(frozen=True)
class IndexedColor:
    tier: ColorTier
    index: int


Color = Union[RgbColor, IndexedColor]


@dataclass(frozen=True)
class Style:
    foreground: Color | None = None
    background: Color | None = None

    @property
    def is_plain(self) -> bool:
        return self.foreground is None and self.background is None


PLAIN = Style()


@dataclass(frozen=True)
class GlyphSpan:
    text: str
    style: Style = PLAIN


@dataclass(frozen=True)
class PixelBuffer:
    """Decoded RGBA8 image, row-major, 4 bytes per pixel."""

    width: int
    height: int
    data: bytes

    def __post_init__(self) -> None:
        if self.width < 1 or self.height < 1:
            raise ValueError(f"Image dimensions must be positive, got {self.width}x{self.height}")
        expected = 4 * self.width * self.height
        if len(self.data) != expected:
            raise ValueError(
                f"RGBA8 data length {len(self.data)} does not match {self.width}x{self.height} (expected {expected})"
            )

    def pixel(self, x: int, y: int) -> Pixel:
        i = 4 * (y * self.width + x)
        d = self.data
        return (d[i], d[i + 1], d[i + 2], d[i + 3])

    def row(self, y: int) -> list[Pixel]:
        return [self.pixel(x, y) for x in range(self.width)]

    @classmethod
    def from_pixels(cls, rows: list[list[Pixel]]) -> PixelBuffer:
        height = len(rows)
        width = len(rows[0]) if rows else 0
        data = bytearray()
        for row in rows:
            if len(row) != width:
                raise ValueError("All rows must have the same width")
            for px in row:
                data.extend(px)
        return cls(width=width, height=height, data=bytes(data))


def is_transparent(pixel: Pixel) -> bool:
    return pixel[3] == 0
