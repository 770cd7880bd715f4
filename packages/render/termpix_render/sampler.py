"""Walks an image two rows at a time and turns each pixel pair into a glyph."""

from __future__ import annotations

from collections.abc import Iterator

from .models import (
    LOWER_HALF_BLOCK,
    PLAIN,
    TRANSPARENT,
    UPPER_HALF_BLOCK,
    ColorTier,
    GlyphSpan,
    Pixel,
    PixelBuffer,
    Style,
    VerticalAlignment,
    is_transparent,
)
from .quantize import quantize

NEWLINE = GlyphSpan("\n", PLAIN)
EMPTY_CELL = GlyphSpan(" ", PLAIN)


def pair_to_span(upper: Pixel, lower: Pixel, tier: ColorTier) -> GlyphSpan:
    if is_transparent(upper) and is_transparent(lower):
        return EMPTY_CELL
    if is_transparent(upper):
        return GlyphSpan(LOWER_HALF_BLOCK, Style(foreground=quantize(tier, lower[:3])))
    if is_transparent(lower):
        return GlyphSpan(UPPER_HALF_BLOCK, Style(foreground=quantize(tier, upper[:3])))
    return GlyphSpan(
        LOWER_HALF_BLOCK,
        Style(foreground=quantize(tier, lower[:3]), background=quantize(tier, upper[:3])),
    )


def row_pairs(
    buffer: PixelBuffer,
    alignment: VerticalAlignment = VerticalAlignment.PAD_TOP,
) -> Iterator[tuple[list[Pixel], list[Pixel]]]:
    """Yield (upper, lower) pixel rows in output order."""
    blank = [TRANSPARENT] * buffer.width
    odd = buffer.height % 2 == 1
    row = 0

    if odd and alignment == VerticalAlignment.PAD_BOTTOM:
        yield blank, buffer.row(0)
        row = 1

    while row + 1 < buffer.height:
        yield buffer.row(row), buffer.row(row + 1)
        row += 2

    if odd and alignment == VerticalAlignment.PAD_TOP:
        yield buffer.row(buffer.height - 1), blank


def sample(
    buffer: PixelBuffer,
    tier: ColorTier,
    alignment: VerticalAlignment = VerticalAlignment.PAD_TOP,
) -> Iterator[GlyphSpan]:
    for upper, lower in row_pairs(buffer, alignment):
        for top, bottom in zip(upper, lower):
            yield pair_to_span(top, bottom, tier)
        yield NEWLINE
