"""Half-block terminal rendering: quantization, sampling, emission, shell embedding."""

from .emitter import activation, delta, emit, emit_naive
from .models import (
    Color,
    ColorTier,
    GlyphSpan,
    IndexedColor,
    PixelBuffer,
    RgbColor,
    Style,
    VerticalAlignment,
)
from .palette import BASIC_8, BASIC_8_NAMES, XTERM_256
from .pipeline import ColorMode, HalfBlockRenderer
from .quantize import color_to_rgb, quantize
from .sampler import pair_to_span, sample
from .shell import auto_detect_script, echo_statement, escape

__all__ = [
    "BASIC_8",
    "BASIC_8_NAMES",
    "Color",
    "ColorMode",
    "ColorTier",
    "GlyphSpan",
    "HalfBlockRenderer",
    "IndexedColor",
    "PixelBuffer",
    "RgbColor",
    "Style",
    "VerticalAlignment",
    "XTERM_256",
    "activation",
    "auto_detect_script",
    "color_to_rgb",
    "delta",
    "echo_statement",
    "emit",
    "emit_naive",
    "escape",
    "pair_to_span",
    "quantize",
    "sample",
]
