"""Composes sampling, emission and escaping into documents and shell scripts."""

from __future__ import annotations

import logging
import time
from enum import Enum

from .emitter import emit
from .models import ColorTier, PixelBuffer, VerticalAlignment
from .sampler import sample
from .shell import auto_detect_script, echo_statement

_LOG = logging.getLogger("termpix.render")

AUTO_DETECT_ORDER = (ColorTier.TRUECOLOR, ColorTier.INDEXED_256, ColorTier.BASIC_8)


class ColorMode(str, Enum):
    AUTO = "auto"
    TRUECOLOR = "truecolor"
    INDEXED_256 = "256"
    BASIC_8 = "ansi"

    @property
    def tier(self) -> ColorTier | None:
        if self is ColorMode.AUTO:
            return None
        return ColorTier(self.value)


class HalfBlockRenderer:
    """Renders pixel buffers as half-block text, raw or wrapped for a shell."""

    def __init__(self, alignment: VerticalAlignment = VerticalAlignment.PAD_TOP) -> None:
        self.alignment = VerticalAlignment(alignment)

    def render(self, buffer: PixelBuffer, tier: ColorTier) -> str:
        tier = ColorTier(tier)
        start = time.perf_counter()
        document = emit(sample(buffer, tier, self.alignment))
        elapsed_ms = (time.perf_counter() - start) * 1000.0
        _LOG.debug(
            "rendered %s variant %dx%d in %.1f ms",
            tier.value,
            buffer.width,
            buffer.height,
            elapsed_ms,
            extra={
                "event": "variant_rendered",
                "tier": tier.value,
                "alignment": self.alignment.value,
                "width": buffer.width,
                "height": buffer.height,
                "elapsed_ms": round(elapsed_ms, 3),
            },
        )
        return document

    def render_variants(self, buffer: PixelBuffer) -> dict[ColorTier, str]:
        return {tier: self.render(buffer, tier) for tier in AUTO_DETECT_ORDER}

    def script(self, buffer: PixelBuffer, mode: ColorMode = ColorMode.AUTO) -> str:
        mode = ColorMode(mode)
        if mode.tier is None:
            out = auto_detect_script(self.render_variants(buffer))
        else:
            out = echo_statement(self.render(buffer, mode.tier)) + "\n"
        _LOG.info(
            "built %s script for %dx%d image",
            mode.value,
            buffer.width,
            buffer.height,
            extra={
                "event": "script_built",
                "color_mode": mode.value,
                "alignment": self.alignment.value,
                "width": buffer.width,
                "height": buffer.height,
            },
        )
        return out
