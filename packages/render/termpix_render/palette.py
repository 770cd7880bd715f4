"""Built-in color tables for indexed terminal color tiers."""

from __future__ import annotations

import numpy as np

from .models import RGB, ColorTier

# xterm defaults for the 16 system colors.
SYSTEM_16: tuple[RGB, ...] = (
    (0x00, 0x00, 0x00),
    (0x80, 0x00, 0x00),
    (0x00, 0x80, 0x00),
    (0x80, 0x80, 0x00),
    (0x00, 0x00, 0x80),
    (0x80, 0x00, 0x80),
    (0x00, 0x80, 0x80),
    (0xC0, 0xC0, 0xC0),
    (0x80, 0x80, 0x80),
    (0xFF, 0x00, 0x00),
    (0x00, 0xFF, 0x00),
    (0xFF, 0xFF, 0x00),
    (0x00, 0x00, 0xFF),
    (0xFF, 0x00, 0xFF),
    (0x00, 0xFF, 0xFF),
    (0xFF, 0xFF, 0xFF),
)

CUBE_LEVELS: tuple[int, ...] = (0x00, 0x5F, 0x87, 0xAF, 0xD7, 0xFF)


def _build_xterm_256() -> tuple[RGB, ...]:
    cube = [(r, g, b) for r in CUBE_LEVELS for g in CUBE_LEVELS for b in CUBE_LEVELS]
    grays = [(v, v, v) for v in range(8, 248, 10)]
    return SYSTEM_16 + tuple(cube) + tuple(grays)


XTERM_256: tuple[RGB, ...] = _build_xterm_256()

BASIC_8_NAMES: tuple[str, ...] = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")

# Reference values for matching only; the terminal's real palette is unknown
# when the output is generated.
BASIC_8: tuple[RGB, ...] = (
    (0, 0, 0),
    (255, 0, 0),
    (0, 255, 0),
    (255, 255, 0),
    (0, 0, 255),
    (255, 0, 255),
    (0, 255, 255),
    (255, 255, 255),
)

PALETTES: dict[ColorTier, tuple[RGB, ...]] = {
    ColorTier.INDEXED_256: XTERM_256,
    ColorTier.BASIC_8: BASIC_8,
}


def _frozen_array(table: tuple[RGB, ...]) -> np.ndarray:
    arr = np.array(table, dtype=np.int32)
    arr.setflags(write=False)
    return arr


_ARRAYS: dict[ColorTier, np.ndarray] = {tier: _frozen_array(table) for tier, table in PALETTES.items()}


def nearest_index(tier: ColorTier, rgb: RGB) -> int:
    """Index of the entry with the smallest squared RGB distance.

    ``argmin`` returns the first minimum, so ties resolve to the lowest index.
    """
    diff = _ARRAYS[tier] - np.asarray(rgb, dtype=np.int32)
    distances = np.einsum("ij,ij->i", diff, diff)
    return int(np.argmin(distances))
