"""Serializes glyph spans with the fewest SGR transitions between styles."""

from __future__ import annotations

from collections.abc import Iterable

from .models import Color, ColorTier, GlyphSpan, RgbColor, Style

ESC = "\x1b"
RESET = f"{ESC}[0m"
DEFAULT_FOREGROUND = "39"
DEFAULT_BACKGROUND = "49"


def color_code(color: Color, background: bool = False) -> str:
    if isinstance(color, RgbColor):
        return f"{48 if background else 38};2;{color.r};{color.g};{color.b}"
    if color.tier == ColorTier.BASIC_8:
        return str((40 if background else 30) + color.index)
    return f"{48 if background else 38};5;{color.index}"


def _sgr(codes: list[str]) -> str:
    if not codes:
        return ""
    return f"{ESC}[{';'.join(codes)}m"


def activation(style: Style) -> str:
    codes: list[str] = []
    if style.foreground is not None:
        codes.append(color_code(style.foreground))
    if style.background is not None:
        codes.append(color_code(style.background, background=True))
    return _sgr(codes)


def delta(previous: Style, following: Style) -> str:
    """Escape codes that move the terminal from ``previous`` to ``following``.

    Unchanged slots are skipped, a slot that goes away is cleared with its
    default-color code, and falling back to the plain style is a single reset.
    """
    if previous == following:
        return ""
    if following.is_plain:
        return RESET

    codes: list[str] = []
    if following.foreground != previous.foreground:
        if following.foreground is None:
            codes.append(DEFAULT_FOREGROUND)
        else:
            codes.append(color_code(following.foreground))
    if following.background != previous.background:
        if following.background is None:
            codes.append(DEFAULT_BACKGROUND)
        else:
            codes.append(color_code(following.background, background=True))
    return _sgr(codes)


def emit(spans: Iterable[GlyphSpan]) -> str:
    out: list[str] = []
    previous: Style | None = None

    for span in spans:
        if previous is None:
            out.append(activation(span.style))
        else:
            out.append(delta(previous, span.style))
        out.append(span.text)
        previous = span.style

    # A trailing reset on an already plain terminal state would be a no-op.
    if previous is not None and not previous.is_plain:
        out.append(RESET)
    return "".join(out)


def emit_naive(spans: Iterable[GlyphSpan]) -> str:
    """Paint every span on its own: activate, write, reset."""
    out: list[str] = []
    for span in spans:
        out.append(activation(span.style))
        out.append(span.text)
        if not span.style.is_plain:
            out.append(RESET)
    return "".join(out)
