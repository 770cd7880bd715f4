"""Minimal SGR interpreter used to compare emitted escape streams."""

from __future__ import annotations

import re

_SGR = re.compile(r"\x1b\[([0-9;]*)m")


def replay(text: str) -> list[tuple[str, object, object]]:
    """Return (char, foreground, background) for every printed character."""
    fg = None
    bg = None
    cells = []
    pos = 0
    while pos < len(text):
        match = _SGR.match(text, pos)
        if match:
            codes = [int(c) if c else 0 for c in match.group(1).split(";")]
            i = 0
            while i < len(codes):
                code = codes[i]
                if code == 0:
                    fg = bg = None
                elif code == 39:
                    fg = None
                elif code == 49:
                    bg = None
                elif 30 <= code <= 37:
                    fg = ("basic", code - 30)
                elif 40 <= code <= 47:
                    bg = ("basic", code - 40)
                elif code in (38, 48):
                    if codes[i + 1] == 5:
                        value = ("256", codes[i + 2])
                        i += 2
                    else:
                        value = ("rgb", tuple(codes[i + 2 : i + 5]))
                        i += 4
                    if code == 38:
                        fg = value
                    else:
                        bg = value
                else:
                    raise ValueError(f"unexpected SGR code {code}")
                i += 1
            pos = match.end()
            continue
        cells.append((text[pos], fg, bg))
        pos += 1
    return cells


def final_state_is_plain(text: str) -> bool:
    cells = replay(text + "x")
    return cells[-1][1:] == (None, None)
