"""Embedding rendered text into double-quoted ``echo -e`` shell literals."""

from __future__ import annotations

from collections.abc import Mapping

from .models import ColorTier

# Characters that keep a special meaning inside double quotes.
_BACKSLASHED = frozenset('\\"$`')

_NAMED_ESCAPES = {
    "\x1b": "\\e",
    "\n": "\\n",
    "\r": "\\r",
}

TRUECOLOR_TEST = '[[ "$COLORTERM" == "truecolor" || "$COLORTERM" == "24bit" ]]'
COLORS_256_TEST = '[[ "$(tput colors)" == "256" ]]'


def _escape_char(ch: str) -> str:
    if ch in _BACKSLASHED:
        return "\\" + ch
    named = _NAMED_ESCAPES.get(ch)
    if named is not None:
        return named
    code = ord(ch)
    if code < 0x20 or code > 0x7E:
        if code > 0xFFFF:
            return f"\\U{code:08x}"
        return f"\\u{code:04x}"
    return ch


def escape(text: str) -> str:
    return "".join(_escape_char(ch) for ch in text)


def echo_statement(document: str) -> str:
    return f'echo -e -n "{escape(document)}"'


def auto_detect_script(documents: Mapping[ColorTier, str], indent: str = "    ") -> str:
    """Three-branch conditional that picks a pre-rendered document at run time."""
    return (
        f"if {TRUECOLOR_TEST}; then\n"
        f"{indent}{echo_statement(documents[ColorTier.TRUECOLOR])}\n"
        f"elif {COLORS_256_TEST}; then\n"
        f"{indent}{echo_statement(documents[ColorTier.INDEXED_256])}\n"
        f"else\n"
        f"{indent}{echo_statement(documents[ColorTier.BASIC_8])}\n"
        f"fi\n"
    )
