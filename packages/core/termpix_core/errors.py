"""Errors raised by the collaborators around the render core."""

from __future__ import annotations


class TermpixError(Exception):
    pass


class ImageLoadError(TermpixError):
    pass
