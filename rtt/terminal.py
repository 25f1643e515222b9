"""Minimal terminal control: clearing, cursor movement and printing."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

_CSI = "\x1b["


def _emit(text: str, stream: Optional[TextIO]) -> None:
    out = sys.stdout if stream is None else stream
    out.write(text)
    out.flush()


def clear(stream: Optional[TextIO] = None) -> None:
    """Clear the whole screen."""
    _emit(f"{_CSI}2J", stream)


def move_to(x: int, y: int, stream: Optional[TextIO] = None) -> None:
    """Move the cursor to column ``x``, row ``y`` (both zero based)."""
    _emit(f"{_CSI}{y + 1};{x + 1}H", stream)


def print_text(value: object, stream: Optional[TextIO] = None) -> None:
    """Write ``value`` at the current cursor position."""
    _emit(str(value), stream)