"""Cell styling: size, padding and alignment."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class HAlign(enum.Enum):
    """Horizontal alignment of a cell's text."""

    START = "start"
    CENTER = "center"
    END = "end"


class VAlign(enum.Enum):
    """Vertical alignment of a cell's text."""

    START = "start"
    CENTER = "center"
    END = "end"


@dataclass(frozen=True)
class Style:
    """How a cell is sized and laid out.

    ``padding`` is ``(top, end, bottom, start)``; only the start and end
    values affect rendering.
    """

    width: int = 0
    height: int = 0
    padding: tuple[int, int, int, int] = (0, 0, 0, 0)
    h_align: HAlign = HAlign.START
    v_align: VAlign = VAlign.START