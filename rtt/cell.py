"""Table cells with a chainable builder interface."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from rtt.style import HAlign, Style, VAlign


@dataclass
class Cell:
    """A table cell.

    Every builder method updates this cell and returns a copy of it, so a
    cell can serve as a template for others.
    """

    text: Optional[str] = None
    cell_style: Optional[Style] = None

    @property
    def effective_style(self) -> Style:
        """The cell's style, or the default style when none is set."""
        return self.cell_style if self.cell_style is not None else Style()

    def _restyle(self, **changes) -> Cell:
        self.cell_style = replace(self.effective_style, **changes)
        return replace(self)

    def value(self, value: str) -> Cell:
        self.text = value
        return replace(self)

    def style(self, style: Style) -> Cell:
        self.cell_style = style
        return replace(self)

    def width(self, w: int) -> Cell:
        return self._restyle(width=w)

    def height(self, h: int) -> Cell:
        return self._restyle(height=h)

    def size(self, w: int, h: int) -> Cell:
        return self._restyle(width=w, height=h)

    def h_align(self, h_align: HAlign) -> Cell:
        return self._restyle(h_align=h_align)

    def v_align(self, v_align: VAlign) -> Cell:
        return self._restyle(v_align=v_align)