"""Bordered text tables drawn on the terminal."""

from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Iterable, Optional, TextIO

from rtt import terminal
from rtt.cell import Cell
from rtt.commands import CommandsHolder
from rtt.style import HAlign


@dataclass(frozen=True)
class TableConfig:
    """Characters used to draw the table borders."""

    corners_char: str = "+"
    h_line_char: str = "-"
    v_line_char: str = "|"


def _align(text: str, width: int, h_align: HAlign) -> str:
    pad = max(width - len(text), 0)
    if h_align is HAlign.END:
        return " " * pad + text
    if h_align is HAlign.CENTER:
        left = pad // 2
        return " " * left + text + " " * (pad - left)
    return text + " " * pad


class Table:
    """A table of rows of cells, sized by the widest cell in each column."""

    def __init__(self, config: Optional[TableConfig] = None) -> None:
        self.rows: list[list[Cell]] = []
        self.config = config if config is not None else TableConfig()

    def row(self, cells: Iterable[Cell]) -> Table:
        """Append a row and return the table for chaining."""
        self.rows.append(list(cells))
        return self

    def column_widths(self) -> list[int]:
        """The width of each column: the largest cell width in it."""
        if not self.rows:
            raise ValueError("table has no rows")
        if len({len(row) for row in self.rows}) > 1:
            raise ValueError("all rows must have the same number of cells")
        return [
            max(cell.effective_style.width for cell in column)
            for column in zip(*self.rows)
        ]

    def row_heights(self) -> list[int]:
        """The height of each row: the largest cell height in it."""
        return [
            max((cell.effective_style.height for cell in row), default=0)
            for row in self.rows
        ]

    def _separator(self, widths: list[int]) -> str:
        cfg = self.config
        segments = (cfg.h_line_char * width for width in widths)
        return cfg.corners_char + cfg.corners_char.join(segments) + cfg.corners_char

    @staticmethod
    def _format_cell(cell: Cell, width: int, blank: bool) -> str:
        style = cell.effective_style
        _, pad_end, _, pad_start = style.padding
        inner = width - pad_start - pad_end
        if inner < 0:
            raise ValueError(
                f"padding {pad_start}+{pad_end} exceeds column width {width}"
            )
        text = "" if blank else (cell.text or "")
        return " " * pad_start + _align(text, inner, style.h_align) + " " * pad_end

    def _format_row(self, row: list[Cell], widths: list[int], blank: bool) -> str:
        v = self.config.v_line_char
        cells = (
            self._format_cell(cell, width, blank) for cell, width in zip(row, widths)
        )
        return v + v.join(cells) + v

    def lines(self) -> list[str]:
        """The table as plain text lines, borders included."""
        widths = self.column_widths()
        separator = self._separator(widths)
        out: list[str] = []
        for row, height in zip(self.rows, self.row_heights()):
            out.append(separator)
            for i in range(max(height, 1)):
                out.append(self._format_row(row, widths, blank=i > 0))
        out.append(separator)
        return out

    def render(self, stream: Optional[TextIO] = None) -> None:
        """Clear the screen and draw the table from the top-left corner."""
        lines = self.lines()
        commands = CommandsHolder()
        commands.push(terminal.clear)
        commands.push(partial(terminal.move_to, 0, 0))
        for y, line in enumerate(lines, start=1):
            commands.push(partial(terminal.print_text, line))
            commands.push(partial(terminal.move_to, 0, y))
        commands.exec_all(stream)