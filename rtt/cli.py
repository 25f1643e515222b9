"""Command-line entry point that draws a sample table."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

from rtt.cell import Cell
from rtt.style import HAlign, Style, VAlign
from rtt.table import Table, TableConfig


def build_demo_table() -> Table:
    """Build the sample inventory table."""
    table = Table(TableConfig(corners_char="+", h_line_char="-", v_line_char="|"))

    cell = Cell()
    cell.style(
        Style(
            width=0,
            padding=(0, 1, 0, 1),
            h_align=HAlign.START,
            v_align=VAlign.START,
        )
    )

    table.row(
        [
            cell.value("name").width(30).height(2).h_align(HAlign.CENTER),
            cell.value("color").width(15).h_align(HAlign.CENTER),
            cell.value("price").width(15).h_align(HAlign.CENTER),
            cell.value("quantity").width(15).h_align(HAlign.CENTER),
        ]
    )
    for name, color, price, quantity in (
        ("car toy", "red", "$12", "100"),
        ("xbox controller", "white", "$70", "50"),
        ("fancy keyboard", "black", "$49.99", "33"),
    ):
        table.row(
            [
                cell.value(name),
                cell.value(color),
                cell.value(price).h_align(HAlign.END),
                cell.value(quantity).h_align(HAlign.END),
            ]
        )
    return table


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="rtt", description="Draw a sample table in the terminal."
    )
    parser.parse_args(argv)
    build_demo_table().render()
    return 0