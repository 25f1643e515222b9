# rtt

Draw bordered text tables on a terminal. Each cell has its own style: width,
height, padding and horizontal alignment. Rendering clears the screen with
ANSI escape sequences and draws the table from the top-left corner.

## Install

```
pip install .
```

To run the tests as well:

```
pip install ".[test]"
pytest
```

## Command

```
rtt
```

This clears the terminal and draws a small demo table of products, with
their colours, prices and quantities. It takes no options other than
`--help`.

## Library

```python
from rtt.cell import Cell
from rtt.style import HAlign, Style, VAlign
from rtt.table import Table, TableConfig

table = Table(TableConfig(corners_char="+", h_line_char="-", v_line_char="|"))

cell = Cell()
cell.style(Style(width=0, padding=(0, 1, 0, 1), h_align=HAlign.START, v_align=VAlign.START))

table.row([
    cell.value("name").width(20).h_align(HAlign.CENTER),
    cell.value("price").width(10).h_align(HAlign.CENTER),
])
table.row([
    cell.value("car toy"),
    cell.value("$12").h_align(HAlign.END),
])

for line in table.lines():
    print(line)

table.render()  # clears the terminal and draws the table
```

### Modules

- `rtt.style`: `HAlign` and `VAlign` (`START`, `CENTER`, `END`) and the
  frozen dataclass `Style` with `width`, `height`, `padding`, `h_align` and
  `v_align`. The defaults are 0, 0, `(0, 0, 0, 0)`, `START` and `START`.
  `padding` is `(top, end, bottom, start)`, and only the start and end values
  change the output.
- `rtt.cell`: `Cell`, holding `text` and `cell_style`. `effective_style` is
  the cell's style, or a default `Style` if none is set. The builder methods
  `value`, `style`, `width`, `height`, `size`, `h_align` and `v_align` change
  the cell and return a copy of it. A shared cell can therefore act as a
  template, and each row gets its own snapshot.
- `rtt.table`: `TableConfig` holds the border characters, `+`, `-` and `|` by
  default. `Table(config=None)` has these methods:
  - `row(cells)` appends a row and returns the table.
  - `column_widths()` gives, for each column, the largest cell width in that
    column. It raises `ValueError` if the table has no rows, or if the rows
    have different numbers of cells.
  - `row_heights()` gives, for each row, the largest cell height in that row.
  - `lines()` returns the table as plain strings, borders included.
  - `render(stream=None)` clears the screen and writes those lines to
    `stream`, or to standard output if no stream is given.
- `rtt.terminal`: `clear`, `move_to(x, y)` and `print_text(value)`. Each
  takes an optional `stream` and writes ANSI sequences or text to it.
- `rtt.commands`: `CommandsHolder`, a queue of callables that take the stream.
  `exec_all(stream=None)` runs them in order. If a command raises `OSError`,
  it prints the error and goes on to the next command.
- `rtt.cli`: `build_demo_table()` and `main(argv=None)`, which is what the
  `rtt` command runs.

### Layout rules

- Column widths come only from the cells' `width` values, never from the
  text. Text is padded to fit, and text longer than the space left over runs
  past the column rather than being cut.
- The padding of a cell is taken out of its column width. If the padding is
  wider than the column, `ValueError` is raised.
- A row of height 0 or 1 takes up one line. A taller row shows its text on
  the first line, and the lines after it are blank cells with the same
  borders.

## Limits

- `v_align` is stored in the style but does not change how a table is drawn.
- Cell widths are given in characters. Wide characters and text with
  embedded newlines are not measured.
- Nothing is read from the keyboard. A table is drawn once and is not
  redrawn when the terminal size changes.