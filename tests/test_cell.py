from rtt.cell import Cell
from rtt.style import HAlign, Style, VAlign


def test_value_sets_text_and_returns_copy():
    cell = Cell()
    copy = cell.value("name")
    assert cell.text == "name"
    assert copy.text == "name"
    assert copy is not cell


def test_copy_changes_do_not_touch_template():
    template = Cell()
    template.style(Style(padding=(0, 1, 0, 1)))
    derived = template.value("x").width(30)
    assert derived.effective_style.width == 30
    assert template.effective_style.width == Style().width
    assert template.text == "x"


def test_width_on_unstyled_cell_starts_from_default():
    cell = Cell().width(5)
    assert cell.cell_style == Style(width=5)


def test_height_sets_height():
    assert Cell().height(3).effective_style.height == 3


def test_size_sets_both():
    cell = Cell()
    result = cell.size(7, 2)
    assert result.effective_style.width == 7
    assert result.effective_style.height == 2
    assert cell.effective_style == result.effective_style


def test_alignment_setters():
    cell = Cell().h_align(HAlign.END).v_align(VAlign.CENTER)
    assert cell.effective_style.h_align is HAlign.END
    assert cell.effective_style.v_align is VAlign.CENTER


def test_style_replaces_whole_style():
    style = Style(width=4, h_align=HAlign.CENTER)
    cell = Cell().width(9).style(style)
    assert cell.cell_style == style


def test_effective_style_default_when_unset():
    cell = Cell()
    assert cell.cell_style is None
    assert cell.effective_style == Style()