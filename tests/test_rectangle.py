import pytest

from ftkit.rectangle import INVALID_SIZE_MESSAGE, Style, main, render


def test_rush04_five_by_three():
    assert render(5, 3, Style.RUSH04) == "ABBBC\nB   B\nCBBBA"


def test_rush00_single_cell_draws_top_and_bottom():
    assert render(1, 1, Style.RUSH00) == "o\no\n"


@pytest.mark.parametrize("style", list(Style))
@pytest.mark.parametrize("width,height", [(2, 2), (5, 3), (4, 6), (7, 4)])
def test_line_count_and_widths(style, width, height):
    lines = render(width, height, style).splitlines()
    assert len(lines) == height
    assert all(len(line) == width for line in lines)


@pytest.mark.parametrize("style", list(Style))
def test_middle_rows_are_sides_and_spaces(style):
    lines = render(6, 5, style).splitlines()
    side = style.frame.side
    for line in lines[1:-1]:
        assert line[0] == side
        assert line[-1] == side
        assert line[1:-1] == " " * 4


@pytest.mark.parametrize(
    "style,ends_with_newline",
    [
        (Style.RUSH00, True),
        (Style.RUSH01, False),
        (Style.RUSH02, False),
        (Style.RUSH03, True),
        (Style.RUSH04, False),
    ],
)
def test_trailing_newline_per_style(style, ends_with_newline):
    assert render(3, 3, style).endswith("\n") is ends_with_newline


def test_rush01_corners():
    lines = render(4, 3, Style.RUSH01).splitlines()
    assert lines[0][0] == "/"
    assert lines[0][-1] == "\\"
    assert lines[-1][0] == "\\"
    assert lines[-1][-1] == "/"


def test_rush03_top_and_bottom_match():
    lines = render(5, 4, Style.RUSH03).splitlines()
    assert lines[0] == lines[-1]


def test_rush02_top_differs_from_bottom():
    lines = render(5, 4, Style.RUSH02).splitlines()
    assert lines[0][0] == "A"
    assert lines[-1][0] == "C"


def test_width_one_keeps_single_column():
    lines = render(1, 4, Style.RUSH04).splitlines()
    assert lines == ["A", "B", "B", "C"]


@pytest.mark.parametrize("width,height", [(0, 3), (3, 0), (-1, 2)])
def test_rush04_rejects_invalid_size(width, height):
    with pytest.raises(ValueError, match=INVALID_SIZE_MESSAGE):
        render(width, height, Style.RUSH04)


def test_other_styles_draw_even_with_zero_height():
    text = render(3, 0, Style.RUSH00)
    assert text.splitlines() == [render(3, 2, Style.RUSH00).splitlines()[0]] * 2


def test_main_prints_default_rectangle(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == render(5, 3, Style.RUSH04)