import pytest

from infiniteloop.core.solution import Solution
from infiniteloop.errors import RenderError
from infiniteloop.io.render import GLYPHS, render_solution


def make_solution(horizontal, vertical):
    return Solution.from_edges(horizontal, vertical)


def blank(size):
    return make_solution(
        [[False] * (size - 1) for _ in range(size)],
        [[False] * size for _ in range(size - 1)],
    )


def test_blank_solution_renders_empty():
    assert render_solution(blank(14)) == ""


def test_single_horizontal_edge():
    solution = make_solution(
        [[True, False], [False, False], [False, False]],
        [[False, False, False], [False, False, False]],
    )
    assert render_solution(solution) == "╶──╴"


def test_vertical_edge_below_offset_cell():
    solution = make_solution(
        [[False, False], [False, False], [False, False]],
        [[False, False, False], [False, False, True]],
    )
    assert render_solution(solution) == "\n\n      ╷\n      │\n      ╵"


def test_square_loop():
    solution = make_solution(
        [[True, False], [True, False], [False, False]],
        [[True, True, False], [False, False, False]],
    )
    assert render_solution(solution) == "╭──╮\n│  │\n╰──╯"


def test_glyph_table_covers_every_mask():
    assert len(GLYPHS) == 16
    assert GLYPHS[0] == ""
    assert GLYPHS[0b1111] == "┼"
    assert GLYPHS[0b0101] == "│"
    assert GLYPHS[0b1010] == "─"


def test_capacity_is_enforced():
    solution = make_solution(
        [[True, False], [True, False], [False, False]],
        [[True, True, False], [False, False, False]],
    )
    text = render_solution(solution)
    size = len(text.encode("utf-8"))
    assert render_solution(solution, capacity=size) == text
    with pytest.raises(RenderError) as excinfo:
        render_solution(solution, capacity=size - 1)
    assert excinfo.value.capacity == size - 1


def test_zero_capacity_only_fits_blank():
    assert render_solution(blank(3), capacity=0) == ""
    with pytest.raises(RenderError):
        render_solution(make_solution([[True], [False]], [[False, False]]), capacity=0)
