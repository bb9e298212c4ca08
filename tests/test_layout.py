import pytest

from gapbuf import BufferOptions, GapBuffer, GapLayout


def test_options_validation() -> None:
    with pytest.raises(ValueError):
        BufferOptions(default_capacity=-1)
    with pytest.raises(ValueError):
        BufferOptions(growth_factor=1)
    with pytest.raises(ValueError):
        BufferOptions(gap_marker="")
    with pytest.raises(ValueError):
        BufferOptions(cursor_marker="")


def test_grown_capacity_has_floor_of_one() -> None:
    options = BufferOptions()

    assert options.grown_capacity(0) == 1
    assert options.grown_capacity(10) == 20


def test_layout_bounds() -> None:
    layout = GapLayout(capacity=10, size=3, cursor=2, gap_size=7)

    assert layout.gap_start == 2
    assert layout.gap_end == 9
    assert layout.right_start == 9
    assert layout.in_gap(2)
    assert layout.in_gap(8)
    assert not layout.in_gap(9)
    assert layout.is_consistent()


def test_layout_detects_broken_invariant() -> None:
    assert not GapLayout(capacity=10, size=3, cursor=5, gap_size=7).is_consistent()
    assert not GapLayout(capacity=10, size=3, cursor=0, gap_size=6).is_consistent()


def test_render_marks_cursor_and_gap() -> None:
    buffer = GapBuffer.from_iterable("abc")

    assert buffer.render() == "[ a b c|*" + " *" * 6 + " ]"


def test_render_with_cursor_inside_content() -> None:
    buffer = GapBuffer(count=2, value="z")
    buffer.move_cursor(-1)

    assert str(buffer) == "[ z|* * z ]"


def test_render_closes_with_cursor_at_end_of_storage() -> None:
    buffer = GapBuffer(options=BufferOptions(default_capacity=2))
    buffer.insert_at_cursor("a")
    buffer.insert_at_cursor("b")

    assert buffer.render() == "[ a b|]"


def test_render_empty_storage() -> None:
    assert GapBuffer(count=0).render() == "[|]"


def test_render_custom_markers() -> None:
    options = BufferOptions(default_capacity=3, gap_marker="_", cursor_marker="^")
    buffer = GapBuffer(options=options)
    buffer.insert_at_cursor("x")

    assert buffer.render() == "[ x^_ _ ]"


def test_debug_returns_rendering() -> None:
    buffer = GapBuffer.from_iterable("hi")

    assert buffer.debug() == buffer.render()
