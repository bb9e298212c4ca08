import pytest

from gapbuf import GapBuffer, GapInvariantError, IndexOutOfRangeError


def make_buffer(text: str, cursor: int) -> GapBuffer:
    buffer = GapBuffer.from_iterable(text)
    buffer.move_cursor(cursor - buffer.cursor_index())
    return buffer


@pytest.mark.parametrize("cursor", range(0, 6))
def test_round_trip_for_every_live_index(cursor: int) -> None:
    buffer = make_buffer("hello", cursor)

    for external in range(buffer.size()):
        array = buffer.to_array_index(external)
        assert not buffer.layout().in_gap(array)
        assert buffer.to_external_index(array) == external


def test_left_segment_maps_unchanged_right_segment_shifts() -> None:
    buffer = make_buffer("hello", 2)
    gap = buffer.gap_size()

    assert buffer.to_array_index(0) == 0
    assert buffer.to_array_index(1) == 1
    assert buffer.to_array_index(2) == 2 + gap
    assert buffer.to_array_index(4) == 4 + gap


def test_translation_is_order_preserving() -> None:
    buffer = make_buffer("abcdef", 3)

    slots = [buffer.to_array_index(i) for i in range(buffer.size())]

    assert slots == sorted(slots)


def test_gap_slot_has_no_logical_index() -> None:
    buffer = make_buffer("abc", 1)

    with pytest.raises(GapInvariantError) as excinfo:
        buffer.to_external_index(1)

    assert isinstance(excinfo.value, AssertionError)
    assert excinfo.value.gap == (1, 1 + buffer.gap_size())


def test_array_index_outside_storage_rejected() -> None:
    buffer = make_buffer("abc", 1)

    with pytest.raises(IndexOutOfRangeError, match="storage of capacity 10") as excinfo:
        buffer.to_external_index(buffer.capacity())

    assert excinfo.value.valid_range == (0, 10)
    assert "size" not in str(excinfo.value)


def test_external_index_past_size_rejected() -> None:
    buffer = make_buffer("abc", 1)

    with pytest.raises(IndexOutOfRangeError):
        buffer.to_array_index(3)
