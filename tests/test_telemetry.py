import pytest

from gapbuf import GapBuffer, InvalidDisplacementError
from gapbuf.runtime import telemetry


@pytest.fixture(autouse=True)
def reset_telemetry():
    yield
    telemetry.configure()


def test_configure_rejects_config_and_level() -> None:
    with pytest.raises(ValueError):
        telemetry.configure(config=object(), level="DEBUG")


def test_get_logger_is_cached_until_reconfigured() -> None:
    first = telemetry.get_logger("gapbuf.test")

    assert telemetry.get_logger("gapbuf.test") is first

    telemetry.configure(level="DEBUG")
    assert telemetry.get_logger("gapbuf.test") is not first


def test_span_reraises_errors() -> None:
    with pytest.raises(RuntimeError, match="boom"):
        with telemetry.span("test::span", data={"capacity": 4}):
            raise RuntimeError("boom")


def test_record_event_rejects_unknown_level() -> None:
    with pytest.raises(ValueError):
        telemetry.record_event("buffer.test", level="loud")


def test_growth_and_debug_log_at_debug_level() -> None:
    telemetry.configure(level="DEBUG")
    buffer = GapBuffer()

    buffer.reserve(32)

    assert buffer.capacity() == 32
    assert buffer.debug() == buffer.render()


def test_bad_move_raises_without_touching_state() -> None:
    buffer = GapBuffer.from_iterable("ab")

    with pytest.raises(InvalidDisplacementError):
        buffer.move_cursor(-3)
    assert buffer.cursor_index() == 2
