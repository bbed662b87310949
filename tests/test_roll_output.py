import io

import pytest

from adapters.roll_output import RollWriter, format_roll, format_sum
from core.domain.errors import OutputError


class BrokenStream(io.StringIO):
    def write(self, s):
        raise BrokenPipeError(32, "Broken pipe")


def test_format_sum_ends_with_newline():
    assert format_sum(17) == "17\n"


def test_format_roll_has_trailing_space():
    assert format_roll(4) == "4 "


def test_writer_writes_sum_line():
    stream = io.StringIO()
    RollWriter(stream).write_sum(0)
    assert stream.getvalue() == "0\n"


def test_writer_writes_rolls_without_newline():
    stream = io.StringIO()
    writer = RollWriter(stream)
    for value in (1, 1, 1, 1, 1):
        writer.write_roll(value)
    writer.flush()
    assert stream.getvalue() == "1 1 1 1 1 "


def test_writer_wraps_stream_errors():
    writer = RollWriter(BrokenStream())
    with pytest.raises(OutputError) as excinfo:
        writer.write_roll(3)
    assert isinstance(excinfo.value.__cause__, BrokenPipeError)


def test_writer_releases_lock_after_failure_and_fails_fast():
    writer = RollWriter(BrokenStream())
    with pytest.raises(OutputError):
        writer.write_sum(5)
    assert not writer._lock.locked()
    with pytest.raises(OutputError, match="previous write error"):
        writer.write_roll(1)
    assert not writer._lock.locked()


def test_writer_treats_closed_stream_as_output_error():
    stream = io.StringIO()
    stream.close()
    with pytest.raises(OutputError):
        RollWriter(stream).write_sum(1)


def test_output_error_is_an_os_error():
    assert issubclass(OutputError, OSError)
