import io

import pytest

from seabattle.fifo import FIFO_SIZE
from seabattle.link import LineReader, Link


def test_line_reader_returns_none_until_newline():
    reader = LineReader(32)
    results = [reader.feed(b) for b in b"HD_START"]
    assert all(r is None for r in results)
    assert reader.feed(ord("\n")) == "HD_START"


def test_line_reader_ignores_carriage_return():
    reader = LineReader(32)
    assert reader.feed_bytes(b"HD_CS_1234\r\n") == ["HD_CS_1234"]


def test_line_reader_empty_line():
    reader = LineReader(32)
    assert reader.feed_bytes(b"\n") == [""]


def test_line_reader_truncates_long_line():
    max_len = 5
    reader = LineReader(max_len)
    data = b"HD_BOOM_H"
    assert reader.feed_bytes(data + b"\n") == [data[: max_len - 1].decode()]


def test_line_reader_resets_between_lines():
    reader = LineReader(32)
    assert reader.feed_bytes(b"HD_BOOM_H\nHD_BOOM_M\n") == ["HD_BOOM_H", "HD_BOOM_M"]


def test_line_reader_keeps_partial_across_calls():
    reader = LineReader(32)
    assert reader.feed_bytes(b"HD_B") == []
    assert reader.feed_bytes(b"OOM_1_2\n") == ["HD_BOOM_1_2"]


def test_line_reader_rejects_bad_max_len():
    with pytest.raises(ValueError):
        LineReader(0)


def test_write_sends_bytes():
    tx = io.BytesIO()
    link = Link(tx_stream=tx)
    text = "DH_START_LEO\n"
    assert link.write(text) == len(text)
    assert tx.getvalue() == text.encode()


def test_write_without_stream_raises():
    with pytest.raises(ValueError):
        Link().write("DH_BOOM_H\n")


def test_receive_drops_overflow():
    link = Link()
    assert link.receive(bytes(100)) == FIFO_SIZE - 1


def test_poll_line_from_received_bytes():
    link = Link()
    message = b"HD_BOOM_3_4\n"
    link.receive(message)
    results = [link.poll_line() for _ in message]
    assert results[:-1] == [None] * (len(message) - 1)
    assert results[-1] == "HD_BOOM_3_4"
    assert link.poll_line() is None


def test_poll_line_from_stream_and_eof():
    link = Link(rx_stream=io.BytesIO(b"HD_SF\n"))
    lines = [link.poll_line() for _ in range(6)]
    assert lines[-1] == "HD_SF"
    with pytest.raises(EOFError):
        link.poll_line()


def test_read_line_from_stream():
    link = Link(rx_stream=io.BytesIO(b"HD_START\r\nHD_CS_0000000000\n"))
    assert link.read_line() == "HD_START"
    assert link.read_line() == "HD_CS_0000000000"
    with pytest.raises(EOFError):
        link.read_line()


def test_read_line_prefers_queued_bytes():
    link = Link(rx_stream=io.BytesIO(b"M\n"))
    link.receive(b"HD_BOOM_")
    assert link.read_line() == "HD_BOOM_M"


def test_read_line_partial_at_eof():
    link = Link(rx_stream=io.BytesIO(b"HD_BOOM"))
    assert link.read_line() == "HD_BOOM"


def test_read_line_stops_at_max_len():
    max_len = 4
    data = b"ABCDEFG\n"
    link = Link(rx_stream=io.BytesIO(data), max_len=max_len)
    first = link.read_line()
    second = link.read_line()
    assert first == data[: max_len - 1].decode()
    assert first + second + link.read_line() == data[:-1].decode()


def test_read_line_without_input_raises():
    with pytest.raises(EOFError):
        Link().read_line()