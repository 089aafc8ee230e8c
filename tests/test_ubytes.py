import pytest

from unstd.ubytes import GrowthMode, UBytes, UBytesError


def test_grow():
    buffer = UBytes(10)
    buffer.grow(10)
    assert buffer.capacity == 20

    with pytest.raises(UBytesError):
        buffer.grow(0)

    buffer.write(b"ABCDE", 0)
    assert buffer.length == 5

    buffer.grow(20)
    assert buffer.capacity == 40
    assert bytes(buffer.data[:5]) == b"ABCDE"
    assert bytes(buffer) == b"ABCDE"


def test_writebytes():
    buffer = UBytes(20)

    buffer.write(b"Hello", 0)
    assert buffer.length == 5
    assert bytes(buffer.data[:5]) == b"Hello"

    buffer.write(b"World", 5)
    assert buffer.length == 10
    assert bytes(buffer.data[:10]) == b"HelloWorld"

    with pytest.raises(TypeError):
        buffer.write(None, 0)

    with pytest.raises(UBytesError):
        buffer.write(b"", 0)

    with pytest.raises(UBytesError):
        buffer.write(b"Hello", 17)

    raw = bytes([0xDE, 0xAD, 0xBE, 0xEF])
    buffer.write(raw, 0)
    assert buffer.length == 4
    assert bytes(buffer.data[:4]) == raw

    with pytest.raises(UBytesError):
        buffer.write(raw, 18)


def test_appendbytes():
    buffer = UBytes(10)

    buffer.append(b"Hello")
    assert buffer.length == 5
    assert bytes(buffer) == b"Hello"

    buffer.append(b" World!")
    assert buffer.length == 12
    assert buffer.capacity == 12
    assert bytes(buffer) == b"Hello World!"

    with pytest.raises(TypeError):
        buffer.append(None)

    with pytest.raises(UBytesError):
        buffer.append(b"")


def test_write_failure_leaves_buffer_unchanged():
    buffer = UBytes(8)
    buffer.write(b"abc", 0)
    with pytest.raises(UBytesError):
        buffer.write(b"too long", 4)
    assert bytes(buffer) == b"abc"
    assert buffer.capacity == 8


def test_write_autogrow_linear():
    buffer = UBytes(10)
    buffer.write_autogrow(b"x" * 25, 0, GrowthMode.LINEAR)
    assert buffer.capacity == 25
    assert bytes(buffer) == b"x" * 25


def test_write_autogrow_exponential():
    buffer = UBytes(10)
    buffer.write_autogrow(b"y" * 25, 0, GrowthMode.EXPONENTIAL)
    assert buffer.capacity == 40
    assert buffer.length == 25


def test_write_autogrow_exponential_from_empty():
    buffer = UBytes()
    buffer.write_autogrow(b"abc", 0, GrowthMode.EXPONENTIAL)
    assert buffer.capacity == 4
    assert bytes(buffer) == b"abc"


def test_write_autogrow_no_growth_when_fits():
    buffer = UBytes(16)
    buffer.write_autogrow(b"fits", 2, GrowthMode.EXPONENTIAL)
    assert buffer.capacity == 16
    assert buffer.length == 6
    assert bytes(buffer.data[2:6]) == b"fits"


def test_write_autogrow_rejects_empty_source():
    buffer = UBytes(4)
    with pytest.raises(UBytesError):
        buffer.write_autogrow(b"", 0)


def test_length_bookkeeping():
    buffer = UBytes(10)
    assert buffer.length == 0
    assert buffer.remaining == 10
    assert buffer.has_remaining() is True

    buffer.set_length(7)
    assert buffer.length == 7
    assert buffer.remaining == 3

    buffer.increase_length(3)
    assert buffer.length == 10
    assert buffer.has_remaining() is False

    with pytest.raises(UBytesError):
        buffer.set_length(11)
    with pytest.raises(UBytesError):
        buffer.increase_length(1)
    assert buffer.length == 10