"""Test ByteBuffer editing and saving."""

import os
import tempfile

import pytest

from nibbler.core.buffer import ByteBuffer


def test_open_creates_missing_file(tmp_path):
    """Opening a missing file creates it empty."""
    path = tmp_path / "new.bin"

    buf = ByteBuffer.open(str(path))
    try:
        assert path.exists()
        assert buf.get_size() == 0
        assert not buf.modified
    finally:
        buf.close()


def test_open_reads_existing_file(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"\x00\x01\xff")

    buf = ByteBuffer.open(str(path))
    try:
        assert bytes(buf.data) == b"\x00\x01\xff"
        assert buf.filename == str(path)
    finally:
        buf.close()


def test_open_directory_fails(tmp_path):
    """A path that cannot be opened read-write raises OSError."""
    with pytest.raises(OSError):
        ByteBuffer.open(str(tmp_path))


def test_save_truncates_shrunk_buffer():
    """A 3-byte buffer saved over a 10-byte file leaves exactly 3 bytes."""
    with tempfile.NamedTemporaryFile(suffix='.bin', delete=False) as f:
        f.write(bytes(range(10)))
        temp_filename = f.name

    try:
        buf = ByteBuffer.open(temp_filename)
        for _ in range(7):
            buf.delete_byte(3)

        written = buf.save()
        buf.close()

        assert written == 3
        assert os.path.getsize(temp_filename) == 3
        with open(temp_filename, 'rb') as f:
            assert f.read() == b"\x00\x01\x02"

    finally:
        if os.path.exists(temp_filename):
            os.remove(temp_filename)


def test_save_then_reopen_is_identical(tmp_path):
    path = tmp_path / "data.bin"
    path.write_bytes(b"abc")

    buf = ByteBuffer.open(str(path))
    buf.insert_byte(3, 0x64)
    buf.replace_byte(0, 0x41)
    buf.save()
    buf.close()

    reopened = ByteBuffer.open(str(path))
    try:
        assert bytes(reopened.data) == b"Abcd"
    finally:
        reopened.close()


def test_save_twice_keeps_file_in_sync(tmp_path):
    """The same handle can be saved repeatedly while the buffer changes size."""
    path = tmp_path / "data.bin"
    buf = ByteBuffer.open(str(path))
    try:
        buf.insert_byte(0, 1)
        buf.insert_byte(1, 2)
        buf.save()
        buf.delete_byte(0)
        buf.save()
        assert path.read_bytes() == b"\x02"
    finally:
        buf.close()


def test_save_without_file_raises():
    buf = ByteBuffer(b"abc")
    with pytest.raises(IOError):
        buf.save()


def test_save_clears_modified_flag(tmp_path):
    buf = ByteBuffer.open(str(tmp_path / "f.bin"))
    try:
        buf.insert_byte(0, 7)
        assert buf.modified
        buf.save()
        assert not buf.modified
    finally:
        buf.close()


def test_insert_clamps_position():
    buf = ByteBuffer(b"ab")
    buf.insert_byte(10, 0x63)
    assert bytes(buf.data) == b"abc"


def test_insert_rejects_out_of_range_value():
    buf = ByteBuffer()
    with pytest.raises(ValueError):
        buf.insert_byte(0, 256)


def test_delete_and_replace_out_of_bounds_are_ignored():
    buf = ByteBuffer(b"ab")
    buf.delete_byte(2)
    buf.replace_byte(5, 0x41)
    assert bytes(buf.data) == b"ab"
    assert not buf.modified


def test_delete_then_insert_restores():
    """Deleting a byte and inserting the same value at the same offset is a no-op."""
    original = b"\x10\x20\x30\x40"
    for offset in range(len(original)):
        buf = ByteBuffer(original)
        value = buf.get_byte(offset)
        buf.delete_byte(offset)
        buf.insert_byte(offset, value)
        assert bytes(buf.data) == original


def test_replace_is_idempotent():
    once = ByteBuffer(b"xyz")
    once.replace_byte(1, 0x41)

    twice = ByteBuffer(b"xyz")
    twice.replace_byte(1, 0x41)
    twice.replace_byte(1, 0x41)

    assert bytes(once.data) == bytes(twice.data) == b"xAz"
