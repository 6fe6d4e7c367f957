"""Shared helpers for the editor tests."""

import pytest

from nibbler.core.buffer import ByteBuffer
from nibbler.core.context import EditorContext
from nibbler.core.session import Session


def make_session(data=b"", rows=10):
    """Session over an in-memory buffer with no backing file."""
    context = EditorContext(buffer=ByteBuffer(data))
    context.viewport.resize(rows, 0)
    return Session(context)


def type_keys(session, keys):
    """Feed each character of keys to the session, return the last result."""
    running = True
    for key in keys:
        running = session.handle_key(key)
    return running


@pytest.fixture
def file_session(tmp_path):
    """Factory for sessions backed by a real file."""
    opened = []

    def factory(data=b"", name="data.bin"):
        path = tmp_path / name
        path.write_bytes(data)
        buf = ByteBuffer.open(str(path))
        opened.append(buf)
        context = EditorContext(buffer=buf)
        context.viewport.resize(10, 0)
        return Session(context), path

    yield factory

    for buf in opened:
        buf.close()
