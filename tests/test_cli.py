"""Test the command line entry point."""

import curses
import logging

import pytest

from nibbler import __version__
from nibbler.__main__ import main


def test_missing_path_prints_usage(capsys):
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "usage:" in out


def test_version_exits_before_file_access(tmp_path, capsys):
    path = tmp_path / "never.bin"
    with pytest.raises(SystemExit) as exc:
        main(["-v", str(path)])

    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out
    assert not path.exists()


def test_help_exits_before_file_access(tmp_path, capsys):
    path = tmp_path / "never.bin"
    with pytest.raises(SystemExit) as exc:
        main(["--help", str(path)])

    assert exc.value.code == 0
    assert "usage:" in capsys.readouterr().out
    assert not path.exists()


def test_unopenable_file_is_fatal(tmp_path, capsys):
    assert main([str(tmp_path)]) == 1
    assert "Error loading" in capsys.readouterr().err


def test_runs_session_on_created_file(tmp_path, monkeypatch):
    path = tmp_path / "new.bin"
    seen = {}

    def fake_wrapper(func, context):
        seen["context"] = context
        context.buffer.insert_byte(0, 0x41)
        context.buffer.save()

    monkeypatch.setattr(curses, "wrapper", fake_wrapper)

    assert main([str(path)]) == 0
    assert path.read_bytes() == b"A"
    # the backing file is closed once the session ends
    assert seen["context"].buffer.file is None


def test_log_option_writes_log_file(tmp_path, monkeypatch):
    path = tmp_path / "data.bin"
    log_path = tmp_path / "nibbler.log"
    root = logging.getLogger()
    monkeypatch.setattr(curses, "wrapper", lambda func, context: None)
    monkeypatch.setattr(root, "handlers", [])
    monkeypatch.setattr(root, "level", root.level)

    try:
        assert main(["--log", str(log_path), str(path)]) == 0
    finally:
        for handler in root.handlers:
            handler.close()

    assert "Opened" in log_path.read_text()
