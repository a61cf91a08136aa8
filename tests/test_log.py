import logging
from pathlib import Path

import pytest
from rich.logging import RichHandler

from coiner.log import LogSettings, LogSink


def test_file_logging_requires_name() -> None:
    with pytest.raises(ValueError):
        LogSink(LogSettings(log_to_file=True))


def test_file_sink_writes_and_detaches(tmp_path: Path) -> None:
    settings = LogSettings(log_to_file=True, log_file="app", log_dir=tmp_path / "logs")
    root = logging.getLogger()
    before = list(root.handlers)
    with LogSink(settings):
        logging.getLogger("coiner.test").info("info log")
        logging.getLogger("coiner.test").debug("debug log")
    assert root.handlers == before
    text = (tmp_path / "logs" / "app.log").read_text(encoding="utf-8")
    assert "info log" in text
    assert "debug log" not in text


def test_verbose_file_sink_keeps_debug(tmp_path: Path) -> None:
    settings = LogSettings(verbose=True, log_to_file=True, log_file="app", log_dir=tmp_path)
    with LogSink(settings):
        logging.getLogger("coiner.test").debug("debug log")
    assert "debug log" in (tmp_path / "app.log").read_text(encoding="utf-8")


def test_console_sink_uses_rich() -> None:
    sink = LogSink(LogSettings())
    sink.install()
    try:
        assert any(isinstance(handler, RichHandler) for handler in logging.getLogger().handlers)
    finally:
        sink.close()
    assert not any(isinstance(handler, RichHandler) for handler in logging.getLogger().handlers)
