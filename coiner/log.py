"""Process-wide logging setup, installed once by the entry point."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import List, Optional

from rich.logging import RichHandler

from .paths import log_file_path

FILE_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


@dataclass(frozen=True)
class LogSettings:
    verbose: bool = False
    log_to_file: bool = False
    log_file: Optional[str] = None
    log_dir: Path = Path("logs")

    @property
    def level(self) -> int:
        return logging.DEBUG if self.verbose else logging.INFO


class LogSink:
    """Attach console or daily-rotated file handlers to the root logger.

    Use as a context manager around the lifetime of the process; the handlers
    are removed and closed on exit.
    """

    def __init__(self, settings: LogSettings) -> None:
        if settings.log_to_file and not settings.log_file:
            raise ValueError("A log file name is required when logging to file.")
        self.settings = settings
        self._handlers: List[logging.Handler] = []
        self._previous_level: Optional[int] = None

    def _build_handler(self) -> logging.Handler:
        if self.settings.log_to_file:
            path = log_file_path(self.settings.log_dir, str(self.settings.log_file))
            handler: logging.Handler = TimedRotatingFileHandler(path, when="midnight", encoding="utf-8")
            handler.setFormatter(logging.Formatter(FILE_FORMAT))
            return handler
        handler = RichHandler(rich_tracebacks=True, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        return handler

    def install(self) -> None:
        if self._handlers:
            return
        root = logging.getLogger()
        handler = self._build_handler()
        handler.setLevel(self.settings.level)
        self._previous_level = root.level
        root.setLevel(self.settings.level)
        root.addHandler(handler)
        self._handlers.append(handler)

    def close(self) -> None:
        root = logging.getLogger()
        for handler in self._handlers:
            root.removeHandler(handler)
            handler.close()
        self._handlers.clear()
        if self._previous_level is not None:
            root.setLevel(self._previous_level)
            self._previous_level = None

    def __enter__(self) -> "LogSink":
        self.install()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()
