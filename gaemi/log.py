"""Levelled logging to a standard stream and a log file."""

from __future__ import annotations

import sys
import time
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import TextIO

DEFAULT_LOG_FILE = "gl.log"


class LogLevel(IntEnum):
    """Message levels; a higher value is more verbose."""

    ERROR = 0
    WARNING = 1
    INFO = 2
    DEBUG = 3


_LABELS = {
    LogLevel.DEBUG: "DEBUG",
    LogLevel.INFO: "INFO ",
    LogLevel.WARNING: "WARN ",
    LogLevel.ERROR: "ERROR",
}


def label(level: LogLevel) -> str:
    """The fixed-width label written before a message of ``level``."""
    return _LABELS[LogLevel(level)]


@dataclass
class LogConfig:
    """Which messages are kept, whether the file starts empty, and where it lives."""

    reporting_level: LogLevel = LogLevel.INFO
    restart: bool = False
    path: str | Path = DEFAULT_LOG_FILE


class Log:
    """Writes each message to a stream and appends it to the configured file."""

    def __init__(self, config: LogConfig | None = None, stream: TextIO | None = None) -> None:
        self.config = config if config is not None else LogConfig()
        self.stream = stream if stream is not None else sys.stdout
        if self.config.restart:
            self.restart()

    def restart(self) -> None:
        """Empty the log file."""
        with open(self.config.path, "w", encoding="utf-8"):
            pass

    def write(self, level: LogLevel, message: str) -> str | None:
        """Log ``message`` at ``level``; return the written line, or None if filtered out."""
        if level > self.config.reporting_level:
            return None
        stamp = time.strftime("%y-%m-%d %H:%M:%S", time.localtime())
        line = f"{stamp} {label(level)}: \t{message}\n"
        with open(self.config.path, "a", encoding="utf-8") as handle:
            handle.write(line)
        self.stream.write(line)
        return line