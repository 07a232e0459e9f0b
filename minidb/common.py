"""Shared configuration values and the error type raised across the package."""

from __future__ import annotations

import enum
import threading
from datetime import timedelta

PAGE_SIZE = 4096
INVALID_PAGE_ID = -1
INVALID_TXN_ID = -1
INVALID_LSN = -1

# Set while the write-ahead log is active.
logging_enabled = threading.Event()

LOG_TIMEOUT = timedelta(seconds=1)
CYCLE_DETECTION_INTERVAL = timedelta(milliseconds=50)


class ExceptionType(enum.Enum):
    """Category of a database error."""

    INVALID = enum.auto()
    OUT_OF_RANGE = enum.auto()
    CONVERSION = enum.auto()
    UNKNOWN_TYPE = enum.auto()
    DECIMAL = enum.auto()
    MISMATCH_TYPE = enum.auto()
    DIVIDE_BY_ZERO = enum.auto()
    INCOMPATIBLE_TYPE = enum.auto()
    OUT_OF_MEMORY = enum.auto()
    NOT_IMPLEMENTED = enum.auto()


class DatabaseError(Exception):
    """An error raised by the database engine, tagged with its category."""

    def __init__(self, message: str, kind: ExceptionType = ExceptionType.INVALID) -> None:
        super().__init__(message)
        self.message = message
        self.kind = kind

    def __str__(self) -> str:
        return f"{self.kind.name}: {self.message}"