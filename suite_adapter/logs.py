"""Logger sinks receiving rendered output."""

import logging
import threading
from collections.abc import Iterable, Sequence
from typing import Protocol


class Logger(Protocol):
    """Host logger interface; the adapter itself only calls ``info``."""

    def error(self, msg: str) -> None: ...

    def warn(self, msg: str) -> None: ...

    def info(self, msg: str) -> None: ...

    def debug(self, msg: str) -> None: ...

    def trace(self, error: BaseException) -> None: ...


class BufferLogger:
    """Thread-safe logger accumulating ``"<level>: <message>"`` lines."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._messages: list[str] = []

    def _log(self, line: str) -> None:
        with self._lock:
            self._messages.append(line)

    @property
    def messages(self) -> tuple[str, ...]:
        """Snapshot of everything logged so far."""
        with self._lock:
            return tuple(self._messages)

    def error(self, msg: str) -> None:
        self._log(f"error: {msg}")

    def warn(self, msg: str) -> None:
        self._log(f"warn: {msg}")

    def info(self, msg: str) -> None:
        self._log(f"info: {msg}")

    def debug(self, msg: str) -> None:
        self._log(f"debug: {msg}")

    def trace(self, error: BaseException) -> None:
        self._log(f"trace: {error!r}")


class StdlibLogger:
    """Routes host logger calls to a ``logging.Logger``."""

    def __init__(self, logger: logging.Logger) -> None:
        self.logger = logger

    def error(self, msg: str) -> None:
        self.logger.error("%s", msg)

    def warn(self, msg: str) -> None:
        self.logger.warning("%s", msg)

    def info(self, msg: str) -> None:
        self.logger.info("%s", msg)

    def debug(self, msg: str) -> None:
        self.logger.debug("%s", msg)

    def trace(self, error: BaseException) -> None:
        self.logger.debug("%s", error, exc_info=error)


def broadcast(lines: Sequence[str], loggers: Iterable[Logger]) -> None:
    """Send every line, in order, to each logger at info level."""
    for logger in loggers:
        for line in lines:
            logger.info(line)
