"""Interactive session handles: read a line for a prompt, emit lines, close."""

from __future__ import annotations

import logging
from typing import IO, TYPE_CHECKING

from rich.console import Console

from promptcalc.exceptions import SessionClosedError

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


class Session:
    """
    Base session handle.

    Subclasses implement ``_read`` and ``_write``. Closing is idempotent and
    the handle is a context manager that closes on exit, whatever the exit
    path.
    """

    def __init__(self) -> None:
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def ask(self, prompt: str) -> str:
        """
        Show a prompt and block until the user submits a line.

        Returns:
            The line without its line terminator; empty at end of input

        Raises:
            SessionClosedError: If the session has been closed
        """
        if self._closed:
            raise SessionClosedError(prompt)
        logger.debug("Prompting: %s", prompt)
        return self._read(prompt).rstrip("\r\n")

    def emit(self, line: str) -> None:
        """Write one line to the normal output channel."""
        if self._closed:
            raise SessionClosedError()
        self._write(line)

    def close(self) -> None:
        if not self._closed:
            self._closed = True
            self._release()
            logger.debug("Session closed")

    def _read(self, prompt: str) -> str:
        raise NotImplementedError

    def _write(self, line: str) -> None:
        raise NotImplementedError

    def _release(self) -> None:
        """Hook for subclasses holding resources."""

    def __enter__(self) -> Session:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()


class ConsoleSession(Session):
    """Session on a rich console; reads stdin unless another stream is given."""

    def __init__(self, console: Console | None = None, stream: IO[str] | None = None) -> None:
        super().__init__()
        self.console = console or Console(soft_wrap=True, highlight=False)
        self.stream = stream

    def _read(self, prompt: str) -> str:
        try:
            return self.console.input(prompt, markup=False, emoji=False, stream=self.stream)
        except EOFError:
            logger.debug("End of input while prompting: %s", prompt)
            return ""

    def _write(self, line: str) -> None:
        self.console.print(line, markup=False, emoji=False, highlight=False)

    def _release(self) -> None:
        self.console.file.flush()
