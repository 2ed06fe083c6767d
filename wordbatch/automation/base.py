"""Abstract automation interface for the word-processing application."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class WordDocument(ABC):
    """A document opened in the application.

    The handle is owned by a single conversion step and must be closed
    before the next file is processed, whether the save succeeded or not.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._closed = False

    @abstractmethod
    def save_as(self, path: Path, file_format: int) -> None:
        """Save the document to ``path`` using the application's format code."""
        ...

    @abstractmethod
    def _close(self) -> None: ...

    @property
    def closed(self) -> bool:
        return self._closed

    def close(self) -> None:
        """Close without saving changes to the source. Safe to call twice."""
        if self._closed:
            return
        self._closed = True
        self._close()

    def __enter__(self) -> WordDocument:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


class WordApplication(ABC):
    """Handle on one running application instance.

    ``start()`` acquires the instance; ``quit()`` releases it exactly once.
    """

    def __init__(self) -> None:
        self._started = False
        self._released = False

    @abstractmethod
    def _start(self) -> None: ...

    @abstractmethod
    def _quit(self) -> None: ...

    @abstractmethod
    def open_document(self, path: Path) -> WordDocument:
        """Open ``path`` read-only and return the document handle."""
        ...

    @property
    def running(self) -> bool:
        return self._started and not self._released

    def start(self) -> None:
        if self._started:
            return
        self._start()
        self._started = True

    def quit(self) -> None:
        if not self._started or self._released:
            return
        self._released = True
        self._quit()

    def __enter__(self) -> WordApplication:
        self.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.quit()
