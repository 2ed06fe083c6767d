"""Shared test fixtures for wordbatch."""

from pathlib import Path

import pytest

from wordbatch.automation.base import WordApplication, WordDocument
from wordbatch.automation.models import ApplicationUnavailableError, AutomationError
from wordbatch.config.models import ConversionConfig, WordbatchConfig


class FakeDocument(WordDocument):
    """Writes a marker file instead of asking Word to render anything."""

    def __init__(self, path: Path, app: "FakeWordApplication") -> None:
        super().__init__(path)
        self._app = app

    def save_as(self, path: Path, file_format: int) -> None:
        if self.path.name in self._app.fail_on:
            raise AutomationError("save", "simulated save failure")
        path.write_text(f"converted {self.path.name} format={file_format}")
        self._app.saved.append((self.path, path, file_format))

    def _close(self) -> None:
        self._app.closed_docs.append(self.path)


class FakeWordApplication(WordApplication):
    def __init__(self, fail_on=(), fail_open=(), unavailable=False) -> None:
        super().__init__()
        self.fail_on = set(fail_on)
        self.fail_open = set(fail_open)
        self.unavailable = unavailable
        self.start_calls = 0
        self.quit_calls = 0
        self.opened: list[Path] = []
        self.saved: list[tuple[Path, Path, int]] = []
        self.closed_docs: list[Path] = []

    def _start(self) -> None:
        self.start_calls += 1
        if self.unavailable:
            raise ApplicationUnavailableError("simulated: Word not installed")

    def _quit(self) -> None:
        self.quit_calls += 1

    def open_document(self, path: Path) -> FakeDocument:
        self.opened.append(path)
        if path.name in self.fail_open:
            raise AutomationError("open", "simulated corrupt document")
        return FakeDocument(path, self)


class FakeAppFactory:
    """Callable handed to BatchConverter; remembers every instance it made."""

    def __init__(self, **kwargs) -> None:
        self._kwargs = kwargs
        self.created: list[FakeWordApplication] = []

    def __call__(self) -> FakeWordApplication:
        app = FakeWordApplication(**self._kwargs)
        self.created.append(app)
        return app

    @property
    def started(self) -> int:
        return sum(a.start_calls for a in self.created)

    @property
    def released(self) -> int:
        return sum(a.quit_calls for a in self.created)

    @property
    def saved(self) -> list[tuple[Path, Path, int]]:
        return [s for a in self.created for s in a.saved]

    @property
    def opened(self) -> list[Path]:
        return [p for a in self.created for p in a.opened]

    @property
    def closed_docs(self) -> list[Path]:
        return [p for a in self.created for p in a.closed_docs]


@pytest.fixture
def make_factory():
    """Build a FakeAppFactory, e.g. ``make_factory(fail_on={"b.doc"})``."""
    return FakeAppFactory


@pytest.fixture
def app_factory():
    return FakeAppFactory()


@pytest.fixture
def sample_config():
    return WordbatchConfig()


@pytest.fixture
def conversion_config():
    return ConversionConfig(target_format="pdf")


@pytest.fixture
def doc_dir(tmp_path):
    """A folder of legacy documents plus some noise."""
    folder = tmp_path / "docs"
    folder.mkdir()
    for name in ("a.doc", "b.doc", "c.doc"):
        (folder / name).write_bytes(b"\xd0\xcf\x11\xe0 fake ole2")
    (folder / "~$a.doc").write_bytes(b"lock")
    (folder / "notes.rtf").write_text(r"{\rtf1\ansi notes}")
    (folder / "photo.png").write_bytes(b"\x89PNG")
    sub = folder / "archive"
    sub.mkdir()
    (sub / "old.doc").write_bytes(b"\xd0\xcf\x11\xe0 fake ole2")
    return folder
