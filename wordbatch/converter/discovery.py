"""Enumerate the input files for a run."""

from __future__ import annotations

import logging
from pathlib import Path, PurePosixPath, PureWindowsPath

logger = logging.getLogger(__name__)

LOCK_FILE_PREFIX = "~$"


class SourceNotFoundError(FileNotFoundError):
    """The source path given to a run does not exist."""


class InvalidPatternError(ValueError):
    """The include filter cannot be used as a glob under the source directory."""


def _check_pattern(include: str) -> None:
    # Path.glob only accepts patterns relative to the directory it walks
    if PurePosixPath(include).is_absolute() or PureWindowsPath(include).anchor:
        raise InvalidPatternError(
            f"Include filter must be a relative pattern such as '*.doc', got: {include}"
        )


def find_sources(source: str | Path, include: str = "*.doc", *, recurse: bool = False) -> list[Path]:
    """Return the files a run should process.

    A file source is returned as-is and ``include`` is ignored. A directory
    source yields the files matching the ``include`` glob, sorted by path.
    Office lock files (``~$name.doc``) are never returned.
    """
    path = Path(source)
    if not path.exists():
        raise SourceNotFoundError(f"Source path not found: {path}")

    if path.is_file():
        return [path]

    _check_pattern(include)
    try:
        matches = path.rglob(include) if recurse else path.glob(include)
        files = sorted(
            p for p in matches if p.is_file() and not p.name.startswith(LOCK_FILE_PREFIX)
        )
    except (NotImplementedError, ValueError) as e:
        raise InvalidPatternError(f"Invalid include filter {include!r}: {e}") from e
    logger.debug("found %d file(s) matching %r under %s", len(files), include, path)
    return files
