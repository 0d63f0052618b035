"""Upward manifest search.

:class:`FindIter` holds the whole search state: the directory to look in
next and the manifest name.  Every :meth:`FindIter.advance` checks one
directory at a time and stops early at the first hit, so a consumer that
only wants the nearest manifest never stats the rest of the chain.

Usage
-----
::

    from find_cargo_toml import find

    for manifest in find("src/lib.rs"):
        print(manifest)            # nearest first, filesystem root last
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import structlog

from find_cargo_toml.core.errors import ManifestNotFound
from find_cargo_toml.core.options import DEFAULT_FILE_NAME, SearchOptions
from find_cargo_toml.core.paths import is_regular_file, parent_dir, resolve_start_dir

logger = structlog.get_logger()


class FindIter(Iterator[Path]):
    """Lazy, single-use walk from *start_dir* up to the filesystem root.

    Yields ``<ancestor>/<file_name>`` for every ancestor (start included)
    where that path is a regular file.  Once exhausted it stays exhausted;
    call :func:`find` again for a fresh walk.
    """

    __slots__ = ("_start_dir", "_current", "_file_name")

    def __init__(self, start_dir: Path, file_name: str = DEFAULT_FILE_NAME) -> None:
        self._start_dir = start_dir
        self._current: Path | None = start_dir
        self._file_name = file_name

    @property
    def start_dir(self) -> Path:
        return self._start_dir

    @property
    def file_name(self) -> str:
        return self._file_name

    @property
    def current(self) -> Path | None:
        """Next directory to examine (``None`` after the root)."""
        return self._current

    def advance(self) -> Path | None:
        """Return the next match, or ``None`` when the walk is over."""
        while self._current is not None:
            candidate = self._current / self._file_name
            self._current = parent_dir(self._current)
            if is_regular_file(candidate):
                logger.debug("manifest_found", path=str(candidate))
                return candidate
        return None

    def __iter__(self) -> "FindIter":
        return self

    def __next__(self) -> Path:
        found = self.advance()
        if found is None:
            raise StopIteration
        return found

    def __repr__(self) -> str:
        return f"FindIter(current={self._current!r}, file_name={self._file_name!r})"


def find(
    input: str | os.PathLike[str] = ".",
    base: str | os.PathLike[str] | None = None,
    file_name: str | None = None,
) -> FindIter:
    """Find manifest files by walking up from *input*.

    Parameters
    ----------
    input:
        Directory or file to start from.  Relative paths are joined onto
        *base*.  The path does not need to exist.
    base:
        Anchor for a relative *input*.  Defaults to the current working
        directory (or ``.`` if it cannot be determined).
    file_name:
        Manifest name to look for.  Defaults to ``Cargo.toml``.

    Returns
    -------
    FindIter
        Full paths to each manifest, nearest directory first.

    Raises
    ------
    InvalidFileName
        *file_name* is not a bare file name.
    """
    options = SearchOptions.build(base=base, file_name=file_name)
    start_dir = resolve_start_dir(input, options.base)
    logger.debug("search_started", start_dir=str(start_dir), file_name=options.file_name)
    return FindIter(start_dir, options.file_name)


def find_from_current_dir(
    input: str | os.PathLike[str] = ".",
    file_name: str | None = None,
) -> FindIter:
    """Same as :func:`find` with the current working directory as base."""
    return find(input, None, file_name)


def find_nearest(
    input: str | os.PathLike[str] = ".",
    base: str | os.PathLike[str] | None = None,
    file_name: str | None = None,
) -> Path:
    """Return the closest manifest above *input*.

    Raises
    ------
    ManifestNotFound
        If no ancestor holds the manifest.
    """
    it = find(input, base, file_name)
    nearest = it.advance()
    if nearest is None:
        logger.debug("search_exhausted", start_dir=str(it.start_dir), file_name=it.file_name)
        raise ManifestNotFound(start_path=str(it.start_dir), file_name=it.file_name)
    return nearest
