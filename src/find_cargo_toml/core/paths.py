"""Start-directory resolver.

Turns whatever the caller passed (relative or absolute, file or
directory, existing or not) into the one directory the upward walk
starts from.

Algorithm
---------
1. Absolute input is used as-is; relative input is joined onto *base*
   (default: the current working directory).
2. ``.`` and ``..`` are reduced lexically.  Symlinks are **not** followed,
   so ``link/..`` means the directory holding ``link``.
3. An existing regular file is replaced by its parent directory.

Nothing here raises for a bad path: a missing directory is a valid start,
and an unreadable cwd degrades to ``Path(".")``.
"""

from __future__ import annotations

import os
from pathlib import Path

import structlog

logger = structlog.get_logger()


def normalize_path(path: Path) -> Path:
    """Resolve ``.`` and ``..`` components without touching the filesystem."""
    return Path(os.path.normpath(path))


def current_dir() -> Path:
    """Return the cwd, or ``Path(".")`` if the process has none.

    The cwd can vanish under a running process (deleted directory,
    revoked permissions); that is reported as a warning, not an error.
    """
    try:
        return Path.cwd()
    except OSError as exc:
        logger.warning("cwd_unavailable", error=str(exc), fallback=".")
        return Path(".")


def is_regular_file(path: Path) -> bool:
    """Return whether *path* is a regular file; any ``OSError`` counts as no.

    ``Path.is_file`` still raises for e.g. ``ENAMETOOLONG`` or ``EACCES``.
    """
    return os.path.isfile(path)


def parent_dir(path: Path) -> Path | None:
    """Return the parent of *path*, or ``None`` once there is nowhere left to go.

    ``Path("/").parent`` and ``Path(".").parent`` are the path itself;
    both mark the end of the ascent.  A relative path ending in ``..``
    also ends it: its lexical parent would point back down.
    """
    parent = path.parent
    if parent == path or path.name == "..":
        return None
    return parent


def resolve_start_dir(
    input: str | os.PathLike[str],
    base: str | os.PathLike[str] | None = None,
) -> Path:
    """Return the normalized directory a search should start from.

    Parameters
    ----------
    input:
        Where to start.  A file means "its directory".  ``""`` means ``"."``.
    base:
        Anchor for a relative *input*.  Defaults to :func:`current_dir`.

    Returns
    -------
    Path
        Absolute unless the cwd was unavailable and no *base* was given.
    """
    raw = Path(input)
    if raw.is_absolute():
        start = raw
    else:
        anchor = Path(base) if base is not None else current_dir()
        start = anchor / raw

    start = normalize_path(start)
    if is_regular_file(start):
        # A file with no distinct parent stays where it is.
        start = parent_dir(start) or start
    return start
