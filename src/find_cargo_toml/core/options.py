"""Search options (Pydantic v2).

Exactly two knobs change a search:

* ``base`` moves the anchor that relative inputs are joined onto.
* ``file_name`` changes which manifest counts as a match.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator

from find_cargo_toml.core.errors import InvalidFileName

DEFAULT_FILE_NAME = "Cargo.toml"

_SEPARATORS = frozenset(filter(None, (os.sep, os.altsep, "/")))


def check_file_name(file_name: str) -> str:
    """Return *file_name* unchanged, or raise :class:`InvalidFileName`.

    Only a bare name is accepted: nothing empty, no ``.``/``..`` and no
    path separators (``a/Cargo.toml`` would silently search a subdirectory).
    """
    if file_name in ("", ".", "..") or any(sep in file_name for sep in _SEPARATORS):
        raise InvalidFileName(file_name)
    return file_name


class SearchOptions(BaseModel):
    """Optional parameters of a single search."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    base: Path | None = None
    file_name: str = DEFAULT_FILE_NAME

    @field_validator("file_name")
    @classmethod
    def _bare_file_name(cls, v: str) -> str:
        return check_file_name(v)

    @classmethod
    def build(cls, base: str | os.PathLike[str] | None = None, file_name: str | None = None) -> "SearchOptions":
        """Build options from nullable call arguments.

        ``None`` means "use the default".  Validation failures surface as
        :class:`InvalidFileName` rather than pydantic's ``ValidationError``.
        """
        if file_name is None:
            file_name = DEFAULT_FILE_NAME
        # Check before pydantic so the typed error is not wrapped.
        check_file_name(file_name)
        return cls(base=Path(base) if base is not None else None, file_name=file_name)
