"""find-cargo-toml exceptions.

A missing manifest is normally *not* an error: the search simply yields
nothing.  These types cover the few cases where a caller asked for more
than the plain walk can promise.
"""

from __future__ import annotations


# ── Base ────────────────────────────────────────────────────
class FindError(Exception):
    """Root exception for all find-cargo-toml errors."""


# ── Options ────────────────────────────────────────────────
class InvalidFileName(FindError, ValueError):
    """The manifest file name is empty, a dot entry, or contains a separator."""

    def __init__(self, file_name: str) -> None:
        super().__init__(f"Invalid manifest file name {file_name!r}: must be a bare file name")
        self.file_name = file_name


# ── Lookup ─────────────────────────────────────────────────
class ManifestNotFound(FindError):
    """No ancestor of the start directory holds the manifest file."""

    def __init__(self, start_path: str | None = None, file_name: str = "Cargo.toml") -> None:
        where = f" (searched from {start_path})" if start_path else ""
        super().__init__(f"Manifest not found{where}: no {file_name} in parent chain")
        self.start_path = start_path
        self.file_name = file_name
