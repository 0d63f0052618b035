"""Find ``Cargo.toml`` (or any manifest) by walking up the directory tree."""

from find_cargo_toml.core.errors import FindError, InvalidFileName, ManifestNotFound
from find_cargo_toml.core.options import DEFAULT_FILE_NAME, SearchOptions
from find_cargo_toml.core.search import FindIter, find, find_from_current_dir, find_nearest

__all__ = [
    "DEFAULT_FILE_NAME",
    "FindError",
    "FindIter",
    "InvalidFileName",
    "ManifestNotFound",
    "SearchOptions",
    "find",
    "find_from_current_dir",
    "find_nearest",
]

__version__ = "0.1.0"
