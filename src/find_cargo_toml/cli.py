"""find-cargo-toml CLI — presentation layer.

Thin adapter over :func:`find_cargo_toml.find`: resolves settings, runs
the search and prints one ``Found: <path>`` line per manifest.
"""

from __future__ import annotations

from pathlib import Path

import structlog
import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from find_cargo_toml.core.errors import InvalidFileName, ManifestNotFound
from find_cargo_toml.core.logging import bind_search_context, configure_logging
from find_cargo_toml.core.search import find, find_nearest
from find_cargo_toml.core.settings import Settings

logger = structlog.get_logger()

app = typer.Typer(help="Find Cargo.toml (or another manifest) in the current directory and its parents.")

# Paths go to stdout verbatim: no wrapping, highlighting, markup or emoji codes.
out = Console(soft_wrap=True, highlight=False, markup=False, emoji=False)
err = Console(stderr=True, soft_wrap=True)

FOUND_LABEL = "Found: "


def _found(path: Path) -> None:
    out.print(f"{FOUND_LABEL}{path}")


@app.command()
def search(
    input: str = typer.Argument(".", help="Directory or file to start from."),
    base: Path | None = typer.Option(None, "--base", "-b", help="Anchor for a relative INPUT (default: cwd)."),
    file_name: str | None = typer.Option(None, "--file-name", "-f", help="Manifest name (default: Cargo.toml)."),
    first: bool = typer.Option(False, "--first", help="Print only the nearest manifest; fail if there is none."),
    log_level: str = typer.Option("WARNING", "--log-level", envvar="FIND_CARGO_TOML_LOG_LEVEL", help="Log level."),
    log_json: bool = typer.Option(False, "--log-json/--log-text", envvar="FIND_CARGO_TOML_LOG_JSON", help="JSON or human logs."),
) -> None:
    """Print every manifest from INPUT up to the filesystem root, nearest first."""
    configure_logging(level=log_level, json_output=log_json)

    overrides: dict[str, str] = {}
    if file_name is not None:
        overrides["file_name"] = file_name
    try:
        settings = Settings(log_level=log_level, log_json=log_json, **overrides)  # type: ignore[arg-type]
    except ValidationError as exc:
        err.print(f"[red]ERROR:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2)

    bind_search_context(input=input, file_name=settings.file_name)
    try:
        if first:
            _found(find_nearest(input, base, settings.file_name))
            return
        count = 0
        for path in find(input, base, settings.file_name):
            _found(path)
            count += 1
    except InvalidFileName as exc:
        err.print(f"[red]ERROR:[/red] {escape(str(exc))}")
        raise typer.Exit(code=2)
    except ManifestNotFound as exc:
        err.print(f"[red]ERROR:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    logger.info("search_finished", matches=count)


# ── Entrypoint ──────────────────────────────────────────────
def main() -> None:  # noqa: D103
    app()
