"""
CLI entry point — prints a path resolved the way `bazel run` users expect.
"""
from __future__ import annotations

import logging

import typer
from rich.console import Console
from rich.markup import escape

from .config import APP_NAME, get_log_level
from .core.path_utils import unbazelify
from .errors import WorkingDirectoryUnavailable

app = typer.Typer(
    name=APP_NAME,
    help="Resolve a path against the directory `bazel run` was run from.",
    add_completion=False,
)

err_console = Console(stderr=True)


@app.command()
def resolve_cmd(
    path: str = typer.Argument(..., help="Path to resolve"),
) -> None:
    """Print PATH as an absolute path."""
    try:
        resolved = unbazelify(path)
    except WorkingDirectoryUnavailable as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", highlight=False, soft_wrap=True)
        raise typer.Exit(1)
    typer.echo(resolved)


def main() -> None:
    """Main CLI entrypoint."""
    logging.basicConfig(level=get_log_level(), format="%(levelname)s %(name)s: %(message)s")
    app()


if __name__ == "__main__":
    main()
