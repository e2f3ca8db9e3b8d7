"""
fixletctl — entry point.

CLI flags, config resolution, logging setup, initial load, command loop.
"""

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from fixletctl import __version__
from fixletctl.config import load_config
from fixletctl.shell import run_shell
from fixletctl.store import load
from fixletctl.ui.theme import FIXLETCTL_THEME


# ── Console (shared across the tool) ─────────────────────────────────────────

console = Console(theme=FIXLETCTL_THEME, highlight=False)


DEFAULT_FILE = "fixlets.csv"


# ── CLI ───────────────────────────────────────────────────────────────────────

@click.command(name="fixletctl", context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(__version__, "-V", "--version", prog_name="fixletctl")
@click.option(
    "--file", "-f", "file_",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"CSV file to manage (default: config 'file', then ./{DEFAULT_FILE}).",
)
@click.option("--table", is_flag=True, default=False, help="Show list output as a table.")
@click.option(
    "--menu",
    is_flag=True,
    default=False,
    help="Pick commands from an arrow-key menu (interactive terminals only).",
)
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log debug detail to stderr.")
def cli(
    file_: Optional[Path],
    table: bool,
    menu: bool,
    verbose: bool,
) -> None:
    """Fixlet CSV record manager.

    Loads the file, then reads commands one per line:
    list, query, add, delete, sort, exit.
    Every add or delete rewrites the file.

    \b
    Config file:
      ~/.config/fixletctl/config.toml   file = "...", view = "lines" | "table"
    """
    _setup_logging(verbose)

    config = load_config()
    path = file_ or Path(config["file"] or DEFAULT_FILE)
    table = table or config["view"] == "table"

    try:
        loaded = load(path)
    except OSError as e:
        console.print(f"[red]Error reading CSV file:[/red] {escape(str(e))}")
        return

    if loaded.errors:
        n = len(loaded.errors)
        console.print(
            f"[dim]Skipped {n} malformed row{'s' if n != 1 else ''} in "
            f"{escape(str(path))}.[/dim]"
        )

    run_shell(
        path,
        loaded.records,
        console,
        table=table,
        menu=menu and sys.stdin.isatty(),
    )


# ── Logging ───────────────────────────────────────────────────────────────────

def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )


# ── Entry ─────────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    cli()
