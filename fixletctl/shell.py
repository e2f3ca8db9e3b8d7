"""
Interactive command loop.

Reads one command per line and dispatches:

  list    — print every record
  query   — print the first record whose name or criticality matches
  add     — append a record, then rewrite the file
  delete  — remove the first record with a FxiletID, then rewrite the file
  sort    — sort by computer count (in memory only), then list
  exit    — leave the loop

The loop owns the record list for the whole session. The file is only
written after a successful add or delete. A failed write is reported and
the session carries on with the in-memory list.
"""

from __future__ import annotations

import logging
import shlex
from pathlib import Path
from typing import Callable

from rich.console import Console
from rich.markup import escape
from simple_term_menu import TerminalMenu

from fixletctl.store import (
    Fixlet,
    append,
    parse_int,
    remove_by_key,
    save,
    sort_by_computer_count,
)
from fixletctl.ui.render import print_records, print_search

logger = logging.getLogger("fixletctl.shell")


# ── Constants ─────────────────────────────────────────────────────────────────

COMMANDS = ("list", "query", "add", "delete", "sort", "exit")

PROMPT_COMMAND = "Choose an operation: " + ", ".join(COMMANDS)
PROMPT_QUERY   = "Enter name or criticality to query:"
PROMPT_ADD     = "Enter SiteID, FxiletID, Name, Criticality, RelevantComputerCount:"
PROMPT_DELETE  = "Enter FxiletID to delete:"


# ── Public API ────────────────────────────────────────────────────────────────

def run_shell(
    path: Path,
    records: list[Fixlet],
    console: Console,
    read_line: Callable[[], str] = input,
    table: bool = False,
    menu: bool = False,
) -> list[Fixlet]:
    """
    Run the command loop until exit, end of input or Ctrl-C.

    Args:
        path:      CSV file rewritten after every add/delete.
        records:   Records loaded at start-up.
        console:   Rich Console for all output.
        read_line: Returns the next line of user input (no trailing newline).
        table:     Render list output as a table instead of lines.
        menu:      Pick commands from an arrow-key menu instead of typing.

    Returns the in-memory records as they stand when the loop ends.
    """
    while True:
        try:
            console.print()
            command = _pick_command(console) if menu else _ask(console, read_line, PROMPT_COMMAND)

            if command == "list":
                print_records(records, console, table=table)
            elif command == "query":
                query = _ask(console, read_line, PROMPT_QUERY)
                print_search(records, query, console)
            elif command == "sort":
                sort_by_computer_count(records)
                print_records(records, console, table=table)
            elif command == "add":
                records = _add(path, records, console, read_line)
            elif command == "delete":
                records = _delete(path, records, console, read_line)
            elif command == "exit":
                console.print("Exiting program.")
                return records
            else:
                console.print("Invalid command.")
        except (KeyboardInterrupt, EOFError):
            console.print("\nExiting program.")
            return records


def parse_entry(line: str) -> Fixlet:
    """
    Parse "SiteID FxiletID Name Criticality Count" into a Fixlet.

    Tokens are split shell-style, so a name with spaces can be quoted:
        1 100 "Patch A" High 5

    Raises:
        ValueError: wrong token count, unbalanced quotes, or a
                    non-integer in an integer column.
    """
    tokens = shlex.split(line)
    if len(tokens) != 5:
        raise ValueError(f"expected 5 values, got {len(tokens)}")

    site, fixlet, name, criticality, count = tokens
    return Fixlet(
        site_id=_strict_int(site, "SiteID"),
        fixlet_id=_strict_int(fixlet, "FxiletID"),
        name=name,
        criticality=criticality,
        relevant_computer_count=_strict_int(count, "RelevantComputerCount"),
    )


# ── Commands ──────────────────────────────────────────────────────────────────

def _add(
    path: Path, records: list[Fixlet], console: Console, read_line: Callable[[], str],
) -> list[Fixlet]:
    line = _ask(console, read_line, PROMPT_ADD)
    try:
        entry = parse_entry(line)
    except ValueError as e:
        console.print(f"[red]Error adding entry:[/red] {escape(str(e))}")
        return records

    records = append(records, entry)
    if _persist(path, records, console):
        console.print("Entry added.")
    else:
        console.print("Entry added in memory only.")
    return records


def _delete(
    path: Path, records: list[Fixlet], console: Console, read_line: Callable[[], str],
) -> list[Fixlet]:
    raw = _ask(console, read_line, PROMPT_DELETE)
    try:
        fixlet_id = parse_int(raw)
    except ValueError:
        console.print("Invalid FxiletID.")
        return records

    records, found = remove_by_key(records, fixlet_id)
    if not found:
        console.print("Entry not found.")
        return records

    if _persist(path, records, console):
        console.print("Entry deleted.")
    else:
        console.print("Entry deleted in memory only.")
    return records


# ── Helpers ───────────────────────────────────────────────────────────────────

def _persist(path: Path, records: list[Fixlet], console: Console) -> bool:
    """Rewrite the file; report and log a failure instead of raising."""
    try:
        save(path, records)
    except OSError as e:
        logger.error("Could not write %s: %s", path, e)
        console.print(f"[red]Error writing CSV file:[/red] {escape(str(e))}")
        return False
    return True


def _ask(console: Console, read_line: Callable[[], str], prompt: str) -> str:
    console.print(prompt)
    return read_line().strip()


def _pick_command(console: Console) -> str:
    """Arrow-key command picker. Escape / q counts as exit."""
    console.print(PROMPT_COMMAND)
    choice = TerminalMenu(
        list(COMMANDS),
        menu_cursor="› ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan", "bold"),
        cursor_index=0,
    ).show()
    if choice is None:
        return "exit"
    return COMMANDS[choice]


def _strict_int(token: str, column: str) -> int:
    try:
        return parse_int(token)
    except ValueError:
        raise ValueError(f"{column} must be an integer, got {token!r}") from None
