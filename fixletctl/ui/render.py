"""
List / Search renderer.

One record per line in the fixed format:

    SiteID: 1, FxiletID: 100, Name: Patch A, Criticality: High, Computers: 5

or, for list, an optional Rich table with the same columns. Record text
is always appended as plain Text so names like "[KB123]" are never parsed
as markup.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from fixletctl.store import Fixlet, find_first
from fixletctl.ui.theme import COLOR_BRAND, COLOR_DIM, criticality_style


NO_ENTRIES = "No entries available."
NOT_FOUND = "No entries found."


# ── Public API ────────────────────────────────────────────────────────────────

def print_records(records: list[Fixlet], console: Console, table: bool = False) -> None:
    """Print every record, or the empty sentinel when there are none."""
    if not records:
        console.print(NO_ENTRIES)
        return

    if table:
        console.print(build_table(records))
        return

    for r in records:
        console.print(format_line(r), soft_wrap=True)


def print_search(records: list[Fixlet], query: str, console: Console) -> None:
    """Print the first record matching query, or the not-found sentinel."""
    hit = find_first(records, query)
    if hit is None:
        console.print(NOT_FOUND)
        return
    console.print(format_line(hit), soft_wrap=True)


def format_line(r: Fixlet) -> Text:
    t = Text()
    t.append(f"SiteID: {r.site_id}, FxiletID: {r.fixlet_id}, Name: ")
    t.append(printable(r.name))
    t.append(", Criticality: ")
    t.append(printable(r.criticality), style=criticality_style(r.criticality))
    t.append(f", Computers: {r.relevant_computer_count}")
    return t


def printable(text: str) -> str:
    """Swap bytes that were not valid UTF-8 in the file for U+FFFD."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def build_table(records: list[Fixlet]) -> Table:
    table = Table(
        show_header=True,
        header_style=f"bold {COLOR_BRAND}",
        border_style=COLOR_DIM,
        show_edge=False,
    )
    table.add_column("SiteID", justify="right")
    table.add_column("FxiletID", justify="right")
    table.add_column("Name", overflow="fold")
    table.add_column("Criticality")
    table.add_column("Computers", justify="right")

    for r in records:
        table.add_row(
            str(r.site_id),
            str(r.fixlet_id),
            Text(printable(r.name)),
            Text(printable(r.criticality), style=criticality_style(r.criticality)),
            str(r.relevant_computer_count),
        )
    return table
