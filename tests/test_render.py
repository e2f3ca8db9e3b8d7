"""
Tests for ui/render.py.

Covers:
  - print_records: line format, empty sentinel, table view
  - print_search:  first match only, not-found sentinel
  - markup safety: record text never parsed as Rich markup
"""

from io import StringIO

from rich.console import Console

from fixletctl.store import Fixlet
from fixletctl.ui.render import (
    NO_ENTRIES,
    NOT_FOUND,
    format_line,
    print_records,
    print_search,
    printable,
)
from fixletctl.ui.theme import CRITICALITY_STYLES, criticality_style


# ── Helpers ──────────────────────────────────────────────────────────────────

def _console() -> tuple[Console, StringIO]:
    """Return a Console that captures output in a StringIO buffer."""
    buf = StringIO()
    con = Console(file=buf, highlight=False, no_color=True, width=200)
    return con, buf


def _sample() -> list[Fixlet]:
    return [
        Fixlet(1, 100, "Patch A", "High", 5),
        Fixlet(2, 101, "Patch B", "Low", 2),
    ]


# ── print_records ────────────────────────────────────────────────────────────

class TestPrintRecords:
    def test_one_line_per_record_in_fixed_format(self):
        con, buf = _console()
        print_records(_sample(), con)
        assert buf.getvalue().splitlines() == [
            "SiteID: 1, FxiletID: 100, Name: Patch A, Criticality: High, Computers: 5",
            "SiteID: 2, FxiletID: 101, Name: Patch B, Criticality: Low, Computers: 2",
        ]

    def test_empty_prints_sentinel(self):
        con, buf = _console()
        print_records([], con)
        assert buf.getvalue().strip() == NO_ENTRIES

    def test_empty_table_prints_sentinel(self):
        con, buf = _console()
        print_records([], con, table=True)
        assert buf.getvalue().strip() == NO_ENTRIES

    def test_table_view_has_headers_and_rows(self):
        con, buf = _console()
        print_records(_sample(), con, table=True)
        out = buf.getvalue()
        for header in ("SiteID", "FxiletID", "Name", "Criticality", "Computers"):
            assert header in out
        assert out.index("Patch A") < out.index("Patch B")

    def test_long_line_is_not_wrapped(self):
        con = Console(file=StringIO(), highlight=False, no_color=True, width=40)
        print_records([Fixlet(1, 1, "x" * 60, "Low", 1)], con)
        assert len(con.file.getvalue().splitlines()) == 1


# ── print_search ─────────────────────────────────────────────────────────────

class TestPrintSearch:
    def test_prints_only_first_match(self):
        con, buf = _console()
        print_search(_sample(), "patch", con)
        lines = buf.getvalue().splitlines()
        assert len(lines) == 1
        assert "FxiletID: 100" in lines[0]

    def test_case_insensitive_criticality_match(self):
        con, buf = _console()
        print_search(_sample(), "LOW", con)
        assert "FxiletID: 101" in buf.getvalue()

    def test_not_found_sentinel(self):
        con, buf = _console()
        print_search(_sample(), "kernel", con)
        assert buf.getvalue().strip() == NOT_FOUND


# ── Markup safety / styling ──────────────────────────────────────────────────

class TestFormatLine:
    def test_brackets_in_name_print_literally(self):
        con, buf = _console()
        con.print(format_line(Fixlet(1, 1, "[bold]KB123[/bold]", "[red]", 1)))
        assert "[bold]KB123[/bold]" in buf.getvalue()
        assert "[red]" in buf.getvalue()

    def test_known_criticality_is_styled(self):
        line = format_line(Fixlet(1, 1, "Patch", "High", 1))
        assert any(span.style == CRITICALITY_STYLES["high"] for span in line.spans)

    def test_criticality_style_ignores_case_and_space(self):
        assert criticality_style(" CRITICAL ") == CRITICALITY_STYLES["critical"]

    def test_unknown_criticality_is_unstyled(self):
        assert criticality_style("Whenever") == ""

    def test_undecodable_bytes_shown_as_replacement_char(self):
        name = b"Caf\xe9 patch".decode("utf-8", "surrogateescape")
        assert printable(name) == "Caf� patch"

    def test_undecodable_bytes_render_in_line_and_table(self):
        name = b"Caf\xe9".decode("utf-8", "surrogateescape")
        for table in (False, True):
            con, buf = _console()
            print_records([Fixlet(1, 1, name, "Low", 1)], con, table=table)
            assert "Caf�" in buf.getvalue()

    def test_styled_criticalities_are_exactly_the_four_levels(self):
        assert set(CRITICALITY_STYLES) == {"critical", "high", "medium", "low"}
        assert criticality_style("Moderate") == ""
