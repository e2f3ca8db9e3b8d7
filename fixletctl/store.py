"""
Record store for the fixlets CSV file.

Fixlet     — one row of the file.
load/save  — whole-file read and overwrite.
The rest   — pure operations over an explicit list owned by the caller.

File layout (one header line, then data lines):

    SiteID,FxiletID,Name,Criticality,RelevantComputerCount

The "FxiletID" spelling is kept so existing files round-trip unchanged.
"""

import csv
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

logger = logging.getLogger("fixletctl.store")


# ── Constants ────────────────────────────────────────────────────────────────

HEADER = ["SiteID", "FxiletID", "Name", "Criticality", "RelevantComputerCount"]
FIELD_COUNT = len(HEADER)

_INT_RE = re.compile(r"[+-]?[0-9]+")


# ── Data model ───────────────────────────────────────────────────────────────

@dataclass
class Fixlet:
    site_id: int                    # owning site
    fixlet_id: int                  # natural key, not enforced unique
    name: str
    criticality: str                # free text: "High", "Low", …
    relevant_computer_count: int

    def to_row(self) -> list[str]:
        return [
            str(self.site_id),
            str(self.fixlet_id),
            self.name,
            self.criticality,
            str(self.relevant_computer_count),
        ]


@dataclass
class RowError:
    """A data line that could not be turned into a Fixlet."""
    line_number: int                # 1-based, header is line 1
    reason: str
    raw: list[str] = field(default_factory=list)


@dataclass
class LoadResult:
    records: list[Fixlet] = field(default_factory=list)
    errors: list[RowError] = field(default_factory=list)


# ── File I/O ─────────────────────────────────────────────────────────────────

def load(path: Path) -> LoadResult:
    """
    Read every data row of the CSV file at path.

    The first line is discarded as the header without being checked.
    Integer fields that fail to parse become 0. Rows with the wrong number
    of fields are skipped and reported in LoadResult.errors; loading
    continues with the next row. A csv.Error stops loading at that line.

    Raises:
        OSError: the file cannot be opened.
    """
    result = LoadResult()

    with open(path, newline="", encoding="utf-8", errors="surrogateescape") as fh:
        reader = csv.reader(fh)
        try:
            next(reader, None)  # header
            for row in reader:
                if not row:
                    continue
                if len(row) != FIELD_COUNT:
                    err = RowError(
                        line_number=reader.line_num,
                        reason=f"expected {FIELD_COUNT} fields, got {len(row)}",
                        raw=row,
                    )
                    logger.warning("Skipping line %d: %s", err.line_number, err.reason)
                    result.errors.append(err)
                    continue
                result.records.append(_parse_row(row, reader.line_num))
        except csv.Error as e:
            err = RowError(line_number=reader.line_num, reason=str(e))
            logger.warning("Stopped reading at line %d: %s", err.line_number, err.reason)
            result.errors.append(err)

    return result


def save(path: Path, records: list[Fixlet]) -> None:
    """
    Overwrite the file at path with a header plus one line per record.

    Raises:
        OSError: the file cannot be created or truncated.
    """
    with open(path, "w", newline="", encoding="utf-8", errors="surrogateescape") as fh:
        writer = csv.writer(fh, lineterminator="\n")
        writer.writerow(HEADER)
        writer.writerows(r.to_row() for r in records)
    logger.debug("Wrote %d records to %s", len(records), path)


# ── Operations ───────────────────────────────────────────────────────────────

def find_first(records: list[Fixlet], query: str) -> Optional[Fixlet]:
    """
    Return the first record whose name or criticality contains query.

    Case-insensitive substring match. Only the first hit is returned,
    even when several records match.
    """
    needle = query.lower()
    for r in records:
        if needle in r.name.lower() or needle in r.criticality.lower():
            return r
    return None


def sort_by_computer_count(records: list[Fixlet]) -> None:
    """Sort in place, ascending by relevant_computer_count. Stable."""
    records.sort(key=lambda r: r.relevant_computer_count)


def append(records: list[Fixlet], record: Fixlet) -> list[Fixlet]:
    return records + [record]


def remove_by_key(records: list[Fixlet], fixlet_id: int) -> tuple[list[Fixlet], bool]:
    """
    Drop the first record with the given fixlet_id.

    Returns (new_list, True) on a hit, or (records, False) untouched when
    no record has that key. The input list is never mutated.
    """
    for i, r in enumerate(records):
        if r.fixlet_id == fixlet_id:
            return records[:i] + records[i + 1:], True
    return records, False


def parse_int(value: str) -> int:
    """
    Parse a plain decimal integer: optional sign, ASCII digits only.

    Rejects what int() would otherwise accept, such as "1_000" or
    non-ASCII digits.

    Raises:
        ValueError: value is not a plain decimal integer.
    """
    if not _INT_RE.fullmatch(value):
        raise ValueError(f"invalid integer: {value!r}")
    return int(value)


# ── Internal ─────────────────────────────────────────────────────────────────

def _parse_row(row: list[str], line_number: int) -> Fixlet:
    return Fixlet(
        site_id=_lenient_int(row[0], "SiteID", line_number),
        fixlet_id=_lenient_int(row[1], "FxiletID", line_number),
        name=row[2],
        criticality=row[3],
        relevant_computer_count=_lenient_int(row[4], "RelevantComputerCount", line_number),
    )


def _lenient_int(value: str, column: str, line_number: int) -> int:
    """Parse an integer field; anything unparseable reads as 0."""
    try:
        return parse_int(value.strip())
    except ValueError:
        logger.debug("Line %d: %s %r is not an integer, using 0", line_number, column, value)
        return 0
