"""CSV parser: convert raw CSV text into address records for batch runs.

Handles header row detection, column name matching, and basic field
extraction. No validation or calculation; those are separate stages.
"""

from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field


@dataclass
class AddressRecord:
    """A raw MAC/prefix pair read from a CSV source.

    Contains the stripped field values plus metadata about where the
    record came from.
    """

    source: str
    row_number: int
    name: str = ""
    mac_address: str = ""
    prefix: str = ""
    extra: dict[str, str] = field(default_factory=dict)


# Known column names for key fields (case-insensitive matching)
MAC_COLUMNS = frozenset({"mac", "mac address", "mac_address"})
PREFIX_COLUMNS = frozenset({"prefix", "ipv6 prefix", "ip-start"})
NAME_COLUMNS = frozenset({"name", "machine", "host", "hostname"})


def find_header_row(rows: list[list[str]], max_rows: int = 5) -> int:
    """Find the header row index by looking for a MAC column.

    Args:
        rows: All CSV rows.
        max_rows: Maximum number of rows to check.

    Returns:
        Index of the header row (0-based), 0 if none was found.
    """
    for i, row in enumerate(rows[:max_rows]):
        if any(cell.strip().lower() in MAC_COLUMNS for cell in row):
            return i
    return 0


def _find_col(headers: list[str], candidates: frozenset[str]) -> int | None:
    for i, h in enumerate(headers):
        if h in candidates:
            return i
    return None


def parse_csv(
    csv_text: str,
    source: str,
    mac_column: str | None = None,
    prefix_column: str | None = None,
    name_column: str | None = None,
) -> list[AddressRecord]:
    """Parse CSV text into AddressRecord objects.

    Handles:
    - Header row detection (scans first 5 rows for a MAC column)
    - Case-insensitive column matching, optionally overridden by the
      explicit column names
    - Row length validation (skips rows not matching header count)
    - Empty row filtering

    Args:
        csv_text: Raw CSV text content.
        source: Name of the input (e.g. a file name), kept on each record.

    Returns:
        List of AddressRecord objects, one per non-empty row.
    """
    rows = list(csv.reader(io.StringIO(csv_text)))
    if not rows:
        return []

    header_idx = find_header_row(rows)
    headers = [h.strip() for h in rows[header_idx]]
    header_lower = [h.lower() for h in headers]

    def _column(override: str | None, defaults: frozenset[str]) -> int | None:
        if override:
            return _find_col(header_lower, frozenset({override.strip().lower()}))
        return _find_col(header_lower, defaults)

    mac_col = _column(mac_column, MAC_COLUMNS)
    prefix_col = _column(prefix_column, PREFIX_COLUMNS)
    name_col = _column(name_column, NAME_COLUMNS)
    key_cols = {mac_col, prefix_col, name_col} - {None}

    records: list[AddressRecord] = []

    for row_idx, row in enumerate(rows[header_idx + 1:], start=header_idx + 1):
        if len(row) != len(headers):
            continue
        if not any(value.strip() for value in row):
            continue

        def _get(col: int | None) -> str:
            return row[col].strip() if col is not None else ""

        extra = {
            header: value.strip()
            for col_idx, (header, value) in enumerate(zip(headers, row))
            if col_idx not in key_cols and header and value.strip()
        }

        records.append(AddressRecord(
            source=source,
            row_number=row_idx + 1,  # 1-based for user display
            name=_get(name_col),
            mac_address=_get(mac_col),
            prefix=_get(prefix_col),
            extra=extra,
        ))

    return records
