"""
Spreadsheet value-grid parsing.

Sheets arrive from the REST client as a list of rows, each a list of cell
strings, with the header in the first row. This module turns that grid into
string-keyed rows whose keys follow the dashboard's header convention, and
resolves semantic fields across the several historical spellings a column
may have.
"""

import re
from typing import Any, Iterable, Mapping, Optional, Sequence

import structlog

from ..errors import MalformedRowError

logger = structlog.get_logger(__name__)

_NON_ALNUM = re.compile(r"[^a-z0-9]")
_UNDERSCORE_RUN = re.compile(r"_+")


def normalize_header(header: Any) -> str:
    """
    Normalize a sheet header into a row key.

    Lowercases, maps every character outside [a-z0-9] to "_" and collapses
    runs of "_", so "Study Link #" becomes "study_link_".

    Args:
        header: Header cell value

    Returns:
        Normalized key
    """
    key = _NON_ALNUM.sub("_", str(header).lower())
    return _UNDERSCORE_RUN.sub("_", key)


def parse_sheet_values(values: Optional[Sequence[Sequence[Any]]]) -> list[dict[str, Any]]:
    """
    Parse a sheet value grid into row dictionaries.

    Expected format:
    [
        ["Brand", "Study Title", "Study Link #"],
        ["LawnStarter", "Best Cities for Dogs", "42"],
    ]

    Each data row becomes {"id": row_index, <normalized header>: cell, ...}
    where row_index is zero-based over the data rows. Missing trailing cells
    are filled with "".

    Args:
        values: Raw value grid, header first

    Returns:
        List of row dictionaries (empty when there is no data row)
    """
    if not values or len(values) < 2:
        return []

    headers = [normalize_header(h) for h in values[0]]
    rows = []

    for index, raw_row in enumerate(values[1:]):
        try:
            rows.append(_parse_row(index, headers, raw_row))
        except MalformedRowError as e:
            logger.warning("Skipping malformed sheet row", row_index=e.row_index, reason=str(e))

    return rows


def _parse_row(index: int, headers: list[str], raw_row: Any) -> dict[str, Any]:
    if raw_row is None:
        raw_row = []
    if isinstance(raw_row, (str, bytes)) or not isinstance(raw_row, Sequence):
        raise MalformedRowError(
            f"Row must be a list of cells, got {type(raw_row).__name__}",
            row_index=index,
        )

    item: dict[str, Any] = {"id": index}
    for col_index, header in enumerate(headers):
        cell = raw_row[col_index] if col_index < len(raw_row) else ""
        item[header] = cell if cell is not None else ""
    return item


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty after stripping."""
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def resolve_field(row: Mapping[str, Any], aliases: Iterable[str], default: Any = None) -> Any:
    """
    Resolve a semantic field from a row across its accepted column keys.

    Args:
        row: Row dictionary
        aliases: Accepted keys in priority order
        default: Value returned when no alias holds a non-empty value

    Returns:
        First non-empty value found, or default
    """
    for key in aliases:
        value = row.get(key)
        if not is_blank(value):
            return value
    return default
