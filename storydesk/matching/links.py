"""
Link count extraction from metrics sheet rows.

The link count column has been renamed several times in the metrics sheet.
The accepted spellings are configuration (AliasParams.link_count), checked
in order.
"""

import math
import re
from typing import Any, Mapping, Optional, Sequence

import structlog

from ..config.defaults import AliasParams
from ..data.sheets import resolve_field
from ..errors import UnparseableInputError

logger = structlog.get_logger(__name__)

_LEADING_INT = re.compile(r"^[+-]?\d+")


def parse_link_count(value: Any) -> int:
    """
    Parse a link count cell into a non-negative integer.

    Strings are read up to the first non-digit after removing thousands
    separators ("1,204" -> 1204, "12 links" -> 12). Floats are truncated.

    Raises:
        UnparseableInputError: If no integer can be read from the value
    """
    if isinstance(value, bool):
        raise UnparseableInputError("Boolean is not a link count", raw_value=value)

    if isinstance(value, int):
        return max(value, 0)

    if isinstance(value, float):
        if not math.isfinite(value):
            raise UnparseableInputError("Non-finite link count", raw_value=value)
        return max(int(value), 0)

    if isinstance(value, str):
        match = _LEADING_INT.match(value.strip().replace(",", ""))
        if match:
            return max(int(match.group(0)), 0)

    raise UnparseableInputError(
        f"Cannot read a link count from {value!r}",
        raw_value=value,
        expected_format="integer",
    )


def extract_link_count(record: Mapping[str, Any], aliases: Optional[Sequence[str]] = None) -> int:
    """
    Extract the link count from a metrics row.

    Takes the first non-empty value across the alias keys and parses it as
    an integer. Absent or unparseable values count as 0.

    Args:
        record: Metrics row dictionary
        aliases: Accepted keys in priority order, defaults to AliasParams.link_count

    Returns:
        Link count, never negative
    """
    if aliases is None:
        aliases = AliasParams().link_count

    if not isinstance(record, Mapping):
        logger.warning("Link count requested from non-mapping record", record_type=type(record).__name__)
        return 0

    value = resolve_field(record, aliases)
    if value is None:
        return 0

    try:
        return parse_link_count(value)
    except UnparseableInputError as e:
        logger.debug("Treating unparseable link count as 0", raw_value=value, reason=str(e))
        return 0
