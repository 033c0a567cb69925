"""
CSV export of ranked story output.
"""

import csv
from pathlib import Path
from typing import Sequence, TextIO, Union

import structlog

from .models import RankedStory

logger = structlog.get_logger(__name__)

RANKING_COLUMNS = ("rank", "title", "brand", "pitch_date", "link_count", "strategy")


def ranking_rows(rows: Sequence[RankedStory]) -> list[list[str]]:
    """Ranked stories as CSV cell lists, header excluded."""
    return [
        [
            str(row.rank),
            row.title,
            row.brand,
            row.pitch_date.isoformat() if row.pitch_date else "",
            str(row.link_count),
            row.strategy,
        ]
        for row in rows
    ]


def export_ranking_csv(rows: Sequence[RankedStory], target: Union[str, Path, TextIO]) -> int:
    """
    Write ranked stories as CSV.

    Args:
        rows: Ranked stories, in rank order
        target: File path or open text stream

    Returns:
        Number of data rows written
    """
    if isinstance(target, (str, Path)):
        path = Path(target)
        with open(path, "w", newline="", encoding="utf-8") as f:
            count = _write_ranking(rows, f)
        logger.info("Exported ranking", path=str(path), rows=count)
        return count

    return _write_ranking(rows, target)


def _write_ranking(rows: Sequence[RankedStory], stream: TextIO) -> int:
    writer = csv.writer(stream)
    writer.writerow(RANKING_COLUMNS)
    data = ranking_rows(rows)
    writer.writerows(data)
    return len(data)
