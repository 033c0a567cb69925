"""
Performance ranking of planning stories by matched link count.
"""

from typing import Sequence

import structlog

from ..data.models import MatchResult, PlanningRecord
from .models import RankedStory

logger = structlog.get_logger(__name__)


def rank_by_links(
    planning: Sequence[PlanningRecord],
    results: Sequence[MatchResult],
    include_unmatched: bool = False,
) -> list[RankedStory]:
    """
    Rank planning stories by the link count of their matched metrics record.

    Args:
        planning: Planning records, in the order passed to match_all
        results: Output of match_all for the same planning records
        include_unmatched: Keep unmatched stories at the bottom with 0 links

    Returns:
        Ranked rows, most links first; ties ordered by title then planning id
    """
    if len(planning) != len(results):
        logger.warning(
            "Planning records and match results differ in length",
            planning_count=len(planning),
            result_count=len(results),
        )

    rows = []
    for story, result in zip(planning, results):
        if result.metrics_record is None and not include_unmatched:
            continue
        link_count = result.metrics_record.link_count if result.metrics_record else 0
        rows.append((story, result, link_count))

    rows.sort(key=lambda row: (-row[2], row[0].title.lower(), str(row[0].id)))

    return [
        RankedStory(
            rank=position,
            planning_id=story.id,
            title=story.title,
            brand=story.brand,
            pitch_date=story.pitch_date,
            link_count=link_count,
            strategy=result.strategy.value,
        )
        for position, (story, result, link_count) in enumerate(rows, start=1)
    ]
