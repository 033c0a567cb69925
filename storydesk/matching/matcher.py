"""
Cross-sheet story record matching.

The planning sheet and the metrics sheet share no stable key, so each
planning record is associated with a metrics record by a priority-ordered
strategy chain:

    exact normalized title -> fuzzy title -> exact pitch date -> none

The first strategy that hits wins. Matches are not exclusive: several
planning records may resolve to the same metrics record.
"""

from collections import Counter
from datetime import date
from typing import Optional, Sequence

from ..config.defaults import MatcherParams
from ..data.models import MatchResult, MatchStrategy, MetricsRecord, PlanningRecord
from ..logging.config import get_matcher_logger, log_match_decision
from ..utils.time import parse_date
from .titles import normalize_title, titles_fuzzy_match

matcher_logger = get_matcher_logger(__name__)


class RecordMatcher:
    """
    Associates planning records with metrics records.

    Indexes are rebuilt on every match_all call; the inputs are small and
    are expected to change between calls.
    """

    def __init__(self, params: Optional[MatcherParams] = None) -> None:
        """
        Initialize the matcher.

        Args:
            params: Fuzzy matching thresholds, defaults to MatcherParams()
        """
        self.params = params or MatcherParams()
        self.logger = matcher_logger

    def match_all(
        self,
        planning: Sequence[PlanningRecord],
        metrics: Sequence[MetricsRecord],
    ) -> list[MatchResult]:
        """
        Match every planning record against the metrics records.

        Args:
            planning: Planning records
            metrics: Metrics records, in sheet order

        Returns:
            One MatchResult per planning record, in input order
        """
        normalized_metrics = [normalize_title(m.title) for m in metrics]
        title_index = self._build_title_index(metrics, normalized_metrics)
        date_index = self._build_date_index(metrics)

        results = [
            self._match_one(record, metrics, normalized_metrics, title_index, date_index)
            for record in planning
        ]

        counts = Counter(result.strategy.value for result in results)
        self.logger.info(
            "Matched planning records",
            planning_count=len(planning),
            metrics_count=len(metrics),
            **{strategy.value.replace("-", "_"): counts.get(strategy.value, 0) for strategy in MatchStrategy},
        )
        return results

    def _match_one(
        self,
        record: PlanningRecord,
        metrics: Sequence[MetricsRecord],
        normalized_metrics: list[str],
        title_index: dict[str, MetricsRecord],
        date_index: dict[date, MetricsRecord],
    ) -> MatchResult:
        title = normalize_title(record.title)

        if title:
            exact = title_index.get(title)
            if exact is not None:
                return self._result(record, exact, MatchStrategy.EXACT_TITLE)

            for candidate, candidate_title in zip(metrics, normalized_metrics):
                if titles_fuzzy_match(title, candidate_title, self.params):
                    return self._result(record, candidate, MatchStrategy.FUZZY_TITLE)

        pitch_date = parse_date(record.pitch_date)
        if pitch_date is not None:
            dated = date_index.get(pitch_date)
            if dated is not None:
                return self._result(record, dated, MatchStrategy.DATE_FALLBACK)

        log_match_decision(self.logger, record.id, MatchStrategy.NONE.value, record.title)
        return MatchResult.unmatched(record.id)

    def _result(self, record: PlanningRecord, metrics_record: MetricsRecord,
                strategy: MatchStrategy) -> MatchResult:
        log_match_decision(
            self.logger, record.id, strategy.value, record.title, metrics_record.title
        )
        return MatchResult(
            planning_id=record.id,
            metrics_record=metrics_record,
            strategy=strategy,
        )

    @staticmethod
    def _build_title_index(metrics: Sequence[MetricsRecord],
                           normalized_metrics: list[str]) -> dict[str, MetricsRecord]:
        # First occurrence wins for duplicate titles; empty titles are not indexed
        index: dict[str, MetricsRecord] = {}
        for record, title in zip(metrics, normalized_metrics):
            if title and title not in index:
                index[title] = record
        return index

    @staticmethod
    def _build_date_index(metrics: Sequence[MetricsRecord]) -> dict[date, MetricsRecord]:
        # First occurrence wins for shared pitch dates
        index: dict[date, MetricsRecord] = {}
        for record in metrics:
            pitch_date = parse_date(record.pitch_date)
            if pitch_date is not None and pitch_date not in index:
                index[pitch_date] = record
        return index


def match_all(
    planning: Sequence[PlanningRecord],
    metrics: Sequence[MetricsRecord],
    params: Optional[MatcherParams] = None,
) -> list[MatchResult]:
    """Match planning records to metrics records with a one-off RecordMatcher."""
    return RecordMatcher(params).match_all(planning, metrics)
