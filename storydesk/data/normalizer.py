"""
Record normalization for converting sheet rows to typed story records.

Rows come out of parse_sheet_values as string-keyed dictionaries whose keys
depend on how someone named the sheet columns. The normalizer resolves each
semantic field through the alias table in AliasParams and produces frozen
PlanningRecord / MetricsRecord values. Bad cells degrade (no date, empty
title, zero links); they never abort a batch.
"""

from typing import Any, Mapping, Optional, Sequence

import structlog

from ..config.defaults import AliasParams, ReportParams
from ..errors import MalformedRowError, UnparseableTitleError
from ..matching.links import extract_link_count
from ..matching.titles import require_title
from ..utils.time import parse_date
from .models import MetricsRecord, PlanningRecord, RecordNormalizationResult
from .sheets import resolve_field

logger = structlog.get_logger(__name__)


class RecordNormalizer:
    """
    Sheet row normalization pipeline.

    Resolves aliased columns, parses date cells and link counts, and builds
    immutable records for the matcher and the reports.
    """

    def __init__(
        self,
        aliases: Optional[AliasParams] = None,
        reports: Optional[ReportParams] = None,
    ):
        """
        Initialize record normalizer with configuration.

        Args:
            aliases: Column alias table
            reports: Report parameters (deadline field names)
        """
        self.aliases = aliases or AliasParams()
        self.reports = reports or ReportParams()
        self.logger = logger

    def normalize_planning_rows(self, rows: Sequence[Mapping[str, Any]]) -> RecordNormalizationResult:
        """
        Normalize planning sheet rows into PlanningRecord values.

        Args:
            rows: Row dictionaries

        Returns:
            RecordNormalizationResult with the records and skip count
        """
        return self._normalize_rows(rows, self.planning_record, "planning")

    def normalize_metrics_rows(self, rows: Sequence[Mapping[str, Any]]) -> RecordNormalizationResult:
        """
        Normalize metrics sheet rows into MetricsRecord values.

        Args:
            rows: Row dictionaries

        Returns:
            RecordNormalizationResult with the records and skip count
        """
        return self._normalize_rows(rows, self.metrics_record, "metrics")

    def planning_record(self, row: Mapping[str, Any]) -> PlanningRecord:
        """Build a PlanningRecord from one row."""
        self._require_mapping(row)

        deadlines = {}
        for field_name, _label in self.reports.deadline_types:
            deadline = parse_date(row.get(field_name))
            if deadline is not None:
                deadlines[field_name] = deadline

        # Only contributes when production_field is not one of the deadline_types
        production_field = self.reports.production_field
        if production_field not in deadlines:
            production_date = parse_date(row.get(production_field))
            if production_date is not None:
                deadlines[production_field] = production_date

        return PlanningRecord(
            id=resolve_field(row, self.aliases.record_id),
            title=self._title(row, "planning"),
            brand=self._text(row, self.aliases.brand),
            pitch_date=parse_date(resolve_field(row, self.aliases.pitch_date)),
            status=self._text(row, self.aliases.status),
            study_url=self._text(row, self.aliases.study_url),
            deadlines=deadlines,
        )

    def metrics_record(self, row: Mapping[str, Any]) -> MetricsRecord:
        """Build a MetricsRecord from one row."""
        self._require_mapping(row)

        return MetricsRecord(
            title=self._title(row, "metrics"),
            brand=self._text(row, self.aliases.brand),
            pitch_date=parse_date(resolve_field(row, self.aliases.pitch_date)),
            link_count=extract_link_count(row, self.aliases.link_count),
            study_url=self._text(row, self.aliases.study_url),
        )

    def _normalize_rows(self, rows, build, source: str) -> RecordNormalizationResult:
        records = []
        warnings = []

        for index, row in enumerate(rows or ()):
            try:
                records.append(build(row))
            except MalformedRowError as e:
                warnings.append(f"row {index}: {e}")
                self.logger.warning("Skipping malformed row", source=source, row_index=index, reason=str(e))

        if warnings:
            self.logger.info(
                "Normalized sheet rows with skips",
                source=source,
                records=len(records),
                skipped=len(warnings),
            )

        return RecordNormalizationResult(
            records=tuple(records),
            skipped=len(warnings),
            warnings=tuple(warnings),
        )

    def _title(self, row: Mapping[str, Any], source: str) -> str:
        title = self._text(row, self.aliases.title)
        try:
            require_title(title)
        except UnparseableTitleError as e:
            # Kept as-is; the matcher falls back to the pitch date
            self.logger.warning(
                "Title cannot be matched",
                source=source,
                record_id=row.get("id"),
                raw_value=e.raw_value,
            )
        return title

    @staticmethod
    def _require_mapping(row: Any) -> None:
        if not isinstance(row, Mapping):
            raise MalformedRowError(f"Row must be a mapping, got {type(row).__name__}")

    @staticmethod
    def _text(row: Mapping[str, Any], aliases: Sequence[str]) -> str:
        value = resolve_field(row, aliases, default="")
        return str(value).strip()
