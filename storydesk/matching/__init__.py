"""
Cross-sheet record matching.

Reconciles planning sheet stories with metrics sheet stories by title,
fuzzy title and pitch date, and extracts link counts from metrics rows.
"""
from .links import extract_link_count
from .matcher import RecordMatcher, match_all
from .titles import normalize_title

__all__ = ["RecordMatcher", "match_all", "extract_link_count", "normalize_title"]
