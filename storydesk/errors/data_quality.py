"""
Data quality error classifications for spreadsheet story data.

These exceptions categorize the ways a sheet cell or row can fail to
normalize. None of them escape the matching or calendar operations.
"""

from typing import Optional, Dict, Any


class DataQualityError(Exception):
    """Base class for data quality issues that can be handled gracefully."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class UnparseableInputError(DataQualityError):
    """A cell value could not be normalized into its canonical form."""

    def __init__(self, message: str, raw_value: Optional[Any] = None,
                 expected_format: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.raw_value = raw_value
        self.expected_format = expected_format


class UnparseableDateError(UnparseableInputError):
    """Date cell is not in YYYY-MM-DD or M/D/YYYY form, or is out of range."""

    def __init__(self, message: str, raw_value: Optional[Any] = None, **kwargs):
        kwargs.setdefault("expected_format", "YYYY-MM-DD or M/D/YYYY")
        super().__init__(message, raw_value=raw_value, **kwargs)


class UnparseableTitleError(UnparseableInputError):
    """Title cell normalizes to an empty string."""
    pass


class MalformedRowError(DataQualityError):
    """Sheet row has the wrong shape to be turned into a record."""

    def __init__(self, message: str, row_index: Optional[int] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.row_index = row_index
