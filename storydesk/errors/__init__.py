"""
Error classification for the storydesk core.

Data quality errors describe spreadsheet input that cannot be normalized.
Core operations catch them at their boundary and degrade to a well-defined
"no information" value. Configuration errors are raised to the caller.
"""

from .data_quality import (
    DataQualityError,
    UnparseableInputError,
    UnparseableDateError,
    UnparseableTitleError,
    MalformedRowError,
)
from .configuration import ConfigurationError

__all__ = [
    # Data Quality Errors
    "DataQualityError",
    "UnparseableInputError",
    "UnparseableDateError",
    "UnparseableTitleError",
    "MalformedRowError",
    # Configuration
    "ConfigurationError",
]
