from .errors import (
    ConfigurationError,
    DirsizeError,
    TraversalError,
)
from .models import Entry, EntryType, SortOrder

__all__ = [
    "ConfigurationError",
    "DirsizeError",
    "Entry",
    "EntryType",
    "SortOrder",
    "TraversalError",
]
