from .sizer_service import DirectorySizer, SizeResult
from .listing_service import ListingService
from .sort_service import sort_entries
from .report_service import ReportService


__all__ = [
    'DirectorySizer',
    'SizeResult',
    'ListingService',
    'sort_entries',
    'ReportService',
]
