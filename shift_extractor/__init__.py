from .extractor import ExtractionOptions, ScheduleExtractor, filter_month, filter_months, year_from_filename
from .models import FilteredMonthData, MonthData, Shift, ShiftData
from .openpyxl_reader import OpenpyxlWorkbookReader

__all__ = [
	"ExtractionOptions",
	"FilteredMonthData",
	"MonthData",
	"OpenpyxlWorkbookReader",
	"ScheduleExtractor",
	"Shift",
	"ShiftData",
	"filter_month",
	"filter_months",
	"year_from_filename",
]

__version__ = "0.1.0"
