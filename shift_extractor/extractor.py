#!/usr/bin/env python3
"""
Shift schedule extraction
Locates the schedule block of each month sheet from an anchor cell and reshapes
it into per-person, per-date records
"""

import logging
import platform
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, List, Optional, Sequence, Union

from .grid import decode_cell, to_number
from .models import FilteredMonthData, MonthData, Shift, ShiftData
from .openpyxl_reader import OpenpyxlWorkbookReader

logger = logging.getLogger(__name__)

DEFAULT_ANCHOR = "J3"
ALL_USERS = "all"
ENGINES = ("openpyxl", "xlwings")

_YEAR_PATTERN = re.compile(r"(\d{4})")


class MissingYearError(ValueError):
	"""Raised when an input filename carries no 4-digit year."""


@dataclass
class ExtractionOptions:
	"""Options controlling schedule extraction."""

	anchor: str = DEFAULT_ANCHOR
	engine: Optional[str] = None


def default_engine() -> str:
	# xlwings needs a local Excel, which in practice means Windows
	return 'xlwings' if platform.system().lower().startswith('win') else 'openpyxl'


def open_reader(path: Union[str, Path], engine: Optional[str] = None):
	"""Construct the workbook reader for the requested engine (not yet opened)."""
	engine = engine or default_engine()
	if engine == 'openpyxl':
		return OpenpyxlWorkbookReader(path)
	if engine == 'xlwings':
		from .xlwings_reader import XlwingsWorkbookReader
		return XlwingsWorkbookReader(path)
	raise ValueError(f"Unknown engine: {engine!r} (expected one of {', '.join(ENGINES)})")


def year_from_filename(filename: Union[str, Path]) -> int:
	"""
	Derive the schedule year from the first 4-digit run in a file's basename

	Raises:
		MissingYearError: if the basename has no 4-digit run
	"""
	match = _YEAR_PATTERN.search(Path(filename).name)
	if not match:
		raise MissingYearError(f"Filename must contain a year: {filename}")
	return int(match.group(1))


class ScheduleExtractor:
	"""Reshape month sheets into ShiftData records starting from an anchor cell"""

	def __init__(self, options: Optional[ExtractionOptions] = None):
		self.options = options or ExtractionOptions()
		self.anchor_row, self.anchor_col = decode_cell(self.options.anchor)

	def scan_names(self, reader, sheet_name: str) -> List[Any]:
		"""Collect names down the anchor column while the cells carry a background fill."""
		names: List[Any] = []
		row = self.anchor_row + 1
		while True:
			cell = reader.cell(sheet_name, row, self.anchor_col)
			if not cell.has_fill:
				break
			names.append(cell.value)
			row += 1
		return names

	def scan_dates(self, reader, sheet_name: str) -> list:
		"""Collect dates along the anchor row while the cells are numeric."""
		dates = []
		epoch = reader.epoch
		col = self.anchor_col + 1
		while True:
			number = to_number(reader.cell(sheet_name, self.anchor_row, col).value, epoch=epoch)
			if number is None:
				break
			dates.append(number)
			col += 1
		return dates

	def extract_sheet(self, reader, sheet_name: str) -> List[ShiftData]:
		"""
		Build the per-person shift table for one sheet

		Args:
			reader: An opened workbook reader
			sheet_name (str): Sheet to scan

		Returns:
			One ShiftData per styled name row, each holding one Shift per date column
		"""
		names = self.scan_names(reader, sheet_name)
		dates = self.scan_dates(reader, sheet_name)
		logger.debug("Sheet %r: %d names, %d dates", sheet_name, len(names), len(dates))

		data: List[ShiftData] = []
		for i, name in enumerate(names):
			row = self.anchor_row + i + 1
			shifts = tuple(
				Shift(date=date, value=reader.cell(sheet_name, row, self.anchor_col + j + 1).value)
				for j, date in enumerate(dates)
			)
			data.append(ShiftData(name=name, shifts=shifts))
		return data

	def extract_workbook(self, reader, year: int) -> List[MonthData]:
		"""Extract every sheet of an opened workbook, in sheet order."""
		months: List[MonthData] = []
		for sheet_name in reader.sheet_names:
			month = to_number(sheet_name)
			if month is None:
				logger.warning("Sheet name %r is not a month number", sheet_name)
			months.append(MonthData(year=year, month=month, data=tuple(self.extract_sheet(reader, sheet_name))))
		return months

	def extract_file(self, path: Union[str, Path], year: Optional[int] = None) -> List[MonthData]:
		"""Open a workbook file and extract all of its month sheets."""
		if year is None:
			year = year_from_filename(path)
		with open_reader(path, self.options.engine) as reader:
			months = self.extract_workbook(reader, year)
		logger.info("Extracted %d month(s) from %s", len(months), Path(path).name)
		return months

	def extract_files(
		self, paths: Iterable[Union[str, Path]], years: Optional[Sequence[int]] = None
	) -> List[MonthData]:
		"""
		Extract several files, concatenating in input order

		Years default to those named by each path, all derived before any file is opened.
		"""
		paths = list(paths)
		if years is None:
			years = [year_from_filename(path) for path in paths]
		if len(years) != len(paths):
			raise ValueError(f"Expected {len(paths)} years, got {len(years)}")
		combined: List[MonthData] = []
		for path, year in zip(paths, years):
			combined.extend(self.extract_file(path, year))
		return combined


def filter_month(month: MonthData, name: str) -> FilteredMonthData:
	"""Reduce a month to one person's shifts; an unknown name yields no shifts."""
	match = next((entry for entry in month.data if entry.name == name), None)
	shifts = match.shifts if match is not None else ()
	return FilteredMonthData(year=month.year, month=month.month, shifts=shifts)


def filter_months(months: Sequence[MonthData], filter_user: str) -> list:
	"""Apply the user filter; "all" leaves the months untouched."""
	if filter_user == ALL_USERS:
		return list(months)
	return [filter_month(month, filter_user) for month in months]
