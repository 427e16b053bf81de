#!/usr/bin/env python3
"""
OpenPyXL-based workbook reader for cross-platform environments without local Excel.
Provides the same API as XlwingsWorkbookReader using openpyxl.
Limitations:
- No live calculation engine; formula cells report the value cached at last save
- Only pattern and gradient fills are treated as a background colour
- Blank cells inside the used range are materialised in memory when read; the workbook is never saved
"""

from __future__ import annotations

import logging
from pathlib import Path
from datetime import datetime
from typing import List, Union

from openpyxl import load_workbook
from openpyxl.styles.fills import GradientFill
from openpyxl.worksheet.worksheet import Worksheet

from .grid import EMPTY_CELL, CellSnapshot

logger = logging.getLogger(__name__)


class OpenpyxlWorkbookReader:
	"""Read cell values and fill presence using openpyxl (cross-platform)."""

	def __init__(self, excel_file_path: Union[str, Path]):
		self.excel_file_path = Path(excel_file_path)
		self.workbook = None
		if not self.excel_file_path.exists():
			raise FileNotFoundError(f"Excel file not found: {excel_file_path}")

	def __enter__(self):
		self.open_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		self.close_workbook()

	def open_workbook(self) -> None:
		# data_only=True so formula cells yield their cached values
		self.workbook = load_workbook(filename=str(self.excel_file_path), data_only=True, read_only=False)
		logger.debug("Opened %s with openpyxl", self.excel_file_path.name)

	def close_workbook(self) -> None:
		if self.workbook is not None:
			self.workbook.close()
			self.workbook = None

	@property
	def sheet_names(self) -> List[str]:
		return list(self.workbook.sheetnames)

	@property
	def epoch(self) -> datetime:
		# 1900 or 1904 date system, used to turn date headers into serials
		return self.workbook.epoch

	def _sheet(self, sheet_name: str) -> Worksheet:
		return self.workbook[sheet_name]

	def cell(self, sheet_name: str, row: int, col: int) -> CellSnapshot:
		"""Snapshot the cell at a zero-based position; cells past the used range are empty."""
		ws = self._sheet(sheet_name)
		if row + 1 > ws.max_row or col + 1 > ws.max_column:
			return EMPTY_CELL
		cell = ws.cell(row=row + 1, column=col + 1)
		return CellSnapshot(cell.value, self._has_fill(cell))

	@staticmethod
	def _has_fill(cell) -> bool:
		fill = cell.fill
		if fill is None:
			return False
		if isinstance(fill, GradientFill):
			return True
		return getattr(fill, "fill_type", None) not in (None, "none")
