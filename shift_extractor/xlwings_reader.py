#!/usr/bin/env python3
"""
Workbook reader using xlwings
Reads cell values and interior colours through a local Excel installation
Date headers are converted with the 1900 date system; 1904-system books are not detected
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Tuple, Union

import xlwings as xw
from openpyxl.utils.datetime import WINDOWS_EPOCH

from .grid import EMPTY_CELL, CellSnapshot, encode_cell

logger = logging.getLogger(__name__)


class XlwingsWorkbookReader:
	"""Read cell values and fill presence from Excel files using xlwings"""
	
	def __init__(self, excel_file_path: Union[str, Path]):
		"""
		Initialize the reader with an Excel file path
		
		Args:
			excel_file_path (str): Path to the Excel file
		"""
		self.excel_file_path = Path(excel_file_path)
		self.app = None
		self.workbook = None
		self._extents: Dict[str, Tuple[int, int]] = {}
		
		if not self.excel_file_path.exists():
			raise FileNotFoundError(f"Excel file not found: {excel_file_path}")
	
	def __enter__(self):
		"""Context manager entry"""
		self.open_workbook()
		return self
	
	def __exit__(self, exc_type, exc_val, exc_tb):
		"""Context manager exit"""
		self.close_workbook()
	
	def open_workbook(self):
		"""Open the Excel workbook in a hidden Excel instance"""
		self.app = xw.App(visible=False)
		try:
			self.workbook = self.app.books.open(str(self.excel_file_path))
		except Exception:
			logger.error("Error opening workbook %s", self.excel_file_path)
			self.app.quit()
			self.app = None
			raise
		logger.debug("Opened %s with xlwings", self.excel_file_path.name)
	
	def close_workbook(self):
		"""Close the workbook and Excel application"""
		try:
			if self.workbook:
				self.workbook.close()
		finally:
			if self.app:
				self.app.quit()
			self.workbook = None
			self.app = None
			self._extents.clear()
	
	@property
	def sheet_names(self) -> List[str]:
		return [sheet.name for sheet in self.workbook.sheets]
	
	@property
	def epoch(self) -> datetime:
		return WINDOWS_EPOCH
	
	def _extent(self, sheet_name: str) -> Tuple[int, int]:
		"""Last used (row, column) of a sheet, one-based"""
		if sheet_name not in self._extents:
			last_cell = self.workbook.sheets[sheet_name].used_range.last_cell
			self._extents[sheet_name] = (last_cell.row, last_cell.column)
		return self._extents[sheet_name]
	
	def cell(self, sheet_name: str, row: int, col: int) -> CellSnapshot:
		"""
		Snapshot a single cell
		
		Args:
			sheet_name (str): Worksheet name
			row (int): Zero-based row index
			col (int): Zero-based column index
			
		Returns:
			CellSnapshot with the cell value and whether it has an interior colour;
			cells past the used range are empty
		"""
		max_row, max_col = self._extent(sheet_name)
		if row + 1 > max_row or col + 1 > max_col:
			return EMPTY_CELL
		rng = self.workbook.sheets[sheet_name].range(encode_cell(row, col))
		# Range.color is None when the interior has no fill
		return CellSnapshot(rng.value, rng.color is not None)
