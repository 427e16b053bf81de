#!/usr/bin/env python3
"""
Cell addressing and value coercion shared by the workbook readers and the extractor.
Rows and columns are zero-based throughout; openpyxl's one-based helpers are wrapped here.
"""

from __future__ import annotations

import math
import re
from datetime import date, datetime, time
from typing import Any, NamedTuple, Optional, Tuple, Union

from openpyxl.utils.cell import column_index_from_string, coordinate_from_string, get_column_letter
from openpyxl.utils.datetime import WINDOWS_EPOCH, to_excel
from openpyxl.utils.exceptions import CellCoordinatesException

Number = Union[int, float]

# Decimal literals (Infinity included) and prefixed integer literals; no underscores
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")
_RADIX_LITERAL = re.compile(r"0(?:[xX](?P<hex>[0-9a-fA-F]+)|[oO](?P<oct>[0-7]+)|[bB](?P<bin>[01]+))")


class CellSnapshot(NamedTuple):
	"""Reader-independent view of a single cell."""

	value: Any
	has_fill: bool


EMPTY_CELL = CellSnapshot(None, False)


def decode_cell(address: str) -> Tuple[int, int]:
	"""
	Convert an A1-style address into a zero-based (row, column) pair

	Args:
		address (str): Cell reference such as "J3" or "$J$3"

	Returns:
		Tuple of (row, column)

	Raises:
		ValueError: if the address is not a valid cell reference
	"""
	try:
		letters, row = coordinate_from_string(address.replace("$", "").strip().upper())
	except (CellCoordinatesException, ValueError, AttributeError):
		raise ValueError(f"Invalid cell address: {address!r}")
	return row - 1, column_index_from_string(letters) - 1


def encode_cell(row: int, col: int) -> str:
	"""Convert a zero-based (row, column) pair into an A1-style address"""
	if row < 0 or col < 0:
		raise ValueError(f"Cell position must be non-negative: ({row}, {col})")
	return f"{get_column_letter(col + 1)}{row + 1}"


def _parse_number_literal(text: str) -> Optional[float]:
	match = _RADIX_LITERAL.fullmatch(text)
	if match:
		if match.group("hex"):
			return float(int(match.group("hex"), 16))
		if match.group("oct"):
			return float(int(match.group("oct"), 8))
		return float(int(match.group("bin"), 2))
	if _DECIMAL_LITERAL.fullmatch(text):
		return float(text)
	return None


def to_number(value: Any, epoch: datetime = WINDOWS_EPOCH) -> Optional[Number]:
	"""
	Coerce a cell value to a number, or None when it is not numeric.

	Strings are trimmed; a blank string counts as 0. Decimal literals,
	"Infinity" and 0x/0o/0b integers are accepted. Dates and datetimes
	become Excel serial numbers relative to the workbook's epoch. Missing values
	and NaN are never numeric.
	"""
	if value is None:
		return None
	if isinstance(value, bool):
		return int(value)
	if isinstance(value, (datetime, date, time)):
		number: Optional[float] = float(to_excel(value, epoch=epoch))
	elif isinstance(value, (int, float)):
		number = float(value)
	elif isinstance(value, str):
		text = value.strip()
		if not text:
			return 0
		number = _parse_number_literal(text)
		if number is None:
			return None
	else:
		return None

	if math.isnan(number):
		return None
	if math.isfinite(number) and number.is_integer():
		return int(number)
	return number
