#!/usr/bin/env python3
"""Records produced by the schedule extractor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from .grid import Number


@dataclass(frozen=True)
class Shift:
	"""One person's cell for one date."""

	date: Number
	value: Any = None

	def to_dict(self) -> Dict[str, Any]:
		return {"date": self.date, "value": self.value}


@dataclass(frozen=True)
class ShiftData:
	"""All shifts of one person within a month sheet."""

	name: Any
	shifts: Tuple[Shift, ...] = field(default_factory=tuple)

	def to_dict(self) -> Dict[str, Any]:
		return {"name": self.name, "shifts": [s.to_dict() for s in self.shifts]}


@dataclass(frozen=True)
class MonthData:
	"""A fully reshaped month sheet."""

	year: int
	month: Optional[Number]
	data: Tuple[ShiftData, ...] = field(default_factory=tuple)

	def to_dict(self) -> Dict[str, Any]:
		return {
			"year": self.year,
			"month": self.month,
			"data": [d.to_dict() for d in self.data],
		}


@dataclass(frozen=True)
class FilteredMonthData:
	"""A month reduced to the shifts of a single person."""

	year: int
	month: Optional[Number]
	shifts: Tuple[Shift, ...] = field(default_factory=tuple)

	def to_dict(self) -> Dict[str, Any]:
		return {
			"year": self.year,
			"month": self.month,
			"shifts": [s.to_dict() for s in self.shifts],
		}
