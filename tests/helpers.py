"""Workbook builders shared by the test modules."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Sequence

from openpyxl import Workbook
from openpyxl.styles import PatternFill

NAME_FILL = PatternFill(fill_type="solid", fgColor="FFFF00")


def add_schedule_sheet(
    wb: Workbook,
    title: str,
    names: Sequence[Any],
    dates: Sequence[Any],
    values: Dict[str, Any] | None = None,
    anchor_row: int = 3,
    anchor_col: int = 10,
) -> None:
    """Lay out a month sheet: styled names below the anchor, dates to its right."""
    ws = wb.create_sheet(title)
    ws.cell(row=anchor_row, column=anchor_col, value="Name")
    for i, name in enumerate(names):
        cell = ws.cell(row=anchor_row + i + 1, column=anchor_col, value=name)
        cell.fill = NAME_FILL
    for j, date in enumerate(dates):
        ws.cell(row=anchor_row, column=anchor_col + j + 1, value=date)
    for address, value in (values or {}).items():
        ws[address] = value


def save_workbook(wb: Workbook, path: Path) -> Path:
    # Drop the default empty sheet so only month sheets remain
    if "Sheet" in wb.sheetnames and len(wb.sheetnames) > 1:
        del wb["Sheet"]
    wb.save(path)
    return path


def make_roster(path: Path) -> Path:
    """Sheet "3" with Alice and Bob at rows 4-5 and dates 1-3 at columns K-M."""
    wb = Workbook()
    add_schedule_sheet(
        wb,
        "3",
        names=["Alice", "Bob"],
        dates=[1, 2, 3],
        values={"K4": "D", "L4": "N", "M4": "off", "K5": "N", "L5": "D", "M5": 8},
    )
    return save_workbook(wb, path)
