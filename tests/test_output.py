"""Tests for JSON serialization of extraction results."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path

from shift_extractor.models import MonthData, Shift, ShiftData
from shift_extractor.output import write_json


def test_write_json_creates_parents_and_indents(tmp_path: Path) -> None:
    month = MonthData(
        year=2024,
        month=1,
        data=(ShiftData("Zoë", (Shift(1, "D"), Shift(2, None))),),
    )
    target = tmp_path / "nested" / "dir" / "out.json"

    written = write_json([month], target)

    assert written == target
    text = target.read_text(encoding="utf-8")
    assert "Zoë" in text
    assert '\n  {\n    "year": 2024,' in text
    assert json.loads(text) == [
        {
            "year": 2024,
            "month": 1,
            "data": [
                {
                    "name": "Zoë",
                    "shifts": [
                        {"date": 1, "value": "D"},
                        {"date": 2, "value": None},
                    ],
                }
            ],
        }
    ]


def test_non_json_values_are_stringified(tmp_path: Path) -> None:
    month = MonthData(
        year=2024,
        month=1,
        data=(ShiftData("Alice", (Shift(1, datetime(2024, 1, 1, 7, 30)),)),),
    )
    target = write_json([month], tmp_path / "out.json")

    loaded = json.loads(target.read_text(encoding="utf-8"))
    assert loaded[0]["data"][0]["shifts"][0]["value"] == "2024-01-01 07:30:00"


def test_non_finite_numbers_written_as_null(tmp_path: Path) -> None:
    month = MonthData(
        year=2024,
        month=float("inf"),
        data=(ShiftData("Alice", (Shift(float("-inf"), float("nan")),)),),
    )
    target = write_json([month], tmp_path / "out.json")

    text = target.read_text(encoding="utf-8")
    assert "Infinity" not in text
    assert json.loads(text) == [
        {
            "year": 2024,
            "month": None,
            "data": [{"name": "Alice", "shifts": [{"date": None, "value": None}]}],
        }
    ]
