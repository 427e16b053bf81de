"""Tests for cell addressing and numeric coercion."""

from __future__ import annotations

from datetime import datetime

import pytest

from openpyxl.utils.datetime import MAC_EPOCH

from shift_extractor.grid import decode_cell, encode_cell, to_number


def test_decode_anchor() -> None:
    assert decode_cell("J3") == (2, 9)
    assert decode_cell("A1") == (0, 0)
    assert decode_cell("$AA$10") == (9, 26)
    assert decode_cell("j3") == (2, 9)


@pytest.mark.parametrize("address", ["", "3J", "J", "J0", "not a cell"])
def test_decode_rejects_malformed_address(address: str) -> None:
    with pytest.raises(ValueError):
        decode_cell(address)


def test_encode_cell() -> None:
    assert encode_cell(2, 9) == "J3"
    assert encode_cell(4, 12) == "M5"
    with pytest.raises(ValueError):
        encode_cell(-1, 0)


def test_to_number_numbers_and_strings() -> None:
    assert to_number(3) == 3
    assert to_number(3.0) == 3
    assert isinstance(to_number(3.0), int)
    assert to_number(2.5) == 2.5
    assert to_number(" 12 ") == 12
    assert to_number("1e2") == 100
    assert to_number("") == 0
    assert to_number(True) == 1


def test_to_number_rejects_non_numeric() -> None:
    assert to_number(None) is None
    assert to_number("Mon") is None
    assert to_number("nan") is None
    assert to_number(float("nan")) is None
    assert to_number("Total") is None


def test_datetime_becomes_excel_serial() -> None:
    assert to_number(datetime(2024, 3, 1)) == 45352


def test_to_number_literal_forms() -> None:
    assert to_number("0x10") == 16
    assert to_number("0o17") == 15
    assert to_number("0b101") == 5
    assert to_number(".5") == 0.5
    assert to_number("-3") == -3
    assert to_number("Infinity") == float("inf")


@pytest.mark.parametrize("text", ["inf", "1_0", "infinity", "-0x10", "1e", "12abc"])
def test_to_number_rejects_non_literals(text: str) -> None:
    assert to_number(text) is None


def test_datetime_serial_follows_epoch() -> None:
    assert to_number(datetime(2024, 3, 1), epoch=MAC_EPOCH) == 45352 - 1462
