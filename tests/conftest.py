from __future__ import annotations

from pathlib import Path

import pytest

from .helpers import make_roster


@pytest.fixture
def roster_2024(tmp_path: Path) -> Path:
    return make_roster(tmp_path / "roster_2024.xlsx")
