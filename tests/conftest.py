import json
from pathlib import Path
from typing import Any

import pytest

DATA_DIR = Path(__file__).parent / "data"


def _load(name: str) -> dict[str, Any]:
    return json.loads((DATA_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture
def homestatus() -> dict[str, Any]:
    """Saved homestatus response with three rooms and three modules."""
    return _load("homestatus.json")


@pytest.fixture
def homesdata() -> dict[str, Any]:
    """Saved homesdata response with two homes; the first has three rooms."""
    return _load("homesdata.json")
