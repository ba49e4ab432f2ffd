import json
from pathlib import Path

import pytest

from agepension.rates import get_schedule

SAMPLE_INPUT = Path(__file__).resolve().parent.parent / "sample_input.json"


@pytest.fixture
def sample_input_dict() -> dict:
    return json.loads(SAMPLE_INPUT.read_text(encoding="utf-8"))


@pytest.fixture
def schedule():
    return get_schedule("2025-09-20")
