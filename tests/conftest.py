from __future__ import annotations

from typing import Dict

import pytest

from mis_dashboard.data.schema import CONTEST_COLUMNS, ContestRecord

CONTEST_WIDTH = 19


def contest_fields(**values: str) -> list[str]:
    cells = [""] * CONTEST_WIDTH
    for name, value in values.items():
        cells[CONTEST_COLUMNS[name]] = value
    return cells


def contest_line(**values: str) -> str:
    return ",".join(f'"{v}"' if "," in v else v for v in contest_fields(**values))


@pytest.fixture
def contest_header() -> str:
    return ",".join(f"Col{i}" for i in range(CONTEST_WIDTH))


@pytest.fixture
def make_contest():
    def _make(**values: str) -> ContestRecord:
        return ContestRecord.from_fields(contest_fields(**values))

    return _make


class FakeResponse:
    def __init__(self, text: str = "", status_code: int = 200) -> None:
        self.text = text
        self.status_code = status_code

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 400


@pytest.fixture
def fake_get(monkeypatch):
    """Route requests.get to canned responses keyed by URL."""
    responses: Dict[str, object] = {}
    calls: list = []

    def _get(url, timeout=None, **kwargs):
        calls.append((url, timeout))
        outcome = responses[url]
        if isinstance(outcome, Exception):
            raise outcome
        return outcome

    monkeypatch.setattr("mis_dashboard.data.loader.requests.get", _get)
    _get.responses = responses
    _get.calls = calls
    return _get
