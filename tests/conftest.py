from pathlib import Path

import pytest


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def write_ini(tmp_path: Path):
    path = tmp_path / "app.ini"

    def _write(text: str) -> Path:
        path.write_text(text, encoding="utf-8")
        return path

    return _write
