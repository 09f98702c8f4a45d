from pathlib import Path

import pytest

PUZZLE_DIR = Path(__file__).resolve().parents[1] / "puzzles"


@pytest.fixture
def puzzle_path():
    def _path(name: str) -> Path:
        return PUZZLE_DIR / f"{name}.yaml"
    return _path
