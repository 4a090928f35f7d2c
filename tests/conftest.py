"""Pytest configuration and shared fixtures for takeoff tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "configs"


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "integration: tests that exercise the CLI or web surface end to end"
    )
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the JSON takeoff files."""
    return FIXTURES_DIR


@pytest.fixture
def deck_form() -> dict[str, Any]:
    """A 4.8m × 3.6m rectangular deck with default members, Pro tier."""
    return {"shape": "rectangle", "width": 4800, "length": 3600}


@pytest.fixture
def paving_form() -> dict[str, Any]:
    """A 4m × 2.5m patio of 600×600 slabs, Pro tier."""
    return {"shape": "rectangle", "width": 4000, "length": 2500}


@pytest.fixture
def wall_form() -> dict[str, Any]:
    """A 3m long, 600mm high solid block wall laid flat, Pro tier."""
    return {"wallType": "solid-flat", "wallLength": 3000, "wallHeight": 600}


@pytest.fixture
def write_takeoff(tmp_path: Path):
    """Write a takeoff file and return its path."""

    def _write(calculator: str, config: dict[str, Any], name: str = "takeoff.json") -> Path:
        path = tmp_path / name
        path.write_text(
            json.dumps({"schema_version": "1.0", "calculator": calculator, "config": config}),
            encoding="utf-8",
        )
        return path

    return _write
