"""Fixtures for building Allure results directories."""

import json
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

type WriteResult = Callable[..., Path]


@pytest.fixture
def results_dir(tmp_path: Path) -> Path:
    """Create an empty results directory."""
    path = tmp_path / "allure-results"
    path.mkdir()
    return path


@pytest.fixture
def write_result(results_dir: Path) -> WriteResult:
    """Return a helper writing a result record under the results directory."""

    def write(filename: str, **record: Any) -> Path:
        path = results_dir / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(record), encoding="utf-8")
        return path

    return write
