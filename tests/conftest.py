"""Shared pytest fixtures."""

from __future__ import annotations

import csv
from pathlib import Path
from typing import Dict, List

import pytest
from loguru import logger

from uiux_kit.config import Category
from uiux_kit.knowledge_base import create_knowledge_base
from tests.corpus import CORPUS


def write_category(data_dir: Path, category: Category, rows: List[Dict[str, str]]) -> Path:
    """Write ``rows`` as ``<category>.csv`` (header from the first row)."""
    path = data_dir / f"{category.value}.csv"
    with path.open("w", encoding="utf-8", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=list(rows[0].keys()))
        writer.writeheader()
        writer.writerows(rows)
    return path


@pytest.fixture
def make_data_dir(tmp_path):
    """Factory: write the given datasets (default: full corpus) to a fresh dir."""
    counter = {"n": 0}

    def _make(datasets: Dict[Category, List[Dict[str, str]]] | None = None) -> Path:
        counter["n"] += 1
        data_dir = tmp_path / f"data{counter['n']}"
        data_dir.mkdir()
        for category, rows in (CORPUS if datasets is None else datasets).items():
            write_category(data_dir, category, rows)
        return data_dir

    return _make


@pytest.fixture
def data_dir(make_data_dir) -> Path:
    return make_data_dir()


@pytest.fixture
def kb(data_dir):
    return create_knowledge_base(data_dir)


@pytest.fixture
def log_messages():
    """Capture loguru output as ``(level, message)`` tuples."""
    messages = []
    handler_id = logger.add(
        lambda msg: messages.append((msg.record["level"].name, msg.record["message"])),
        level="DEBUG",
    )
    yield messages
    logger.remove(handler_id)
