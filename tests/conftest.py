from __future__ import annotations

import logging
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def sheet_path() -> Path:
    return DATA_DIR / "hurricanes.csv"


@pytest.fixture
def sheet_text(sheet_path: Path) -> str:
    return sheet_path.read_text(encoding="utf-8")


@pytest.fixture
def clean_hurricane_logger():
    yield
    logger = logging.getLogger("hurricane")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
