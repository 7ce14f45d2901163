from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

import pandas as pd

logger = logging.getLogger(__name__)


def ensure_dirs_exist(paths: Iterable[Path]) -> None:
    """
    Create directories if they do not exist.
    Safe to run multiple times.
    """
    for p in paths:
        Path(p).mkdir(parents=True, exist_ok=True)


def save_table(df: pd.DataFrame, path: Path) -> Path:
    """
    Write an aggregate table to CSV without the index.
    Datetime columns are written as ISO dates (YYYY-MM-DD).
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False, date_format="%Y-%m-%d")
    logger.info("Wrote %d rows to %s", len(df), path)
    return path
