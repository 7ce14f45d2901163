from __future__ import annotations

import logging

import pandas as pd

from census_mortality.seasons import season_labels

logger = logging.getLogger(__name__)


def _check_reduced(reduced: pd.DataFrame) -> None:
    required_cols = {"death_date", "death_age"}
    missing_cols = required_cols - set(reduced.columns)
    if missing_cols:
        raise ValueError(f"reduced is missing columns: {sorted(missing_cols)}")


def deaths_by_age(reduced: pd.DataFrame) -> pd.DataFrame:
    """
    Number of records per death age, sorted by age. Ages with no records
    do not appear.

    Output columns:
    death_age, deaths
    """
    _check_reduced(reduced)
    out = (
        reduced.groupby("death_age")
        .size()
        .rename("deaths")
        .reset_index()
        .sort_values("death_age")
        .reset_index(drop=True)
    )
    logger.debug("deaths_by_age: %d ages", len(out))
    return out


def date_series(reduced: pd.DataFrame) -> pd.DataFrame:
    """
    Per death_date (first of month) totals and mean age, with the season
    of the month attached.

    Output columns:
    death_date, total, avg_age, season
    """
    _check_reduced(reduced)
    out = (
        reduced.groupby("death_date")
        .agg(total=("death_age", "size"), avg_age=("death_age", "mean"))
        .reset_index()
        .sort_values("death_date")
        .reset_index(drop=True)
    )
    out["season"] = season_labels(out["death_date"])
    logger.debug("date_series: %d dates", len(out))
    return out
