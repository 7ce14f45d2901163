from __future__ import annotations

import logging

import pandas as pd

logger = logging.getLogger(__name__)


def derive_death_date(df: pd.DataFrame) -> pd.Series:
    """
    Death date from the separate dyear/dmonth columns.

    The source carries no day of month, so the day is fixed at 1. Any
    statistic keyed on this date is a monthly statistic labelled by the
    first day of the month.
    """
    required_cols = {"dyear", "dmonth"}
    missing_cols = required_cols - set(df.columns)
    if missing_cols:
        raise ValueError(f"df is missing columns: {sorted(missing_cols)}")

    bad_month = ~df["dmonth"].between(1, 12)
    if bad_month.any():
        bad = sorted(df.loc[bad_month, "dmonth"].unique().tolist())
        raise ValueError(f"dmonth must be in 1..12, found {bad}")

    parts = pd.DataFrame(
        {"year": df["dyear"], "month": df["dmonth"], "day": 1},
        index=df.index,
    )
    return pd.to_datetime(parts).rename("death_date")


def reduce_records(df: pd.DataFrame) -> pd.DataFrame:
    """
    Project cleaned records down to death_date and death_age.
    """
    if "death_age" not in df.columns:
        raise ValueError("df is missing column 'death_age'")

    return pd.DataFrame(
        {
            "death_date": derive_death_date(df),
            "death_age": df["death_age"].to_numpy(),
        },
        index=df.index,
    ).reset_index(drop=True)


def sample_records(
    df: pd.DataFrame,
    n: int = 10_000,
    seed: int | None = None,
) -> pd.DataFrame:
    """
    Uniform sample of n rows without replacement.

    Unseeded calls give a different sample each run; pass seed to make
    the sample reproducible. Tables with fewer than n rows are returned
    whole, in sampled order.
    """
    if n < 1:
        raise ValueError("n must be >= 1")

    k = min(n, len(df))
    if k < n:
        logger.warning("Requested %d rows but table has %d; using all rows", n, len(df))
    return df.sample(n=k, replace=False, random_state=seed)
