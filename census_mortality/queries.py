from __future__ import annotations

import pandas as pd


def _check_columns(df: pd.DataFrame, required_cols: set[str]) -> None:
    missing_cols = required_cols - set(df.columns)
    if missing_cols:
        raise ValueError(f"df is missing columns: {sorted(missing_cols)}")


def _check_n(n: int) -> None:
    if n < 1:
        raise ValueError("n must be >= 1")


def oldest_records(df: pd.DataFrame, n: int | None = None) -> pd.DataFrame:
    """
    Records sorted by death_age, oldest first. Rows with equal ages keep
    their file order. If n is given only the first n rows are returned.
    """
    _check_columns(df, {"death_age"})
    out = df.sort_values("death_age", ascending=False, kind="stable")
    if n is not None:
        _check_n(n)
        out = out.head(n)
    return out


def avg_death_age_by_birth_year(
    df: pd.DataFrame,
    n: int = 2,
    highest: bool = True,
) -> pd.DataFrame:
    """
    Mean death age per birth year, restricted to the n birth years with the
    highest (or lowest) mean.

    Birth years tied with the n-th value are all kept, so the result can hold
    more than n rows.

    Output columns:
    byear, avg_death_age
    """
    _check_columns(df, {"byear", "death_age"})
    _check_n(n)

    means = df.groupby("byear")["death_age"].mean()
    if highest:
        top = means.nlargest(n, keep="all")
    else:
        top = means.nsmallest(n, keep="all")

    return top.rename("avg_death_age").rename_axis("byear").reset_index()


def deaths_by_death_month(df: pd.DataFrame, n: int = 4) -> pd.DataFrame:
    """
    Number of deaths per calendar month of death, restricted to the n
    months with the most deaths (ties at the boundary are all kept).

    Output columns:
    dmonth, deaths
    """
    _check_columns(df, {"dmonth"})
    _check_n(n)

    counts = df.groupby("dmonth").size()
    top = counts.nlargest(n, keep="all")
    return top.rename("deaths").rename_axis("dmonth").reset_index()
