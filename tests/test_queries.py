import pandas as pd
import pytest

from census_mortality.queries import (
    avg_death_age_by_birth_year,
    deaths_by_death_month,
    oldest_records,
)


def _records(byear, death_age, dmonth=None) -> pd.DataFrame:
    n = len(byear)
    return pd.DataFrame(
        {
            "HISTID": [f"R{i}" for i in range(n)],
            "byear": byear,
            "bmonth": [1] * n,
            "dyear": [1990] * n,
            "dmonth": dmonth if dmonth is not None else [1] * n,
            "death_age": death_age,
            "weight": [1.0] * n,
        }
    )


def test_oldest_records_sorted_descending() -> None:
    df = _records([1900, 1901, 1902, 1903], [80, 95, 70, 95])
    out = oldest_records(df)

    assert out["death_age"].tolist() == [95, 95, 80, 70]
    # stable among equal ages
    assert out["HISTID"].tolist()[:2] == ["R1", "R3"]


def test_oldest_records_limit() -> None:
    df = _records([1900, 1901, 1902], [80, 95, 70])
    out = oldest_records(df, n=1)
    assert out["HISTID"].tolist() == ["R1"]


def test_avg_by_birth_year_highest_and_lowest() -> None:
    df = _records(
        [1900, 1900, 1901, 1902, 1903],
        [80, 90, 70, 95, 60],
    )
    high = avg_death_age_by_birth_year(df, n=2)
    low = avg_death_age_by_birth_year(df, n=2, highest=False)

    assert list(high.columns) == ["byear", "avg_death_age"]
    assert high["byear"].tolist() == [1902, 1900]
    assert high["avg_death_age"].tolist() == [95.0, 85.0]
    assert low["byear"].tolist() == [1903, 1901]


def test_avg_by_birth_year_keeps_boundary_ties() -> None:
    df = _records([1900, 1901, 1902, 1903], [90, 85, 85, 60])
    high = avg_death_age_by_birth_year(df, n=2)

    assert sorted(high["byear"].tolist()) == [1900, 1901, 1902]


def test_deaths_by_death_month_top_counts() -> None:
    dmonth = [1, 1, 1, 2, 2, 3, 12, 12, 12, 12, 7]
    df = _records([1900] * 11, [80] * 11, dmonth=dmonth)
    out = deaths_by_death_month(df, n=2)

    assert list(out.columns) == ["dmonth", "deaths"]
    assert out["dmonth"].tolist() == [12, 1]
    assert out["deaths"].tolist() == [4, 3]


def test_deaths_by_death_month_keeps_ties() -> None:
    dmonth = [1, 1, 2, 2, 3, 3, 4]
    df = _records([1900] * 7, [80] * 7, dmonth=dmonth)
    out = deaths_by_death_month(df, n=2)
    assert sorted(out["dmonth"].tolist()) == [1, 2, 3]


def test_queries_do_not_mutate_input() -> None:
    df = _records([1900, 1901], [80, 90])
    before = df.copy()
    oldest_records(df)
    avg_death_age_by_birth_year(df)
    deaths_by_death_month(df)
    pd.testing.assert_frame_equal(df, before)


def test_queries_validate_n() -> None:
    df = _records([1900], [80])
    with pytest.raises(ValueError, match=">= 1"):
        avg_death_age_by_birth_year(df, n=0)
    with pytest.raises(ValueError, match=">= 1"):
        deaths_by_death_month(df, n=0)


def test_queries_report_missing_columns() -> None:
    with pytest.raises(ValueError, match="missing columns"):
        avg_death_age_by_birth_year(pd.DataFrame({"byear": [1900]}))
