import pandas as pd
import pytest

from census_mortality.datasets.censoc import drop_invalid_birth_month
from census_mortality.datasets.toy_censoc import generate_toy_censoc
from census_mortality.reshape import derive_death_date, reduce_records, sample_records
from census_mortality.seasons import COLD, WARM, season_for_month, season_labels


def test_season_table_is_total_and_fixed() -> None:
    expected = {m: COLD for m in (10, 11, 12, 1, 2, 3)}
    expected.update({m: WARM for m in range(4, 10)})

    for month in range(1, 13):
        assert season_for_month(month) == expected[month]


@pytest.mark.parametrize("month", [0, 13, -1])
def test_season_rejects_out_of_range_month(month) -> None:
    with pytest.raises(ValueError, match="1..12"):
        season_for_month(month)


def test_season_labels_are_categorical() -> None:
    dates = pd.Series(pd.to_datetime(["1942-01-01", "1942-07-01", "1942-10-01"]))
    labels = season_labels(dates)

    assert list(labels.cat.categories) == [COLD, WARM]
    assert labels.tolist() == [COLD, WARM, COLD]


def test_death_date_is_first_of_month() -> None:
    df = generate_toy_censoc(n_rows=1_000, seed=3)
    dates = derive_death_date(df)

    assert (dates.dt.day == 1).all()
    assert (dates.dt.year == df["dyear"]).all()
    assert (dates.dt.month == df["dmonth"]).all()


def test_death_date_handles_historical_years() -> None:
    df = pd.DataFrame({"dyear": [1700, 1875, 2005, 2250], "dmonth": [12, 1, 6, 3]})
    dates = derive_death_date(df)
    assert dates.dt.year.tolist() == [1700, 1875, 2005, 2250]


def test_death_date_rejects_invalid_month() -> None:
    df = pd.DataFrame({"dyear": [1950, 1950], "dmonth": [1, 13]})
    with pytest.raises(ValueError, match="dmonth must be in 1..12"):
        derive_death_date(df)


def test_reduce_records_keeps_two_columns(scenario_records) -> None:
    cleaned = drop_invalid_birth_month(scenario_records)
    reduced = reduce_records(cleaned)

    assert list(reduced.columns) == ["death_date", "death_age"]
    assert len(reduced) == 4
    assert reduced["death_date"].iloc[0] == pd.Timestamp("1942-01-01")
    assert reduced["death_age"].tolist() == [62, 61, 60, 60]
    # source untouched
    assert "dyear" in cleaned.columns


def test_sample_has_requested_size_without_duplicates() -> None:
    reduced = reduce_records(generate_toy_censoc(n_rows=20_000, seed=5))
    sample = sample_records(reduced, n=10_000)

    assert len(sample) == 10_000
    assert sample.index.is_unique
    assert set(sample.index).issubset(set(reduced.index))


def test_sample_is_reproducible_with_seed() -> None:
    reduced = reduce_records(generate_toy_censoc(n_rows=500, seed=5))

    s1 = sample_records(reduced, n=50, seed=11)
    s2 = sample_records(reduced, n=50, seed=11)
    pd.testing.assert_frame_equal(s1, s2)


def test_sample_of_small_table_returns_all_rows() -> None:
    reduced = reduce_records(generate_toy_censoc(n_rows=30, seed=5))
    sample = sample_records(reduced, n=100, seed=1)

    assert len(sample) == 30
    assert sorted(sample.index) == list(range(30))


def test_sample_rejects_non_positive_size() -> None:
    reduced = reduce_records(generate_toy_censoc(n_rows=10, seed=5))
    with pytest.raises(ValueError, match=">= 1"):
        sample_records(reduced, n=0)
