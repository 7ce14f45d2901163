import pandas as pd
import pytest

from census_mortality.datasets.censoc import CENSOC_COLUMNS


@pytest.fixture
def scenario_records() -> pd.DataFrame:
    """Five raw records; the first has an unknown birth month."""
    return pd.DataFrame(
        {
            "HISTID": ["A", "B", "C", "D", "E"],
            "byear": [1880, 1880, 1881, 1882, 1883],
            "bmonth": [0, 3, 5, 7, 2],
            "dyear": [1942, 1942, 1942, 1942, 1943],
            "dmonth": [1, 1, 1, 7, 1],
            "death_age": [61, 62, 61, 60, 60],
            "weight": [1.0, 1.0, 1.0, 1.0, 1.0],
        },
        columns=CENSOC_COLUMNS,
    )


@pytest.fixture
def scenario_csv(tmp_path, scenario_records):
    path = tmp_path / "censoc.csv"
    scenario_records.to_csv(path, index=False)
    return path
