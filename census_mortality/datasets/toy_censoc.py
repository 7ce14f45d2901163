from __future__ import annotations

import numpy as np
import pandas as pd

from census_mortality.datasets.censoc import CENSOC_COLUMNS, INVALID_BIRTH_MONTH


def generate_toy_censoc(
    n_rows: int = 50_000,
    seed: int = 123,
    birth_years: range = range(1875, 1941),
    death_years: range = range(1975, 2006),
    invalid_bmonth_rate: float = 0.01,
) -> pd.DataFrame:
    """
    Generate a synthetic CenSoc-style extract with:
    - uniform birth year/month and death year/month
    - death_age consistent with the birth and death dates
    - a share of rows carrying the unknown birth month sentinel (0)
    - a mild winter excess in death months

    Output columns:
    HISTID, byear, bmonth, dyear, dmonth, death_age, weight
    """
    if n_rows < 0:
        raise ValueError("n_rows must be >= 0")
    if not 0.0 <= invalid_bmonth_rate <= 1.0:
        raise ValueError("invalid_bmonth_rate must be in [0, 1]")
    if min(death_years) <= max(birth_years):
        raise ValueError("death_years must start after the last birth year")

    rng = np.random.default_rng(seed)

    byear = rng.integers(min(birth_years), max(birth_years) + 1, size=n_rows)
    bmonth = rng.integers(1, 13, size=n_rows)
    dyear = rng.integers(min(death_years), max(death_years) + 1, size=n_rows)

    # winter months weighted up ~20% over summer months
    month_weights = np.array([1.2, 1.15, 1.1, 1.0, 0.95, 0.9, 0.9, 0.9, 0.95, 1.0, 1.1, 1.2])
    dmonth = rng.choice(np.arange(1, 13), size=n_rows, p=month_weights / month_weights.sum())

    # completed years at death
    death_age = dyear - byear - (dmonth < bmonth).astype(int)

    # unknown birth month; age is still reported
    invalid = rng.random(n_rows) < invalid_bmonth_rate
    bmonth = np.where(invalid, INVALID_BIRTH_MONTH, bmonth)

    weight = np.round(rng.uniform(0.9, 1.3, size=n_rows), 4)
    histid = [f"TOY-{i:08d}" for i in range(n_rows)]

    df = pd.DataFrame(
        {
            "HISTID": histid,
            "byear": byear.astype("int64"),
            "bmonth": bmonth.astype("int64"),
            "dyear": dyear.astype("int64"),
            "dmonth": dmonth.astype("int64"),
            "death_age": death_age.astype("int64"),
            "weight": weight.astype(float),
        }
    )
    return df[CENSOC_COLUMNS]
