from __future__ import annotations

import pandas as pd

COLD = "Cold"
WARM = "Warm"
SEASONS = [COLD, WARM]

# October-March cold, April-September warm.
SEASON_BY_MONTH: dict[int, str] = {
    1: COLD,
    2: COLD,
    3: COLD,
    4: WARM,
    5: WARM,
    6: WARM,
    7: WARM,
    8: WARM,
    9: WARM,
    10: COLD,
    11: COLD,
    12: COLD,
}


def season_for_month(month: int) -> str:
    try:
        return SEASON_BY_MONTH[int(month)]
    except KeyError:
        raise ValueError(f"month must be in 1..12, got {month}") from None


def season_labels(dates: pd.Series) -> pd.Series:
    """
    Season label for each date in a datetime Series, as a categorical
    with categories [Cold, Warm].
    """
    labels = pd.to_datetime(dates).dt.month.map(SEASON_BY_MONTH)
    return pd.Series(
        pd.Categorical(labels, categories=SEASONS),
        index=dates.index,
        name="season",
    )
