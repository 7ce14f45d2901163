from census_mortality.datasets.censoc import (
    CENSOC_COLUMNS,
    CENSOC_DTYPES,
    INVALID_BIRTH_MONTH,
    drop_invalid_birth_month,
    load_censoc,
    read_censoc_csv,
)
from census_mortality.datasets.toy_censoc import generate_toy_censoc

__all__ = [
    "CENSOC_COLUMNS",
    "CENSOC_DTYPES",
    "INVALID_BIRTH_MONTH",
    "drop_invalid_birth_month",
    "load_censoc",
    "read_censoc_csv",
    "generate_toy_censoc",
]
