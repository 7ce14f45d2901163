from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import pandas as pd

from census_mortality.aggregation import date_series, deaths_by_age
from census_mortality.config import settings
from census_mortality.datasets.censoc import load_censoc
from census_mortality.queries import (
    avg_death_age_by_birth_year,
    deaths_by_death_month,
    oldest_records,
)
from census_mortality.reshape import reduce_records, sample_records

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MortalityTables:
    """
    Every table produced by one pass of the pipeline.

    records:      cleaned CenSoc records (no bmonth=0)
    reduced:      death_date, death_age for every cleaned record
    sample:       down-sampled reduced table
    age_counts:   deaths per death_age
    date_series:  total/avg_age/season per death_date
    """
    records: pd.DataFrame
    reduced: pd.DataFrame
    sample: pd.DataFrame
    age_counts: pd.DataFrame
    date_series: pd.DataFrame
    oldest: pd.DataFrame
    top_birth_years: pd.DataFrame
    bottom_birth_years: pd.DataFrame
    top_death_months: pd.DataFrame


def build_tables(
    records: pd.DataFrame,
    *,
    sample_size: int = settings.sample_size,
    seed: int | None = None,
    use_sample: bool = False,
    top_n_birth_years: int = settings.top_n_birth_years,
    top_n_months: int = settings.top_n_months,
    n_oldest: int = 10,
) -> MortalityTables:
    """
    Run every stage after ingestion on an already cleaned record table.

    With use_sample=True the chart aggregates come from the down-sampled
    table instead of the full reduced table.
    """
    oldest = oldest_records(records, n=n_oldest)
    top_years = avg_death_age_by_birth_year(records, n=top_n_birth_years, highest=True)
    bottom_years = avg_death_age_by_birth_year(records, n=top_n_birth_years, highest=False)
    top_months = deaths_by_death_month(records, n=top_n_months)

    reduced = reduce_records(records)
    sample = sample_records(reduced, n=sample_size, seed=seed)
    source = sample if use_sample else reduced

    logger.info(
        "Aggregating %d rows (%s table)",
        len(source),
        "sampled" if use_sample else "full",
    )
    return MortalityTables(
        records=records,
        reduced=reduced,
        sample=sample,
        age_counts=deaths_by_age(source),
        date_series=date_series(source),
        oldest=oldest,
        top_birth_years=top_years,
        bottom_birth_years=bottom_years,
        top_death_months=top_months,
    )


def run_pipeline(
    path: str | Path,
    *,
    sample_size: int = settings.sample_size,
    seed: int | None = None,
    chunksize: int | None = None,
    use_sample: bool = False,
) -> MortalityTables:
    records = load_censoc(path, chunksize=chunksize)
    return build_tables(
        records,
        sample_size=sample_size,
        seed=seed,
        use_sample=use_sample,
    )


def summarize(tables: MortalityTables) -> dict:
    """
    Plain-Python summary of a pipeline run, for run metadata.
    """
    ds = tables.date_series
    summary = {
        "records": int(len(tables.records)),
        "sample_rows": int(len(tables.sample)),
        "distinct_ages": int(len(tables.age_counts)),
        "distinct_dates": int(len(ds)),
        "max_death_age": int(tables.records["death_age"].max()) if len(tables.records) else None,
        "top_birth_years": [int(y) for y in tables.top_birth_years["byear"]],
        "top_death_months": [int(m) for m in tables.top_death_months["dmonth"]],
    }
    if len(ds):
        summary["first_date"] = ds["death_date"].min().strftime("%Y-%m-%d")
        summary["last_date"] = ds["death_date"].max().strftime("%Y-%m-%d")
        summary["deaths_by_season"] = {
            str(k): int(v) for k, v in ds.groupby("season", observed=True)["total"].sum().items()
        }
    return summary
