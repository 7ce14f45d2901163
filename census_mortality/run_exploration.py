from __future__ import annotations

import argparse

from census_mortality.config import PROJECT_ROOT, settings
from census_mortality.datasets.censoc import load_censoc
from census_mortality.io_utils import ensure_dirs_exist
from census_mortality.queries import (
    avg_death_age_by_birth_year,
    deaths_by_death_month,
    oldest_records,
)
from census_mortality.runtime_utils import (
    add_common_run_args,
    configure_logging,
    write_run_metadata,
)


def main() -> None:
    parser = argparse.ArgumentParser(description="Descriptive queries over a CenSoc extract.")
    add_common_run_args(parser)
    parser.add_argument("--oldest", type=int, default=5, help="Rows of the oldest-records listing.")
    parser.add_argument("--top-birth-years", type=int, default=settings.top_n_birth_years)
    parser.add_argument("--top-months", type=int, default=settings.top_n_months)
    args = parser.parse_args()
    configure_logging(args.log_level)

    ensure_dirs_exist([settings.output_dir])
    df = load_censoc(args.input, chunksize=args.chunksize)

    oldest = oldest_records(df, n=args.oldest)
    highest = avg_death_age_by_birth_year(df, n=args.top_birth_years, highest=True)
    lowest = avg_death_age_by_birth_year(df, n=args.top_birth_years, highest=False)
    months = deaths_by_death_month(df, n=args.top_months)

    print("Records after cleaning:", len(df))
    print()
    print("Oldest records:")
    print(oldest.to_string(index=False))
    print()
    print("Birth years with the highest average death age:")
    print(highest.to_string(index=False))
    print()
    print("Birth years with the lowest average death age:")
    print(lowest.to_string(index=False))
    print()
    print("Death months with the most deaths:")
    print(months.to_string(index=False))

    summary = {
        "records": int(len(df)),
        "max_death_age": int(oldest["death_age"].iloc[0]) if len(oldest) else None,
        "highest_avg_birth_years": [int(y) for y in highest["byear"]],
        "lowest_avg_birth_years": [int(y) for y in lowest["byear"]],
        "top_death_months": [int(m) for m in months["dmonth"]],
    }
    metadata_path = write_run_metadata(
        output_dir=settings.output_dir,
        run_name="exploration",
        args=args,
        summary=summary,
        project_root=PROJECT_ROOT,
    )
    print("Saved metadata:", metadata_path)


if __name__ == "__main__":
    main()
