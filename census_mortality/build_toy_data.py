from __future__ import annotations

import argparse
from pathlib import Path

from census_mortality.config import PROJECT_ROOT, settings
from census_mortality.datasets.censoc import INVALID_BIRTH_MONTH
from census_mortality.datasets.toy_censoc import generate_toy_censoc
from census_mortality.io_utils import ensure_dirs_exist
from census_mortality.runtime_utils import write_run_metadata


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Generate a synthetic CenSoc-style extract.")
    parser.add_argument("--rows", type=int, default=50_000)
    parser.add_argument("--seed", type=int, default=123)
    parser.add_argument("--first-birth-year", type=int, default=1875)
    parser.add_argument("--last-birth-year", type=int, default=1940)
    parser.add_argument("--first-death-year", type=int, default=1975)
    parser.add_argument("--last-death-year", type=int, default=2005)
    parser.add_argument("--invalid-bmonth-rate", type=float, default=0.01)
    parser.add_argument("--output", type=Path, default=settings.input_path)
    parser.add_argument("--metadata-tag", type=str, default="")
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    ensure_dirs_exist([args.output.parent, settings.output_dir])

    df = generate_toy_censoc(
        n_rows=args.rows,
        seed=args.seed,
        birth_years=range(args.first_birth_year, args.last_birth_year + 1),
        death_years=range(args.first_death_year, args.last_death_year + 1),
        invalid_bmonth_rate=args.invalid_bmonth_rate,
    )

    out_path: Path = args.output
    df.to_csv(out_path, index=False)

    n_invalid = int((df["bmonth"] == INVALID_BIRTH_MONTH).sum())
    print("Saved:", out_path)
    print("Rows:", len(df))
    print("Rows with unknown birth month:", n_invalid)
    print(df.head(10).to_string(index=False))

    summary = {
        "rows": int(len(df)),
        "invalid_bmonth_rows": n_invalid,
        "first_birth_year": int(args.first_birth_year),
        "last_birth_year": int(args.last_birth_year),
        "first_death_year": int(args.first_death_year),
        "last_death_year": int(args.last_death_year),
    }
    metadata_path = write_run_metadata(
        output_dir=settings.output_dir,
        run_name="build_toy_data",
        args=args,
        summary=summary,
        project_root=PROJECT_ROOT,
    )
    print("Saved metadata:", metadata_path)


if __name__ == "__main__":
    main()
