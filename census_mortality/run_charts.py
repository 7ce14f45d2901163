from __future__ import annotations

import argparse

from census_mortality.charts import animate_date_series, plot_age_histogram
from census_mortality.config import PROJECT_ROOT, settings
from census_mortality.io_utils import ensure_dirs_exist, save_table
from census_mortality.pipeline import run_pipeline, summarize
from census_mortality.runtime_utils import (
    add_common_run_args,
    configure_logging,
    write_run_metadata,
)


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Aggregate a CenSoc extract and draw the age histogram and monthly animation."
    )
    add_common_run_args(parser)
    parser.add_argument(
        "--use-sample",
        action="store_true",
        help="Build the charts from the down-sampled table (fast iteration).",
    )
    parser.add_argument("--no-plots", action="store_true")
    parser.add_argument("--fps", type=int, default=settings.animation_fps)
    parser.add_argument(
        "--frame-step",
        type=int,
        default=1,
        help="Dates revealed per animation frame.",
    )
    args = parser.parse_args()
    configure_logging(args.log_level)

    ensure_dirs_exist([settings.processed_dir, settings.output_dir])
    tables = run_pipeline(
        args.input,
        sample_size=args.sample_size,
        seed=args.seed,
        chunksize=args.chunksize,
        use_sample=args.use_sample,
    )

    age_path = save_table(tables.age_counts, settings.processed_dir / "deaths_by_age.csv")
    series_path = save_table(tables.date_series, settings.processed_dir / "deaths_by_month.csv")
    print("Saved:", age_path)
    print("Saved:", series_path)
    print()
    print("Monthly series preview:")
    print(tables.date_series.head(12).to_string(index=False))

    if not args.no_plots:
        suffix = "_sample" if args.use_sample else ""
        hist_path = plot_age_histogram(
            tables.age_counts,
            settings.output_dir / f"deaths_by_age{suffix}.png",
            dpi=settings.chart_dpi,
        )
        print("Saved plot:", hist_path)

        anim_path = animate_date_series(
            tables.date_series,
            settings.output_dir / f"deaths_by_month{suffix}.gif",
            fps=args.fps,
            frame_step=args.frame_step,
        )
        print("Saved animation:", anim_path)

    metadata_path = write_run_metadata(
        output_dir=settings.output_dir,
        run_name="charts",
        args=args,
        summary=summarize(tables),
        project_root=PROJECT_ROOT,
    )
    print("Saved metadata:", metadata_path)


if __name__ == "__main__":
    main()
