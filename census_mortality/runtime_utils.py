from __future__ import annotations

import argparse
import json
import logging
import subprocess
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from census_mortality.config import settings


def add_common_run_args(
    parser: argparse.ArgumentParser,
    *,
    default_sample_size: int = settings.sample_size,
) -> argparse.ArgumentParser:
    parser.add_argument(
        "--input",
        type=Path,
        default=settings.input_path,
        help="CenSoc CSV to analyse.",
    )
    parser.add_argument(
        "--sample-size",
        type=int,
        default=default_sample_size,
        help="Rows in the down-sampled table.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the down-sample (unseeded when omitted).",
    )
    parser.add_argument(
        "--chunksize",
        type=int,
        default=None,
        help="Read the CSV in chunks of this many rows.",
    )
    parser.add_argument("--log-level", type=str, default="INFO")
    parser.add_argument(
        "--metadata-tag",
        type=str,
        default="",
        help="Optional suffix for the metadata JSON filename.",
    )
    return parser


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def _git_commit_hash(cwd: Path) -> str:
    try:
        res = subprocess.run(
            ["git", "rev-parse", "HEAD"],
            cwd=str(cwd),
            check=True,
            capture_output=True,
            text=True,
        )
        return res.stdout.strip()
    except (OSError, subprocess.CalledProcessError):
        return ""


def write_run_metadata(
    *,
    output_dir: Path,
    run_name: str,
    args: argparse.Namespace,
    summary: dict[str, Any],
    project_root: Path,
) -> Path:
    output_dir.mkdir(parents=True, exist_ok=True)

    tag = f"_{args.metadata_tag}" if getattr(args, "metadata_tag", "") else ""
    out_path = output_dir / f"{run_name}_metadata{tag}.json"

    payload: dict[str, Any] = {
        "run_name": run_name,
        "timestamp_utc": datetime.now(timezone.utc).isoformat(),
        "git_commit": _git_commit_hash(project_root),
        "args": vars(args),
        "summary": summary,
    }

    # Path args are not JSON types
    out_path.write_text(json.dumps(payload, indent=2, sort_keys=True, default=str))
    return out_path
