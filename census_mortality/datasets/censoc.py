from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator

import pandas as pd

logger = logging.getLogger(__name__)

# Column layout of the CenSoc death-linked extract, in file order.
CENSOC_DTYPES: dict[str, str] = {
    "HISTID": "str",
    "byear": "int64",
    "bmonth": "int64",
    "dyear": "int64",
    "dmonth": "int64",
    "death_age": "int64",
    "weight": "float64",
}
CENSOC_COLUMNS: list[str] = list(CENSOC_DTYPES)

# Birth month 0 marks an unknown birth month in the source file.
INVALID_BIRTH_MONTH = 0


def empty_censoc_frame() -> pd.DataFrame:
    return pd.DataFrame(
        {col: pd.Series(dtype=dtype) for col, dtype in CENSOC_DTYPES.items()}
    )


def _check_header(path: Path) -> None:
    header = pd.read_csv(path, nrows=0).columns
    missing = [c for c in CENSOC_COLUMNS if c not in header]
    if missing:
        raise ValueError(f"{path} is missing columns: {missing}")


def _typed_frame(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Apply the declared types the CSV parser cannot enforce on its own:
    no blank identifiers, and weights that are real numbers rather than
    boolean or NA tokens.
    """
    blank_id = frame["HISTID"].str.strip() == ""
    if blank_id.any():
        raise ValueError(f"blank HISTID in {int(blank_id.sum())} row(s)")

    raw_weight = frame["weight"].str.strip()
    if (raw_weight == "").any():
        raise ValueError("blank weight cell")
    weight = pd.to_numeric(raw_weight, errors="raise")
    if weight.isna().any():
        raise ValueError("weight contains NA values")

    out = frame[CENSOC_COLUMNS].copy()
    out["weight"] = weight.astype("float64")
    return out


def _iter_frames(path: Path, chunksize: int | None) -> Iterator[pd.DataFrame]:
    """
    Yield typed frames from the CSV: the whole file at once, or one
    frame per chunk when chunksize is given.
    """
    # weight is parsed as text so boolean/NA tokens cannot slip through
    # as 1.0/0.0/NaN; na_filter=False keeps blank cells as literal text
    read_kwargs = dict(
        usecols=CENSOC_COLUMNS,
        dtype={**CENSOC_DTYPES, "weight": "str"},
        na_filter=False,
    )
    try:
        if chunksize is None:
            yield _typed_frame(pd.read_csv(path, **read_kwargs))
            return
        with pd.read_csv(path, chunksize=chunksize, **read_kwargs) as reader:
            for chunk in reader:
                yield _typed_frame(chunk)
    except (ValueError, OverflowError) as exc:
        raise ValueError(
            f"{path}: values do not match the declared column types: {exc}"
        ) from exc


def _concat(frames: list[pd.DataFrame]) -> pd.DataFrame:
    if not frames:
        return empty_censoc_frame()
    return pd.concat(frames, ignore_index=True)


def _validate_path(path: str | Path, chunksize: int | None) -> Path:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"CenSoc file not found: {path}")
    if chunksize is not None and chunksize < 1:
        raise ValueError("chunksize must be >= 1")
    _check_header(path)
    return path


def read_censoc_csv(path: str | Path, chunksize: int | None = None) -> pd.DataFrame:
    """
    Read a CenSoc CSV with an explicit dtype for every column.

    A cell that does not parse as its declared type (text in a numeric
    column, a blank numeric cell) raises ValueError; nothing is coerced.
    Columns beyond the seven CenSoc columns are ignored.
    """
    path = _validate_path(path, chunksize)
    df = _concat(list(_iter_frames(path, chunksize)))
    logger.info("Read %d rows from %s", len(df), path)
    return df


def drop_invalid_birth_month(df: pd.DataFrame) -> pd.DataFrame:
    """
    Return a new frame without the rows whose birth month is the
    sentinel value 0.
    """
    if "bmonth" not in df.columns:
        raise ValueError("df is missing column 'bmonth'")
    keep = df["bmonth"] != INVALID_BIRTH_MONTH
    return df.loc[keep].reset_index(drop=True)


def load_censoc(path: str | Path, chunksize: int | None = None) -> pd.DataFrame:
    """
    Read and clean a CenSoc CSV.

    With chunksize set, each chunk is cleaned before the chunks are joined,
    so rows with an invalid birth month are never held in memory together.
    """
    path = _validate_path(path, chunksize)

    n_read = 0
    frames = []
    for frame in _iter_frames(path, chunksize):
        n_read += len(frame)
        frames.append(drop_invalid_birth_month(frame))
    df = _concat(frames)

    logger.info(
        "Loaded %d rows from %s (%d dropped for bmonth=%d)",
        len(df),
        path,
        n_read - len(df),
        INVALID_BIRTH_MONTH,
    )
    return df
