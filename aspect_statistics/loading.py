"""
Load the zone table and keep only rows usable for the comparison.

A zone is valid when aspect, pine count and fir count are all present and
both counts are non-negative. Invalid rows are dropped without a per-row
report.
"""

import logging
from pathlib import Path

import pandas as pd

from . import config

logger = logging.getLogger(__name__)


class EmptySampleError(ValueError):
    """A species has no trees left after filtering."""


def load_zones(path: Path = None, columns: dict = None) -> pd.DataFrame:
    """Read the zone CSV and return canonical ``aspect/pine_count/fir_count`` columns.

    Cells that cannot be parsed as numbers become NaN and are dropped later
    by :func:`filter_valid_zones`.
    """
    path = Path(path) if path is not None else config.DATA_CSV
    columns = columns if columns is not None else config.INPUT_COLUMNS

    if not path.exists():
        raise FileNotFoundError(f"Zone table not found: {path}")

    raw = pd.read_csv(path)
    missing = [c for c in columns if c not in raw.columns]
    if missing:
        raise KeyError(f"Missing columns in {path.name}: {missing}")

    zones = raw[list(columns)].rename(columns=columns)
    for col in zones.columns:
        zones[col] = pd.to_numeric(zones[col], errors="coerce")

    logger.info("Loaded %d zones from %s", len(zones), path)
    return zones


def filter_valid_zones(zones: pd.DataFrame) -> pd.DataFrame:
    """Drop zones with a missing field or a negative count."""
    count_cols = list(config.COUNT_COLS.values())
    valid = zones[[config.ASPECT_COL] + count_cols].notna().all(axis=1)
    for col in count_cols:
        valid &= zones[col] >= 0

    dropped = int((~valid).sum())
    if dropped:
        logger.debug("Dropped %d invalid zones", dropped)
    return zones.loc[valid].reset_index(drop=True)


def species_totals(zones: pd.DataFrame) -> dict[str, int]:
    """Total tree count per species."""
    return {sp: int(zones[col].sum()) for sp, col in config.COUNT_COLS.items()}


def check_species_totals(zones: pd.DataFrame) -> None:
    """Abort when either species has no trees in the valid zones."""
    totals = species_totals(zones)
    for sp in config.SPECIES:
        if totals[sp] == 0:
            raise EmptySampleError(
                f"No {config.SPECIES_LABELS[sp]} trees found in the data!"
            )
