"""
Weighted expansion of zone aspects and conversion to compass bearings.

Each zone contributes its aspect once per tree, so a zone with 3 firs adds
three identical fir observations. Aspects are compass bearings
(0° = north, clockwise).
"""

import numpy as np
import pandas as pd

from . import config
from .loading import EmptySampleError


def expand_weighted_aspects(zones: pd.DataFrame, count_col: str) -> np.ndarray:
    """Repeat each zone's aspect ``count`` times, keeping zone order."""
    counts = zones[count_col].to_numpy().astype(int)
    occupied = counts > 0
    aspects = zones[config.ASPECT_COL].to_numpy(dtype=float)
    return np.repeat(aspects[occupied], counts[occupied])


def build_species_samples(zones: pd.DataFrame) -> dict[str, np.ndarray]:
    """Per-species aspect samples (degrees).

    Raises EmptySampleError if a species ends up with no observations.
    """
    samples = {
        sp: expand_weighted_aspects(zones, config.COUNT_COLS[sp])
        for sp in config.SPECIES
    }
    for sp in config.SPECIES:
        if samples[sp].size == 0:
            raise EmptySampleError(
                f"No {config.SPECIES_LABELS[sp]} trees found in the data!"
            )
    return samples


def to_bearing_radians(degrees) -> np.ndarray:
    """Degrees (geographic bearing) -> radians in the same bearing frame.

    The raw value is converted as-is; 360° and 0° land on the same point of
    the circle.
    """
    return np.deg2rad(np.asarray(degrees, dtype=float))


def bearing_to_degrees(radians) -> np.ndarray:
    """Radians (bearing frame) -> degrees in [0, 360)."""
    deg = np.mod(np.rad2deg(np.asarray(radians, dtype=float)), config.FULL_CIRCLE_DEG)
    # mod can return exactly 360.0 for tiny negative inputs
    return np.where(deg >= config.FULL_CIRCLE_DEG, 0.0, deg)


def convert_samples(samples: dict[str, np.ndarray]) -> dict[str, np.ndarray]:
    """Convert every species sample to bearing radians."""
    return {sp: to_bearing_radians(deg) for sp, deg in samples.items()}
