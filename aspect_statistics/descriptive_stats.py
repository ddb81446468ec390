"""
Descriptive circular statistics per species.

- Mean direction (degrees, compass bearing)
- Concentration = mean resultant length (0 = uniform, 1 = single direction)
- Circular standard deviation (degrees)
- Zone occupancy: how many zones each species occupies, and both together
"""

import numpy as np
import pandas as pd
from pycircstat2.descriptive import circ_mean, circ_r
from scipy import stats

from . import config
from .expansion import bearing_to_degrees


def circular_mean_deg(rad: np.ndarray) -> float:
    """Mean direction in [0, 360); NaN when the resultant vector vanishes."""
    m = float(circ_mean(np.asarray(rad, dtype=float)))
    if np.isnan(m):
        return np.nan
    return float(bearing_to_degrees(m))


def mean_resultant_length(rad: np.ndarray) -> float:
    """Concentration in [0, 1]."""
    r = float(circ_r(np.asarray(rad, dtype=float)))
    return float(np.clip(r, 0.0, 1.0))


def circular_std_deg(rad: np.ndarray) -> float:
    """Circular standard deviation in degrees."""
    return float(np.rad2deg(stats.circstd(rad, high=2 * np.pi, low=0.0)))


def circular_summary(rad: np.ndarray) -> dict:
    """n, mean direction, concentration and circular SD of one sample."""
    return {
        "n": len(rad),
        "mean_deg": circular_mean_deg(rad),
        "concentration": mean_resultant_length(rad),
        "circ_sd_deg": circular_std_deg(rad),
    }


def compute_descriptive_table(summaries: dict[str, dict]) -> pd.DataFrame:
    """One row per species, from :func:`circular_summary` outputs."""
    rows = []
    for sp in config.SPECIES:
        s = summaries[sp]
        rows.append({
            "Species": config.SPECIES_LABELS[sp],
            "n": s["n"],
            "Mean_aspect_deg": round(s["mean_deg"], 1),
            "Concentration": round(s["concentration"], 3),
            "Circular_SD_deg": round(s["circ_sd_deg"], 1),
        })
    return pd.DataFrame(rows)


def zone_occupancy_table(zones: pd.DataFrame) -> pd.DataFrame:
    """Zones occupied and trees counted per species (valid zones only)."""
    pine = zones[config.COUNT_COLS["pine"]] > 0
    fir = zones[config.COUNT_COLS["fir"]] > 0
    rows = []
    for sp in config.SPECIES:
        counts = zones[config.COUNT_COLS[sp]]
        rows.append({
            "Species": config.SPECIES_LABELS[sp],
            "Zones_total": len(zones),
            "Zones_occupied": int((counts > 0).sum()),
            "Zones_shared": int((pine & fir).sum()),
            "Trees": int(counts.sum()),
        })
    return pd.DataFrame(rows)


def run(zones: pd.DataFrame, samples_rad: dict[str, np.ndarray]) -> dict:
    """Run all descriptive analyses."""
    summaries = {sp: circular_summary(samples_rad[sp]) for sp in config.SPECIES}
    results = {
        "descriptive": compute_descriptive_table(summaries),
        "zone_occupancy": zone_occupancy_table(zones),
    }

    # Save to Excel
    config.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(config.OUTPUT_DIR / "descriptive_stats.xlsx") as writer:
        for name, tbl in results.items():
            tbl.to_excel(writer, sheet_name=name, index=False)

    results["summaries"] = summaries
    return results
