"""Pytest configuration and shared fixtures."""
import pytest
import sys
from pathlib import Path

import numpy as np
import pandas as pd

# Add repo root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from aspect_statistics import config


@pytest.fixture
def output_dir(tmp_path, monkeypatch):
    """Redirect all analysis output to a temporary directory."""
    out = tmp_path / "output"
    monkeypatch.setattr(config, "OUTPUT_DIR", out)
    return out


@pytest.fixture
def small_zones():
    """Two zones: pines on a NE slope, firs on a S slope."""
    return pd.DataFrame({
        "aspect": [45.0, 180.0],
        "pine_count": [2, 0],
        "fir_count": [0, 3],
    })


@pytest.fixture
def synthetic_zones():
    """Pines favour south-west slopes, firs favour north-east slopes."""
    rng = np.random.default_rng(42)
    n = 60
    aspect = rng.uniform(0, 360, n).round(0)
    south_west = np.cos(np.deg2rad(aspect - 225))
    return pd.DataFrame({
        "aspect": aspect,
        "pine_count": np.clip(np.round(4 * south_west + rng.integers(0, 2, n)), 0, None).astype(int),
        "fir_count": np.clip(np.round(-4 * south_west + rng.integers(0, 2, n)), 0, None).astype(int),
    })


@pytest.fixture
def zone_csv(tmp_path):
    """Zone CSV with the field-sheet headers and a few bad rows."""
    df = pd.DataFrame({
        "Zone": ["A", "B", "C", "D", "E", "F"],
        "Aspect (°)": [10, 200, None, 90, 300, 120],
        "# Pine": [3, 0, 4, 2, -1, "n/a"],
        "# Fir": [0, 5, 1, 1, 2, 2],
    })
    path = tmp_path / "raw data.csv"
    df.to_csv(path, index=False, encoding="utf-8")
    return path


@pytest.fixture
def make_zone_csv(tmp_path):
    """Factory writing ``(aspect, pine, fir)`` rows with the field-sheet headers."""
    def _write(rows, name="zones.csv"):
        path = tmp_path / name
        pd.DataFrame(rows, columns=list(config.INPUT_COLUMNS)).to_csv(
            path, index=False, encoding="utf-8")
        return path
    return _write
