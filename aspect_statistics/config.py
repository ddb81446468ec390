"""Shared configuration for the aspect comparison modules."""

from pathlib import Path

# ── Paths ──────────────────────────────────────────────────────────
ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = ROOT / "data"
DATA_CSV = DATA_DIR / "raw data.csv"
OUTPUT_DIR = Path(__file__).resolve().parent / "output"

# ── Input table ────────────────────────────────────────────────────
# Field-sheet headers -> canonical column names used everywhere else
INPUT_COLUMNS = {
    "Aspect (°)": "aspect",
    "# Pine": "pine_count",
    "# Fir": "fir_count",
}
ASPECT_COL = "aspect"

# ── Species ────────────────────────────────────────────────────────
SPECIES = ["pine", "fir"]
COUNT_COLS = {
    "pine": "pine_count",
    "fir": "fir_count",
}
SPECIES_LABELS = {
    "pine": "Pine",
    "fir": "Fir",
}
# Full common names used on the rose diagrams
SPECIES_NAMES = {
    "pine": "Ponderosa pine",
    "fir": "Douglas fir",
}

# ── Statistical parameters ─────────────────────────────────────────
ALPHA = 0.05
FULL_CIRCLE_DEG = 360.0

# ── Plotting ───────────────────────────────────────────────────────
ROSE_BINS = 16
ROSE_PROP = 2.0
SCATTER_COLORS = {
    "pine": "darkgreen",
    "fir": "forestgreen",
}
ROSE_COLORS = {
    "pine": "lightgreen",
    "fir": "lightblue",
}
MEAN_ARROW_COLOR = "red"
