"""
Visualization module: aspect distributions of pine and fir.

Generates:
1. Circular scatter per species with the mean-direction arrow
2. Rose diagrams (16-bin circular histograms) per species
3. Linear aspect histograms of both species side by side

All polar panels use the compass convention: north at the top, clockwise.
"""

import numpy as np
import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import seaborn as sns

from . import config
from .expansion import bearing_to_degrees

# Global plot style
plt.rcParams.update({
    "figure.dpi": 150,
    "savefig.dpi": 300,
    "savefig.bbox": "tight",
    "font.size": 10,
    "axes.titlesize": 12,
    "axes.labelsize": 11,
})

_COMPASS_TICKS = np.deg2rad(np.arange(0, 360, 45))
_COMPASS_LABELS = ["N", "NE", "E", "SE", "S", "SW", "W", "NW"]


def _save(fig, name: str):
    """Save figure to output directory."""
    out = config.OUTPUT_DIR / "plots"
    out.mkdir(parents=True, exist_ok=True)
    path = out / f"{name}.png"
    fig.savefig(path)
    plt.close(fig)
    return path


def _compass_axes(ax):
    ax.set_theta_zero_location("N")
    ax.set_theta_direction(-1)
    ax.set_xticks(_COMPASS_TICKS)
    ax.set_xticklabels(_COMPASS_LABELS)


def _stacked_radii(rad: np.ndarray, base: float = 1.0, step: float = 0.04,
                   max_height: float = 0.5) -> np.ndarray:
    """Radius per observation so repeated aspects stack outward.

    The tallest stack never rises more than ``max_height`` above ``base``.
    """
    keys = np.round(np.mod(rad, 2 * np.pi), 10)
    radii = np.full(len(rad), base)
    if len(rad) == 0:
        return radii
    _, counts = np.unique(keys, return_counts=True)
    if counts.max() > 1:
        step = min(step, max_height / (counts.max() - 1))
    seen = {}
    for i, a in enumerate(keys):
        k = seen.get(a, 0)
        radii[i] = base + k * step
        seen[a] = k + 1
    return radii


# ──────────────────────────────────────────────────────────────────
# 1. Circular scatter with mean arrow
# ──────────────────────────────────────────────────────────────────
def plot_circular_scatter(samples_rad: dict, summaries: dict):
    """Aspect observations on the compass, one panel per species."""
    fig, axes = plt.subplots(1, len(config.SPECIES), figsize=(12, 6),
                             subplot_kw={"projection": "polar"})

    for ax, sp in zip(axes, config.SPECIES):
        rad = samples_rad[sp]
        radii = _stacked_radii(rad)
        _compass_axes(ax)
        ax.scatter(rad, radii, s=12, color=config.SCATTER_COLORS[sp], alpha=0.8)
        ax.set_ylim(0, max(1.2, radii.max() + 0.1))
        ax.set_yticks([])

        s = summaries[sp]
        if not np.isnan(s["mean_deg"]):
            ax.annotate(
                "", xy=(np.deg2rad(s["mean_deg"]), s["concentration"]), xytext=(0, 0),
                arrowprops=dict(arrowstyle="-|>", color=config.MEAN_ARROW_COLOR, lw=3),
            )
        ax.set_title(f"{config.SPECIES_LABELS[sp]} Tree Aspect Distribution\n"
                     f"n={s['n']}, mean={s['mean_deg']:.1f}°, R={s['concentration']:.3f}",
                     pad=18)

    fig.tight_layout()
    return _save(fig, "01_circular_scatter")


# ──────────────────────────────────────────────────────────────────
# 2. Rose diagrams
# ──────────────────────────────────────────────────────────────────
def rose_bin_radii(rad: np.ndarray, bins: int = config.ROSE_BINS,
                   prop: float = config.ROSE_PROP) -> tuple[np.ndarray, np.ndarray]:
    """Bin edges (radians from north) and area-proportional bar radii.

    radius = prop * sqrt(count / n), so wedge area tracks relative frequency.
    """
    edges = np.linspace(0, 2 * np.pi, bins + 1)
    counts, _ = np.histogram(np.mod(rad, 2 * np.pi), bins=edges)
    n = counts.sum()
    radii = prop * np.sqrt(counts / n) if n else np.zeros(bins)
    return edges, radii


def plot_rose_diagrams(samples_rad: dict, bins: int = config.ROSE_BINS,
                       prop: float = config.ROSE_PROP):
    """16-bin rose diagram per species."""
    fig, axes = plt.subplots(1, len(config.SPECIES), figsize=(12, 6),
                             subplot_kw={"projection": "polar"})

    for ax, sp in zip(axes, config.SPECIES):
        edges, radii = rose_bin_radii(samples_rad[sp], bins=bins, prop=prop)
        _compass_axes(ax)
        ax.bar(edges[:-1], radii, width=2 * np.pi / bins, align="edge",
               color=config.ROSE_COLORS[sp], edgecolor="black", linewidth=0.6)
        ax.set_ylim(0, max(prop, radii.max()) * 1.05)
        ax.set_yticks([])
        ax.set_title(f"{config.SPECIES_NAMES[sp]} - Rose Diagram", pad=18)

    fig.tight_layout()
    return _save(fig, "02_rose_diagrams")


# ──────────────────────────────────────────────────────────────────
# 3. Linear aspect histograms
# ──────────────────────────────────────────────────────────────────
def plot_aspect_histograms(samples_rad: dict, bins: int = config.ROSE_BINS):
    """Aspect frequency of both species on a 0–360° axis."""
    long = pd.concat([
        pd.DataFrame({
            "Aspect (°)": bearing_to_degrees(samples_rad[sp]),
            "Species": config.SPECIES_LABELS[sp],
        })
        for sp in config.SPECIES
    ], ignore_index=True)

    fig, ax = plt.subplots(figsize=(10, 5))
    sns.histplot(
        data=long, x="Aspect (°)", hue="Species",
        bins=np.linspace(0, config.FULL_CIRCLE_DEG, bins + 1),
        stat="proportion", common_norm=False, multiple="dodge", shrink=0.9,
        palette=[config.SCATTER_COLORS[sp] for sp in config.SPECIES], ax=ax,
    )
    ax.set_xticks(np.arange(0, 361, 45))
    ax.set_xticklabels(_COMPASS_LABELS + ["N"])
    ax.set_ylabel("Proportion of trees")
    ax.set_title("Aspect distribution by species")
    fig.tight_layout()
    return _save(fig, "03_aspect_histograms")


# ──────────────────────────────────────────────────────────────────
# Master function
# ──────────────────────────────────────────────────────────────────
def run_all_plots(samples_rad: dict, summaries: dict) -> list:
    """Generate all plots; returns the saved file paths."""
    (config.OUTPUT_DIR / "plots").mkdir(parents=True, exist_ok=True)

    return [
        plot_circular_scatter(samples_rad, summaries),
        plot_rose_diagrams(samples_rad),
        plot_aspect_histograms(samples_rad),
    ]
