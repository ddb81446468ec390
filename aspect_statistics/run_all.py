"""
Orchestrator: compare pine and fir aspect distributions and write a report.

Usage:
    python -m aspect_statistics.run_all
"""

import logging
import time
from pathlib import Path

import pandas as pd

from . import config
from . import loading, expansion, watson_test, descriptive_stats, plots
from .loading import EmptySampleError

logger = logging.getLogger(__name__)


def load_data(path: Path = None) -> pd.DataFrame:
    """Load the zone table and keep valid zones only."""
    print(f"Loading data from {path or config.DATA_CSV}")
    zones = loading.load_zones(path)
    valid = loading.filter_valid_zones(zones)
    print(f"  Zones: {len(zones)} ({len(valid)} valid)")
    for sp, total in loading.species_totals(valid).items():
        print(f"  {config.SPECIES_LABELS[sp]} trees: {total}")
    loading.check_species_totals(valid)
    return valid


def _format_test_section(test: dict) -> list[str]:
    lines = []
    if test.get("statistic") is not None:
        lines.append(f"Test Statistic (U²): {round(test['statistic'], 4)}")
    else:
        lines.append("Test Statistic: Unable to extract")

    if test.get("p_value") is not None:
        lines.append(f"p-value: {round(test['p_value'], 4)}")
        lines.extend(test["interpretation"])
    else:
        lines.append("p-value: Unable to extract numeric p-value")
        lines.append("Full test results:")
        lines.append(repr(test.get("raw")))
    return lines


def generate_text_report(all_results: dict) -> str:
    """Generate a human-readable report of the comparison."""
    lines = [
        "=" * 70,
        "WATSON U² TEST: PINE vs FIR ASPECT DISTRIBUTION",
        "=" * 70,
        "",
    ]

    # 1. Test results
    lines.append("1. WATSON U² TEST RESULTS")
    lines.append("-" * 60)
    test = all_results.get("watson", {})
    lines.extend(_format_test_section(test))
    lines.append(f"Sample size Pine: {test.get('n_pine', 0)}")
    lines.append(f"Sample size Fir: {test.get('n_fir', 0)}")
    lines.append("")

    # 2. Descriptive statistics
    lines.append("2. DESCRIPTIVE STATISTICS")
    lines.append("-" * 60)
    desc = all_results.get("descriptive", {})
    for sp, s in desc.get("summaries", {}).items():
        lines.append(f"{config.SPECIES_LABELS[sp]} trees:")
        lines.append(f"  Mean aspect: {round(s['mean_deg'], 1)} degrees")
        lines.append(f"  Concentration (0=uniform, 1=highly directional): "
                     f"{round(s['concentration'], 3)}")
        lines.append(f"  Circular SD: {round(s['circ_sd_deg'], 1)} degrees")
    lines.append("")
    if "zone_occupancy" in desc:
        lines.append("Zone occupancy:")
        lines.append(desc["zone_occupancy"].to_string(index=False))
        lines.append("")

    # 3. Interpretation notes
    lines.append("3. TEST INTERPRETATION")
    lines.append("-" * 60)
    lines.append("The Watson U² test compares the circular distributions of aspects")
    lines.append("where Pine and Fir trees are found, weighted by tree abundance.")
    lines.append("Red arrows in plots show mean preferred direction.")
    lines.append("Rose diagrams show frequency distribution around the compass.")

    return "\n".join(lines)


def main(data_path: Path = None, make_plots: bool = True) -> dict:
    """Run the full comparison and return every intermediate result.

    Output goes to ``config.OUTPUT_DIR``. Exits with status 1 when the zone
    table is missing or either species has no trees.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    t0 = time.time()
    config.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)

    try:
        zones = load_data(data_path)
        samples_deg = expansion.build_species_samples(zones)
    except (EmptySampleError, FileNotFoundError, KeyError) as exc:
        logger.error("Aborting: %s", exc)
        raise SystemExit(1) from exc

    samples_rad = expansion.convert_samples(samples_deg)

    print("\n--- Running Watson U² test ---")
    test_results = watson_test.run(samples_rad)

    print("--- Running descriptive statistics ---")
    desc_results = descriptive_stats.run(zones, samples_rad)

    all_results = {
        "watson": test_results,
        "descriptive": desc_results,
    }

    if make_plots:
        print("--- Generating plots ---")
        all_results["plots"] = plots.run_all_plots(samples_rad, desc_results["summaries"])

    print("--- Generating report ---")
    report = generate_text_report(all_results)
    report_path = config.OUTPUT_DIR / "watson_u2_report.txt"
    report_path.write_text(report, encoding="utf-8")
    print(f"\nReport saved to: {report_path}")

    elapsed = time.time() - t0
    print(f"\nAnalysis completed in {elapsed:.1f}s")
    print(f"Output directory: {config.OUTPUT_DIR}")

    # Print report to console (handle Windows encoding)
    try:
        print("\n" + report)
    except UnicodeEncodeError:
        print("\n" + report.encode("ascii", errors="replace").decode("ascii"))

    return all_results


if __name__ == "__main__":
    main()
