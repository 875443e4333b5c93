"""
Report how the store dataset lines up with the country boundaries.

Lists country codes that have stores but no polygon (dropped from the
choropleth) and the number of polygons shown with zero stores.
"""
import sys
from pathlib import Path

from store_browser.config.io import load_global_config
from store_browser.core.boundaries import load_country_boundaries
from store_browser.core.choropleth import join_country_counts, unmatched_country_codes
from store_browser.core.dataset_loader import load_store_dataset
from store_browser.core.derivations import STORE_COUNT_COL, country_aggregate
from store_browser.core.exceptions import StoreBrowserError

BASE_DIR = Path(__file__).parent.parent
CONFIG_DIR = BASE_DIR / "config"


def check_country_coverage() -> int:
    cfg = load_global_config(CONFIG_DIR)

    try:
        dataset = load_store_dataset(cfg.data_url, timeout=cfg.request_timeout)
        boundaries = load_country_boundaries(cfg.boundaries_url, timeout=cfg.request_timeout)
    except StoreBrowserError as e:
        print(f"Error: {e}")
        return 1

    aggregate = country_aggregate(dataset)
    joined = join_country_counts(boundaries, aggregate)
    dropped = unmatched_country_codes(boundaries, aggregate)

    print(f"{'Stores loaded':<30} | {len(dataset)}")
    print(f"{'Rows rejected':<30} | {dataset.n_rejected}")
    print(f"{'Countries with stores':<30} | {len(aggregate)}")
    print(f"{'Polygons':<30} | {len(joined)}")
    print(f"{'Polygons with zero stores':<30} | {int((joined[STORE_COUNT_COL] == 0).sum())}")
    print("-" * 50)

    if not dropped:
        print("Every country with stores has a polygon.")
        return 0

    print(f"{'COUNTRY':<10} | {'STORES':<8} | STATUS")
    for code in dropped:
        print(f"{code:<10} | {int(aggregate[code]):<8} | no polygon (not drawn)")
    return 0


if __name__ == "__main__":
    sys.exit(check_country_coverage())
