"""Quick end-to-end run against the live EBI Search service."""

import logging

from rnacentral.config import load_config
from rnacentral.dictionary import RNAcentralDictionary
from rnacentral.io_utils import create_run_dir, flatten_item, save_json

# Known RNAcentral ids (HOTAIR plus three other species/types).
LOOKUP_IDS = [
    "https://www.rnacentral.org/rna/URS0000301B08_9606",
    "https://www.rnacentral.org/rna/URS0000DDDDBA_720",
    "https://www.rnacentral.org/rna/URS0000772E1D_1458438",
    "https://www.rnacentral.org/rna/URS0000A8C125_9606",
]
SEARCH_TEXT = "tp53"


def build_table(items: list[dict]):
    """Turn entry/match dicts into a flat DataFrame, one row per item."""
    import pandas as pd

    df = pd.DataFrame([flatten_item(item) for item in items])
    if df.empty:
        return df
    return df.drop_duplicates(subset="id").reset_index(drop=True)


def setup_logging(run_dir) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        handlers=[
            logging.FileHandler(run_dir / "lookup.log", mode="w"),
            logging.StreamHandler(),
        ],
    )
    # Suppress logging from noisy libraries
    for noisy_logger in ["urllib3", "requests"]:
        logging.getLogger(noisy_logger).setLevel(logging.WARNING)


def main() -> None:
    """Run one id lookup and one text search, then save the run artifacts."""
    from datetime import datetime

    run_dir = create_run_dir("runs")
    setup_logging(run_dir)
    logger = logging.getLogger("run_lookup")

    start_time = datetime.now()
    dictionary = RNAcentralDictionary(load_config())

    # Specific ids, sorted by main term, first page of 5.
    entries = dictionary.get_entries(
        {"filter": {"id": LOOKUP_IDS}, "sort": "str", "page": 1, "perPage": 5}
    )["items"]
    # Free-text search, first page of 20.
    matches = dictionary.get_matches_for_text(
        SEARCH_TEXT, {"page": 1, "perPage": 20})["items"]

    entries_json_path = run_dir / "entries.json"
    save_json(entries, entries_json_path)
    matches_json_path = run_dir / "matches.json"
    save_json(matches, matches_json_path)

    entries_csv_path = run_dir / "entries.csv"
    build_table(entries).to_csv(entries_csv_path, index=False)
    matches_csv_path = run_dir / "matches.csv"
    build_table(matches).to_csv(matches_csv_path, index=False)

    end_time = datetime.now()
    summary = {
        "ids_requested": len(LOOKUP_IDS),
        "entries_found": len(entries),
        "search_text": SEARCH_TEXT,
        "matches_found": len(matches),
        "started_at": start_time.isoformat(),
        "ended_at": end_time.isoformat(),
        "duration_seconds": (end_time - start_time).total_seconds(),
    }
    save_json(summary, run_dir / "run_summary.json")

    logger.info("Entries: %d of %d ids", len(entries), len(LOOKUP_IDS))
    logger.info("Matches for %r: %d", SEARCH_TEXT, len(matches))
    logger.info("Saved entries: %s, %s", entries_json_path, entries_csv_path)
    logger.info("Saved matches: %s, %s", matches_json_path, matches_csv_path)


if __name__ == "__main__":
    main()
