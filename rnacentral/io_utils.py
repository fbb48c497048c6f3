"""I/O helpers for lookup run directories and output files."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path


def create_run_dir(base_dir: str = "runs") -> Path:
    """Create and return a timestamped run directory."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = Path(base_dir) / f"lookup_{timestamp}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir


def save_json(data, path: str | Path) -> None:
    """Save dictionary results as pretty-printed JSON."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)


def flatten_item(item: dict) -> dict:
    """Flatten one entry/match into a single table row."""
    z = item.get("z", {})
    terms = [t["str"] for t in item.get("terms", [])]
    return {
        "id": item["id"],
        "str": item.get("str", terms[0] if terms else ""),
        "type": item.get("type"),
        "descr": item.get("descr"),
        "RNAtype": z.get("RNAtype"),
        "species": z.get("species"),
        "databases": ";".join(z.get("databases", [])),
        "obsolete": z.get("obsolete"),
        "synonyms": ";".join(terms[1:]),
    }
