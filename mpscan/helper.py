"""Helpers that assemble scan targets and report scan results."""

from __future__ import annotations

import json
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from pathlib import Path
from typing import Iterable, Sequence

from mpscan.connection import print_banner
from mpscan.scan import MAX_PORT, MIN_PORT, Summary

DEFAULT_TARGET = "localhost"
DEFAULT_START_PORT = 1
DEFAULT_END_PORT = 1024
JSON_SUFFIX = "-mpscan.json"


def create_targets(target: str, targets: Iterable[str]) -> list[str]:
    """Combine the single target with the target list, defaulting to localhost."""
    results = [target] if target else []
    results.extend(targets)
    return results or [DEFAULT_TARGET]


def validate_port_range(start_port: int, end_port: int) -> tuple[int, int]:
    """Replace start or end ports outside 1-65535 with their defaults."""
    if not MIN_PORT <= start_port <= MAX_PORT:
        start_port = DEFAULT_START_PORT
    if not MIN_PORT <= end_port <= MAX_PORT:
        end_port = DEFAULT_END_PORT
    return start_port, end_port


def write_json(summaries: Sequence[Summary], directory: str | Path | None = None) -> Path:
    """Write the summaries to a timestamped JSON file and return its path."""
    folder = Path(directory) if directory is not None else Path.cwd()
    filename = datetime.now().strftime("%Y%m%d-%H%M%S") + JSON_SUFFIX
    path = folder / filename
    data = [summary.to_dict() for summary in summaries]
    path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    return path


def print_results(summaries: Sequence[Summary], timeout: int, output_json: bool) -> None:
    """Print banners and summaries, optionally saving the summaries as JSON."""
    print("\n[BANNERS]\n")
    if summaries:
        with ThreadPoolExecutor(max_workers=len(summaries)) as pool:
            for future in [pool.submit(print_banner, summary, timeout) for summary in summaries]:
                future.result()

    print("\n[SCAN SUMMARY]\n")
    for summary in summaries:
        print(f"{summary}\n")

    if output_json:
        try:
            path = write_json(summaries)
        except OSError as err:
            print("Error writing to file:", err)
            return
        print(f"[JSON OUTPUT SAVED: {path.name}]")