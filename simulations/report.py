# simulations/report.py

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List, Optional, Sequence, Union

from coupon_collector import histogram_pairs


RESULTS_HEADER = "Number of Runs for Full Set,Occurences"


def default_results_filename(now: Optional[datetime] = None) -> str:
    """
    results-YYYY-MM-DD-HH-MM-SS.txt for the given (or current) time.
    """
    now = now or datetime.now()
    return "results-" + now.strftime("%Y-%m-%d-%H-%M-%S") + ".txt"


def format_results(histogram: Sequence[int]) -> List[str]:
    lines = [RESULTS_HEADER]
    for runs, occurrences in histogram_pairs(histogram):
        lines.append(f"{runs},{occurrences}")
    return lines


def write_results(histogram: Sequence[int], path: Union[str, Path]) -> Path:
    """
    Write the histogram as a two-column comma-separated text file, one line
    per run count from 1 to len(histogram).
    """
    path = Path(path)
    with path.open("w", encoding="utf-8") as f:
        for line in format_results(histogram):
            f.write(line + "\n")
    return path
