from __future__ import annotations

import csv
import json
import logging
from pathlib import Path
from typing import List

from .errors import WorkloadError
from .models import Process

logger = logging.getLogger(__name__)


def load_workload(path: str | Path) -> List[Process]:
    """
    Load a workload from a JSON or CSV file into a list of Process objects.

    File order is preserved; FCFS and Round Robin depend on it.
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        processes = _load_json(path)
    elif suffix == ".csv":
        processes = _load_csv(path)
    else:
        raise WorkloadError(f"Unsupported workload format: {suffix} (use .json or .csv)")

    logger.info("Loaded %d process(es) from %s", len(processes), path)
    return processes


def _load_json(path: Path) -> List[Process]:
    with path.open("r", encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as exc:
            raise WorkloadError(f"{path}: not valid JSON ({exc})") from exc
        except UnicodeDecodeError as exc:
            raise WorkloadError(f"{path}: not UTF-8 text ({exc.reason})") from exc

    if not isinstance(raw, list):
        raise WorkloadError("JSON workload must be a list of process objects")

    return [_process_from_mapping(entry) for entry in raw]


def _load_csv(path: Path) -> List[Process]:
    processes: List[Process] = []
    with path.open("r", encoding="utf-8", newline="") as f:
        try:
            for row in csv.DictReader(f):
                processes.append(_process_from_mapping(row))
        except UnicodeDecodeError as exc:
            raise WorkloadError(f"{path}: not UTF-8 text ({exc.reason})") from exc
    return processes


def _whole_number(value) -> int:
    # JSON gives int (or bool/float, both rejected); CSV cells are strings.
    if isinstance(value, bool):
        raise ValueError(f"expected an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.lstrip("+-").isdigit():
            return int(text)
    raise ValueError(f"expected an integer, got {value!r}")


def _process_from_mapping(mapping) -> Process:
    try:
        pid = str(mapping["pid"]).strip()
        arrival_time = _whole_number(mapping["arrival_time"])
        burst_time = _whole_number(mapping["burst_time"])
    except (KeyError, TypeError, ValueError) as exc:
        raise WorkloadError(f"Invalid process entry: {mapping!r}") from exc

    priority_val = mapping.get("priority")
    if isinstance(priority_val, str):
        priority_val = priority_val.strip()
    try:
        priority = _whole_number(priority_val) if priority_val not in (None, "") else None
    except ValueError as exc:
        raise WorkloadError(f"Invalid priority in entry: {mapping!r}") from exc

    logger.debug("Parsed process %s (arrival=%d, burst=%d, priority=%s)", pid, arrival_time, burst_time, priority)
    return Process(
        pid=pid,
        arrival_time=arrival_time,
        burst_time=burst_time,
        priority=priority,
    )
