from __future__ import annotations

from typing import List, Optional

from .errors import InvalidQuantumError, WorkloadError
from .models import Process


def _is_int(value) -> bool:
    # bool is an int subclass but never a meaningful time value.
    return isinstance(value, int) and not isinstance(value, bool)


def validate_processes(processes: List[Process]) -> None:
    """
    Reject a batch that no engine can schedule meaningfully.

    Raises ``WorkloadError`` for an empty batch, non-integer fields, a
    negative arrival, a non-positive burst, a pid that is not a non-empty
    string, or a repeated pid.
    """
    if not processes:
        raise WorkloadError("Process list is empty; nothing to schedule")

    seen: set[str] = set()
    for p in processes:
        if not isinstance(p.pid, str) or not p.pid:
            raise WorkloadError(f"Process pid must be a non-empty string (got {p.pid!r})")
        if not _is_int(p.arrival_time) or not _is_int(p.burst_time):
            raise WorkloadError(f"Process {p.pid!r}: arrival_time and burst_time must be integers")
        if p.arrival_time < 0:
            raise WorkloadError(f"Process {p.pid!r}: arrival_time must be >= 0 (got {p.arrival_time})")
        if p.burst_time <= 0:
            raise WorkloadError(f"Process {p.pid!r}: burst_time must be > 0 (got {p.burst_time})")
        if p.priority is not None and not _is_int(p.priority):
            raise WorkloadError(f"Process {p.pid!r}: priority must be an integer or empty")
        if p.pid in seen:
            raise WorkloadError(f"Duplicate pid {p.pid!r}")
        seen.add(p.pid)


def validate_quantum(quantum: Optional[int]) -> int:
    if quantum is None or not _is_int(quantum) or quantum <= 0:
        raise InvalidQuantumError(f"Round Robin requires a positive integer quantum (got {quantum!r})")
    return quantum
