from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Iterable, List, Optional


@dataclass
class Process:
    """
    One simulated CPU-bound process.

    ``waiting_time`` and ``turnaround_time`` are outputs: they stay ``None``
    until an engine has scheduled the batch the process belongs to.
    """

    pid: str
    arrival_time: int
    burst_time: int
    priority: Optional[int] = None
    waiting_time: Optional[int] = field(default=None, compare=False)
    turnaround_time: Optional[int] = field(default=None, compare=False)


def clone_processes(processes: Iterable[Process]) -> List[Process]:
    """
    Fresh copies of the given records with the output fields cleared.
    """
    return [replace(p, waiting_time=None, turnaround_time=None) for p in processes]


@dataclass
class ScheduledSlice:
    """
    One contiguous slice of execution for a process in the Gantt chart.
    """

    pid: str
    start_time: int
    end_time: int

    @property
    def duration(self) -> int:
        return self.end_time - self.start_time


@dataclass
class SystemMetrics:
    cpu_busy_time: int
    makespan: int
    throughput: float
    cpu_utilization: float


@dataclass
class ScheduleResult:
    algorithm: str
    quantum: Optional[int]
    processes: List[Process] = field(default_factory=list)
    timeline: List[ScheduledSlice] = field(default_factory=list)
    end_time: int = 0
    system: Optional[SystemMetrics] = None
