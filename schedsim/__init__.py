"""
Scheduler simulation package.

Computes waiting and turnaround times for a fixed batch of CPU-bound
processes under FCFS, SRTF, Round Robin and static-priority scheduling,
and provides a command-line interface for running and comparing them.
"""

from .algorithms import (
    ALGORITHMS,
    compute_turnaround,
    run_algorithm,
    run_fcfs,
    run_priority,
    run_round_robin,
    run_srtf,
)
from .errors import (
    InvalidQuantumError,
    SchedsimError,
    SimulationError,
    UnknownAlgorithmError,
    WorkloadError,
)
from .models import Process, ScheduledSlice, ScheduleResult, clone_processes

__all__ = [
    "ALGORITHMS",
    "InvalidQuantumError",
    "Process",
    "ScheduleResult",
    "ScheduledSlice",
    "SchedsimError",
    "SimulationError",
    "UnknownAlgorithmError",
    "WorkloadError",
    "clone_processes",
    "compute_turnaround",
    "run_algorithm",
    "run_fcfs",
    "run_priority",
    "run_round_robin",
    "run_srtf",
]
