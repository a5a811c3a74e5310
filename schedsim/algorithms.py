from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional

from .clock import SimulationClock
from .errors import SimulationError, UnknownAlgorithmError
from .metrics import compute_system_metrics
from .models import Process, ScheduleResult, ScheduledSlice
from .validation import validate_processes, validate_quantum


def compute_turnaround(processes: List[Process]) -> List[Process]:
    """
    Turnaround calculator: ``turnaround_time = burst_time + waiting_time``.

    Only meaningful after an engine has populated ``waiting_time``.
    """
    for p in processes:
        if p.waiting_time is None:
            raise SimulationError(f"Process {p.pid!r} has no waiting time yet; run an engine first")
    for p in processes:
        p.turnaround_time = p.burst_time + p.waiting_time
    return processes


def _append_slice(timeline: List[ScheduledSlice], slice_: ScheduledSlice) -> None:
    # Back-to-back runs of the same process form one slice.
    if timeline and timeline[-1].pid == slice_.pid and timeline[-1].end_time == slice_.start_time:
        timeline[-1].end_time = slice_.end_time
    else:
        timeline.append(slice_)


def _finish(
    algorithm: str,
    processes: List[Process],
    waiting: List[int],
    timeline: List[ScheduledSlice],
    end_time: int,
    quantum: Optional[int] = None,
) -> ScheduleResult:
    for p, wt in zip(processes, waiting):
        p.waiting_time = wt
        p.turnaround_time = None
    compute_turnaround(processes)

    result = ScheduleResult(
        algorithm=algorithm,
        quantum=quantum,
        processes=processes,
        timeline=timeline,
        end_time=end_time,
    )
    compute_system_metrics(result)
    return result


def _fcfs_waiting(processes: List[Process]) -> List[int]:
    # Sequential chain in list order; arrivals after the first are not checked.
    waiting = [processes[0].arrival_time]
    for prev in processes[:-1]:
        waiting.append(waiting[-1] + prev.burst_time)
    return waiting


def _sequential_timeline(processes: List[Process], waiting: List[int]) -> List[ScheduledSlice]:
    return [
        ScheduledSlice(pid=p.pid, start_time=wt, end_time=wt + p.burst_time)
        for p, wt in zip(processes, waiting)
    ]


def run_fcfs(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    First-Come First-Serve (non-preemptive) scheduling.

    Processes run in the order they are given; this engine does not sort.
    The first process waits for its own arrival time and each later one
    waits for everything ahead of it. Arrival times past the first are not
    consulted, so the numbers are only meaningful for input that is already
    in non-decreasing arrival order (or all arrives at 0).
    """
    validate_processes(processes)

    waiting = _fcfs_waiting(processes)
    timeline = _sequential_timeline(processes, waiting)
    end_time = timeline[-1].end_time
    return _finish("FCFS", processes, waiting, timeline, end_time)


def run_srtf(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Shortest Remaining Time First (preemptive SJF).

    At every time unit the arrived, unfinished process with the least remaining
    work runs; ties go to the process listed first. The selected process keeps
    the CPU until it completes or another process arrives, since nothing else
    can change the choice in between.
    """
    validate_processes(processes)

    clock = SimulationClock(processes)
    waiting = [0] * len(processes)
    timeline: List[ScheduledSlice] = []

    while not clock.finished():
        ready = clock.runnable()
        if not ready:
            clock.advance_to_next_arrival()
            continue

        # min() keeps the first of equal keys, so ties favour the lower index.
        current = min(ready, key=lambda i: clock.remaining[i])

        run_time = clock.remaining[current]
        nxt_arrival = clock.next_arrival_after(clock.time)
        if nxt_arrival is not None:
            run_time = min(run_time, nxt_arrival - clock.time)

        _append_slice(timeline, clock.run(current, run_time))

        if clock.remaining[current] == 0:
            waiting[current] = clock.completion_wait(current)

    return _finish("SRTF", processes, waiting, timeline, clock.time)


def run_round_robin(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Round Robin scheduling with a fixed time quantum.

    Each pass walks the process list in its original order and gives every
    arrived, unfinished process up to ``quantum`` time units. There is no
    FIFO ready queue: a process arriving mid-pass gets its turn when the scan
    reaches its position, not behind the processes already in rotation.
    """
    validate_processes(processes)
    quantum = validate_quantum(quantum)

    clock = SimulationClock(processes)
    waiting = [0] * len(processes)
    timeline: List[ScheduledSlice] = []

    while not clock.finished():
        progressed = False

        for i in range(len(processes)):
            if not clock.is_runnable(i):
                continue

            progressed = True
            run_time = min(clock.remaining[i], quantum)
            _append_slice(timeline, clock.run(i, run_time))

            if clock.remaining[i] == 0:
                waiting[i] = clock.completion_wait(i)

        if not progressed:
            clock.advance_to_next_arrival()

    return _finish("Round Robin", processes, waiting, timeline, clock.time, quantum=quantum)


def _pid_key(pid: str):
    # Digit runs compare numerically, so P2 sorts before P10.
    parts = re.split(r"(\d+)", pid)
    return tuple(int(part) if i % 2 else part for i, part in enumerate(parts)), pid


def priority_key(p: Process):
    # Treat missing priority as lowest priority.
    prio = p.priority if p.priority is not None else float("inf")
    return (prio, p.arrival_time, _pid_key(p.pid))


def run_priority(processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Static Priority scheduling (non-preemptive).

    Lower numeric priority value means higher priority; ties break by earlier
    arrival, then pid. The caller's list is reordered in place and then
    timed exactly like FCFS.
    """
    validate_processes(processes)

    processes.sort(key=priority_key)

    waiting = _fcfs_waiting(processes)
    timeline = _sequential_timeline(processes, waiting)
    end_time = timeline[-1].end_time
    return _finish("Priority (static)", processes, waiting, timeline, end_time)


ALGORITHMS: Dict[str, Callable[..., ScheduleResult]] = {
    "fcfs": run_fcfs,
    "srtf": run_srtf,
    "rr": run_round_robin,
    "priority": run_priority,
}


def run_algorithm(name: str, processes: List[Process], quantum: Optional[int] = None) -> ScheduleResult:
    """
    Dispatch to the requested algorithm. Quantum is only used by round-robin.
    """
    name = name.lower()
    if name not in ALGORITHMS:
        raise UnknownAlgorithmError(
            f"Unknown algorithm '{name}' (choose from {', '.join(ALGORITHMS)})"
        )

    func = ALGORITHMS[name]
    return func(processes, quantum=quantum)
