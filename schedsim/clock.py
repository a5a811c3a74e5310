from __future__ import annotations

from typing import List, Optional

from .errors import SimulationError
from .models import Process, ScheduledSlice


class SimulationClock:
    """
    Current-time cursor plus remaining-burst counters for one engine run.

    Processes are addressed by their index in the list the clock was built
    from, so every scan below walks the list in its original order.
    """

    def __init__(self, processes: List[Process]) -> None:
        self.processes = processes
        self.time = 0
        self.remaining: List[int] = [p.burst_time for p in processes]

    def is_runnable(self, i: int) -> bool:
        return self.remaining[i] > 0 and self.processes[i].arrival_time <= self.time

    def runnable(self) -> List[int]:
        return [i for i in range(len(self.processes)) if self.is_runnable(i)]

    def finished(self) -> bool:
        return not any(self.remaining)

    def next_arrival_after(self, t: int) -> Optional[int]:
        future = [
            p.arrival_time
            for p, rem in zip(self.processes, self.remaining)
            if rem > 0 and p.arrival_time > t
        ]
        return min(future) if future else None

    def advance_to_next_arrival(self) -> int:
        """
        Jump over idle time to the earliest arrival among unfinished processes.

        Never moves the clock backwards.
        """
        pending = [p.arrival_time for p, rem in zip(self.processes, self.remaining) if rem > 0]
        if not pending:
            raise SimulationError("No unfinished process left to wait for")
        self.time = max(self.time, min(pending))
        return self.time

    def run(self, i: int, amount: int) -> ScheduledSlice:
        """
        Execute process ``i`` for ``amount`` time units starting now.
        """
        if amount <= 0 or amount > self.remaining[i]:
            raise SimulationError(
                f"Cannot run {self.processes[i].pid!r} for {amount} (remaining {self.remaining[i]})"
            )
        start = self.time
        self.remaining[i] -= amount
        self.time += amount
        return ScheduledSlice(pid=self.processes[i].pid, start_time=start, end_time=self.time)

    def completion_wait(self, i: int) -> int:
        """
        Waiting time of process ``i`` if it completes at the current time.
        """
        p = self.processes[i]
        return max(0, self.time - p.burst_time - p.arrival_time)
