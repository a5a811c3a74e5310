from __future__ import annotations

from typing import Dict, List, Tuple

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .models import ScheduledSlice

PALETTE = ["red", "green", "yellow", "blue", "magenta", "cyan"]


def build_rich_gantt(slices: List[ScheduledSlice]) -> Tuple[Panel, str]:
    """
    Build a Rich Panel with one coloured cell per simulated time unit, and a
    line of time marks at every slice boundary.

    Idle stretches (before the first arrival, or between bursts of arrivals)
    are left blank.
    """
    if not slices:
        return Panel("No execution", title="Gantt Chart"), ""

    slices = sorted(slices, key=lambda s: (s.start_time, s.end_time))

    colors: Dict[str, str] = {}
    bar = Text()
    labels = Text()
    marks = ["0"]
    cursor = 0

    for sl in slices:
        if sl.start_time > cursor:
            gap = sl.start_time - cursor
            bar.append(" " * gap)
            labels.append(" " * gap)
            marks.append(f"{sl.start_time:>{gap + 2}}")

        color = colors.setdefault(sl.pid, PALETTE[len(colors) % len(PALETTE)])
        width = max(1, sl.duration)
        bar.append(" " * width, style=f"on {color}")
        labels.append(sl.pid[:width].ljust(width), style="bold")
        marks.append(f"{sl.end_time:>{width + 2}}")
        cursor = sl.end_time

    grid = Table.grid(padding=(0, 0))
    grid.add_row(bar)
    grid.add_row(labels)

    return Panel.fit(grid, title="Gantt Chart"), "".join(marks)
