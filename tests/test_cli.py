import json
from pathlib import Path

import pytest

from schedsim.cli import main
from schedsim.gantt import build_rich_gantt
from schedsim.metrics import summarize_process_metrics
from schedsim.models import Process, ScheduledSlice


@pytest.fixture
def workload(tmp_path: Path) -> Path:
    p = tmp_path / "textbook.json"
    p.write_text(
        json.dumps(
            [
                {"pid": "P1", "arrival_time": 0, "burst_time": 8, "priority": 3},
                {"pid": "P2", "arrival_time": 1, "burst_time": 4, "priority": 1},
                {"pid": "P3", "arrival_time": 2, "burst_time": 9, "priority": 4},
                {"pid": "P4", "arrival_time": 3, "burst_time": 5, "priority": 2},
            ]
        )
    )
    return p


def test_run_prints_tables(workload, capsys):
    assert main(["run", "-a", "srtf", "-w", str(workload)]) == 0
    out = capsys.readouterr().out
    assert "SRTF" in out
    assert "Per-process metrics" in out
    assert "6.50" in out  # average waiting (9 + 0 + 15 + 2) / 4


def test_run_round_robin_shows_quantum(workload, capsys):
    assert main(["run", "-a", "rr", "-q", "3", "-w", str(workload), "--no-gantt"]) == 0
    out = capsys.readouterr().out
    assert "Quantum:" in out
    assert "Gantt Chart" not in out


def test_compare_lists_every_algorithm(workload, capsys):
    assert main(["compare", "-w", str(workload)]) == 0
    out = capsys.readouterr().out
    for label in ("FCFS", "SRTF", "Round", "Priority"):
        assert label in out


def test_bad_quantum_exits_with_error(workload, capsys):
    assert main(["run", "-a", "rr", "-q", "0", "-w", str(workload)]) == 2
    assert "quantum" in capsys.readouterr().err


def test_unknown_algorithm_exits_with_error(workload, capsys):
    assert main(["run", "-a", "lottery", "-w", str(workload)]) == 2
    assert "Unknown algorithm" in capsys.readouterr().err


def test_missing_workload_file(tmp_path, capsys):
    assert main(["run", "-a", "fcfs", "-w", str(tmp_path / "nope.json")]) == 2


def test_summary_averages():
    procs = [
        Process("A", arrival_time=0, burst_time=2, waiting_time=0, turnaround_time=2),
        Process("B", arrival_time=0, burst_time=2, waiting_time=2, turnaround_time=4),
    ]
    assert summarize_process_metrics(procs) == {"avg_waiting": 1.0, "avg_turnaround": 3.0}


def test_gantt_marks_slice_boundaries():
    _, marks = build_rich_gantt(
        [ScheduledSlice("P1", 2, 4), ScheduledSlice("P2", 4, 5)]
    )
    assert marks.split() == ["0", "2", "4", "5"]


def test_gantt_without_slices():
    _, marks = build_rich_gantt([])
    assert marks == ""


def test_undecodable_workload_exits_with_error(tmp_path, capsys):
    p = tmp_path / "w.csv"
    p.write_bytes(b"pid,arrival_time,burst_time\n\xff\xfe,0,3\n")
    assert main(["run", "-a", "fcfs", "-w", str(p)]) == 2
    assert "UTF-8" in capsys.readouterr().err


def test_fractional_times_exit_with_error(tmp_path, capsys):
    p = tmp_path / "w.json"
    p.write_text('[{"pid": "A", "arrival_time": 1.9, "burst_time": 2.7}]')
    assert main(["run", "-a", "srtf", "-w", str(p)]) == 2
    assert "Invalid process entry" in capsys.readouterr().err
