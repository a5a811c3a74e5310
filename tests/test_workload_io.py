from pathlib import Path

import pytest

from schedsim.errors import WorkloadError
from schedsim.models import Process
from schedsim.workload_io import load_workload


def test_load_json(tmp_path: Path):
    p = tmp_path / "w.json"
    p.write_text('[{"pid":"A","arrival_time":0,"burst_time":3,"priority":1},'
                 '{"pid":"B","arrival_time":1,"burst_time":2}]')
    procs = load_workload(p)
    assert isinstance(procs[0], Process)
    assert procs[0].priority == 1
    assert procs[1].priority is None
    assert procs[1].arrival_time == 1
    assert procs[1].waiting_time is None


def test_load_csv(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time,priority\nA,0,3,1\nB,1,2,\n")
    procs = load_workload(p)
    assert [x.pid for x in procs] == ["A", "B"]
    assert procs[0].burst_time == 3
    assert procs[1].priority is None


def test_file_order_is_preserved(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time\nZ,5,1\nA,0,1\n")
    assert [x.pid for x in load_workload(p)] == ["Z", "A"]


@pytest.mark.parametrize(
    "name, content",
    [
        ("w.txt", "A 0 3"),
        ("w.json", "{not json"),
        ("w.json", '{"pid": "A"}'),
        ("w.json", '[{"pid": "A", "arrival_time": 0}]'),
        ("w.json", '[{"pid": "A", "arrival_time": 1.9, "burst_time": 2.7}]'),
        ("w.json", '[{"pid": "B", "arrival_time": true, "burst_time": 3}]'),
        ("w.json", '[{"pid": "C", "arrival_time": 0, "burst_time": 3, "priority": 1.5}]'),
        ("w.json", '[{"pid": "D", "arrival_time": 0, "burst_time": 3, "priority": false}]'),
        ("w.json", b"\xff\xfe"),
        ("w.csv", "pid,arrival_time,burst_time\nA,zero,3\n"),
        ("w.csv", "pid,arrival_time,burst_time\nA,0,2.5\n"),
        ("w.csv", "pid,arrival_time,burst_time,priority\nA,0,3,high\n"),
        ("w.csv", b"pid,arrival_time,burst_time\n\xff\xfe,0,3\n"),
    ],
)
def test_bad_workloads(tmp_path: Path, name, content):
    p = tmp_path / name
    if isinstance(content, bytes):
        p.write_bytes(content)
    else:
        p.write_text(content)
    with pytest.raises(WorkloadError):
        load_workload(p)


def test_whole_number_strings_are_accepted(tmp_path: Path):
    p = tmp_path / "w.csv"
    p.write_text("pid,arrival_time,burst_time,priority\nA, 2 ,+3, -1\n")
    [proc] = load_workload(p)
    assert (proc.arrival_time, proc.burst_time, proc.priority) == (2, 3, -1)
