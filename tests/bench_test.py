import csv

import pytest

from linkedvector import cli
from linkedvector.bench import human_bytes, measure, run_suite, sweep, write_csv
from linkedvector.bench.report import deque_mem, list_mem
from linkedvector.bench import timing


def test_human_bytes():
    assert human_bytes(0) == "0.00 B"
    assert human_bytes(1023) == "1023.00 B"
    assert human_bytes(1536) == "1.50 KB"
    assert human_bytes(3 * 1024 ** 2) == "3.00 MB"
    assert human_bytes(1024 ** 6) == "1024.00 PB"


def test_measure_returns_last_result():
    avg, std, result = measure(lambda x: x * 2, 21, iterations=3)
    assert result == 42
    assert avg >= 0.0
    assert std >= 0.0
    with pytest.raises(ValueError):
        measure(lambda: None, iterations=0)


def test_operations_agree_across_containers():
    count = 11
    for name in timing.CONTAINERS:
        c = timing.BUILDERS[name](count, 7)
        assert len(c) == count
        assert timing.ACCESSORS[name](c) == 7

    values = list(range(count))
    lst = values[:]
    dq = timing.build_deque(0, None)
    dq.extend(values)
    il = timing.build_indexed_list(0, None)
    for v in values:
        il.push_back(v)

    timing.delete_list(lst, 5)
    timing.delete_deque(dq, 5)
    timing.delete_indexed_list(il, 5)
    assert lst == list(dq) == il.to_list()


def test_memory_models():
    used, real = list_mem([1, 2, 3], item_size=10)
    assert used == 30
    assert real >= used
    assert deque_mem(timing.build_deque(4, 0), item_size=8) == ((8 + 16) * 4, (8 + 16) * 4)


def test_run_suite_rows():
    rows = run_suite(50, 1, iterations=2)
    assert len(rows) == 9
    assert {r["container"] for r in rows} == set(timing.CONTAINERS)
    assert {r["operation"] for r in rows} == {"construct", "access", "delete"}
    il_delete = [r for r in rows if r["container"] == "IndexedList" and r["operation"] == "delete"][0]
    # Deleting keeps the slot array at its high-water mark.
    il_construct = [r for r in rows if r["container"] == "IndexedList" and r["operation"] == "construct"][0]
    assert il_delete["used"] > il_construct["used"]


def test_write_csv(tmp_path):
    path = tmp_path / "bench.csv"
    rows = sweep(10, 2, iterations=1)
    assert write_csv(str(path), rows) == len(rows) == 18

    with open(path, newline="") as f:
        out = list(csv.reader(f))
    assert out[0][0] == "Container"
    assert len(out) == 19
    assert {r[2] for r in out[1:]} == {"10", "20"}


def test_cli_demo(capsys):
    cli.main(["demo"])
    out = capsys.readouterr().out
    assert "pop_front() -> 300" in out
    assert "delete(1) -> 200" in out
    assert "IndexedList([100, 400])" in out


def test_cli_report(tmp_path, capsys):
    path = tmp_path / "r.csv"
    cli.main(["report", "--path", str(path), "--base", "5", "--steps", "1", "--iterations", "1"])
    assert "Wrote 9 rows" in capsys.readouterr().out
    assert path.exists()


def test_cli_bench(capsys):
    cli.main(["bench", "--elements", "20", "--payload-count", "3", "--payload-size", "64", "--iterations", "1"])
    out = capsys.readouterr().out
    assert "Benchmark - Large payload" in out
    assert "Benchmark - int" in out
    assert out.strip().endswith("Done.")
