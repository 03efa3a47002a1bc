import logging

import pytest

from ossim import SimulationConfig
from ossim.loader import load_context, load_processes, load_programs, load_run_steps
from paging import simulate_paging


@pytest.fixture
def data_dir(tmp_path):
    (tmp_path / "Process.txt").write_text(
        "P1 0 5 program1\n"
        "\n"
        "P2 2 3 program2\n"
        "broken line\n"
        "P3 x 3 program2\n"
        "P1 4 4 program2\n",
        encoding="utf-8",
    )
    (tmp_path / "run.txt").write_text(
        "program1\n"
        "0 jump 1.5\n"
        "2 jump 9\n"
        "4 end\n"
        "program2\n"
        "0 jump 4.25\n"
        "1 结束 -1\n",
        encoding="utf-8",
    )
    (tmp_path / "program.txt").write_text(
        "orphan 3\n"
        "FName program1\n"
        "main 2\n"
        "init 3.5\n"
        "FName program2\n"
        "main nope\n"
        "FName program3\n",
        encoding="utf-8",
    )
    return tmp_path


def test_load_processes(data_dir, caplog):
    with caplog.at_level(logging.WARNING):
        registry = load_processes(str(data_dir / "Process.txt"))

    assert [(p.name, p.arrival_time, p.run_time, p.program_name) for p in registry] == [
        ("P1", 0, 5, "program1"),
        ("P2", 2, 3, "program2"),
    ]
    # broken line, non-integer arrival, duplicate name
    assert len(caplog.records) == 3


def test_load_run_steps(data_dir):
    steps = load_run_steps(str(data_dir / "run.txt"))

    assert [(s.program_name, s.time_offset, s.address) for s in steps] == [
        ("program1", 0, 1.5),
        ("program1", 2, 9.0),
        ("program1", 4, None),
        ("program2", 0, 4.25),
        ("program2", 1, None),
    ]
    assert steps[2].is_end


def test_load_programs(data_dir, caplog):
    with caplog.at_level(logging.WARNING):
        catalog = load_programs(str(data_dir / "program.txt"))

    assert [p.name for p in catalog] == ["program1", "program2", "program3"]
    assert catalog.get("program1").total_size == pytest.approx(5.5)
    assert catalog.get("program2").functions == []
    assert len(caplog.records) == 2


def test_load_context(data_dir):
    context = load_context(str(data_dir))
    assert len(context.registry) == 2
    assert len(context.steps) == 5
    assert len(context.catalog) == 3


def test_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_context(str(tmp_path))


def test_zero_run_time_skipped(tmp_path, caplog):
    path = tmp_path / "Process.txt"
    path.write_text("P1 0 0 program1\nP2 1 3 program1\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        registry = load_processes(str(path))

    assert [p.name for p in registry] == ["P2"]
    assert len(caplog.records) == 1


def test_non_finite_address_skipped(tmp_path, caplog):
    path = tmp_path / "run.txt"
    path.write_text("program1\n0 jump nan\n1 jump inf\n2 jump -2\n3 end\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        steps = load_run_steps(str(path))

    assert [(s.time_offset, s.address) for s in steps] == [(2, -2.0), (3, None)]
    assert len(caplog.records) == 2


@pytest.mark.parametrize("size", ["nan", "inf", "-inf", "-1"])
def test_bad_function_size_skipped(tmp_path, caplog, size):
    path = tmp_path / "program.txt"
    path.write_text(f"FName program1\nmain {size}\ninit 2\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        catalog = load_programs(str(path))

    assert [f.name for f in catalog.get("program1").functions] == ["init"]
    assert len(caplog.records) == 1


def test_non_finite_size_does_not_reach_paging(tmp_path):
    (tmp_path / "Process.txt").write_text("P1 0 2 program1\n", encoding="utf-8")
    (tmp_path / "run.txt").write_text("program1\n0 jump 1\n1 end\n", encoding="utf-8")
    (tmp_path / "program.txt").write_text("FName program1\nmain nan\n", encoding="utf-8")

    report = simulate_paging(load_context(str(tmp_path)), SimulationConfig())
    assert report.requirements == {"program1": 0}
