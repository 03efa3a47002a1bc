import pytest

from schedulers import FCFSScheduler, run_scheduler
from ossim import SimulationContext


def schedule(registry):
    scheduler = FCFSScheduler()
    for p in registry:
        scheduler.add_process(p)
    return scheduler.run()


def test_two_process_example(two_processes):
    report = schedule(two_processes).report()

    p1 = report.row("P1")
    assert (p1.first_scheduled, p1.finish_time, p1.turnaround_time) == (0, 5, 5)
    assert p1.weighted_turnaround_time == pytest.approx(1.0)

    p2 = report.row("P2")
    assert (p2.first_scheduled, p2.finish_time, p2.turnaround_time) == (5, 8, 6)
    assert p2.weighted_turnaround_time == pytest.approx(2.0)


def test_equal_arrivals_keep_registry_order(registry_of):
    registry = registry_of(("B", 1, 2, "x"), ("A", 1, 4, "x"), ("C", 0, 1, "x"))
    report = schedule(registry).report()

    assert [row.name for row in report.rows] == ["C", "B", "A"]
    assert [s.name for s in report.slices] == ["C", "B", "A"]
    assert report.row("B").first_scheduled == 1
    assert report.row("A").first_scheduled == 3


def test_idle_gap_starts_at_arrival(registry_of):
    registry = registry_of(("P1", 0, 2, "x"), ("P2", 10, 3, "x"))
    scheduler = schedule(registry)
    report = scheduler.report()

    assert report.row("P2").first_scheduled == 10
    assert report.row("P2").finish_time == 13
    assert any(e["event_type"] == "idle" for e in scheduler.events)


def test_start_and_finish_properties(registry_of):
    registry = registry_of(("a", 3, 4, "x"), ("b", 0, 7, "x"), ("c", 20, 1, "x"), ("d", 5, 2, "x"))
    for row in schedule(registry).report().rows:
        assert row.first_scheduled >= row.arrival_time
        assert row.finish_time == row.first_scheduled + row.run_time


def test_processes_marked_finished(two_processes):
    scheduler = schedule(two_processes)
    assert all(p.status == "finished" for p in scheduler.processes)
    assert all(p.remaining_time == 0 for p in scheduler.processes)
    assert [p.name for p in scheduler.finished] == ["P1", "P2"]


def test_run_scheduler_leaves_context_untouched(context):
    first = run_scheduler(context, "fcfs").report()
    again = run_scheduler(context, "FCFS").report()

    assert first.rows == again.rows
    for p in context.registry:
        assert p.status == "waiting"
        assert p.first_scheduled is None
        assert p.turnaround_time == 0


def test_empty_registry():
    scheduler = run_scheduler(SimulationContext(), "fcfs")
    report = scheduler.report()
    assert report.rows == []
    assert report.average_turnaround == 0.0
