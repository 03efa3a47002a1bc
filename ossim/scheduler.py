# scheduler.py
import csv
import json

from .console import print_schedule
from .report import ExecutionSlice, ProcessTiming, SchedulingReport


class Scheduler:
    """
    Base class for the CPU schedulers

    Attributes:
        clock: logical clock of this run, starts at 0
        processes: processes handed to the scheduler, registry order
        finished: processes in completion order
        slices: ExecutionSlice list, one per dispatch
        log: human-readable log of events
        events: structured log of events for export
        verbose: if True, print log entries to console
    Methods:
        add_process(process): register a process for this run
        run(): simulate until every process has finished
        report(): SchedulingReport for the finished run
        timeline(): return the human-readable log as a string
        export_json(filename): export events, slices and report to JSON
        export_csv(filename): export the execution slices to CSV
    """

    name = "BASE"
    quantum = None

    def __init__(self, verbose=False):
        self.clock = 0
        self.processes = []
        self.finished = []
        self.slices = []
        self.log = []
        self.events = []
        self.verbose = verbose

    def add_process(self, process):
        """Add a process; it enters the ready queue once the clock reaches its arrival"""
        process.status = "waiting"
        self.processes.append(process)

    def arrival_order(self):
        """Processes sorted by arrival time, ties keep registration order"""
        return sorted(self.processes, key=lambda p: p.arrival_time)

    def run(self):
        raise NotImplementedError

    def _record(self, event, event_type="info", proc=None):
        """
        Record an event in the log and structured events list
        Args:
            event: description of the event
            event_type: category of the event ("dispatch", "enqueue", ...)
            proc: process name involved in the event (if any)
        """
        entry = f"time={self.clock:<3} | {event}"
        self.log.append(entry)

        if self.verbose:
            print(entry)

        self.events.append(
            {
                "time": self.clock,
                "event": event,
                "event_type": event_type,
                "process": proc,
            }
        )

    def _dispatch(self, process):
        if process.first_scheduled is None:
            process.first_scheduled = self.clock
        process.status = "running"
        self._record(f"{process.name} dispatched", event_type="dispatch", proc=process.name)

    def _execute(self, process, duration):
        """Run process for duration time units and advance the clock"""
        start = self.clock
        self.clock += duration
        process.remaining_time -= duration
        self.slices.append(ExecutionSlice(process.name, start, self.clock))

    def _finish(self, process):
        process.finish(self.clock)
        self.finished.append(process)
        self._record(
            f"{process.name} finished (turnaround={process.turnaround_time}, "
            f"weighted={process.weighted_turnaround_time:.2f})",
            event_type="finished",
            proc=process.name,
        )

    def report(self):
        rows = [ProcessTiming.from_process(p) for p in self.arrival_order()]
        return SchedulingReport(self.name, rows, list(self.slices), self.quantum)

    def timeline(self):
        """Return the human-readable log as a single string"""
        return "\n".join(self.log)

    # ---- Exporters ----
    def export_json(self, filename="timeline.json"):
        """Export events, execution slices and per-process results to a JSON file"""
        report = self.report()
        data = {
            "algorithm": self.name,
            "quantum": self.quantum,
            "total_time": self.clock,
            "events": self.events,
            "slices": [{"process": s.name, "start": s.start, "end": s.end} for s in self.slices],
            "processes": [
                {
                    "name": row.name,
                    "arrival_time": row.arrival_time,
                    "run_time": row.run_time,
                    "first_scheduled": row.first_scheduled,
                    "finish_time": row.finish_time,
                    "turnaround_time": row.turnaround_time,
                    "weighted_turnaround_time": row.weighted_turnaround_time,
                }
                for row in report.rows
            ],
        }
        with open(filename, "w") as f:
            json.dump(data, f, indent=2)

    def export_csv(self, filename="timeline.csv"):
        """Export the execution slices to a CSV file"""
        with open(filename, "w", newline="") as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=["process", "start", "end", "duration"])
            writer.writeheader()
            for s in self.slices:
                writer.writerow({"process": s.name, "start": s.start, "end": s.end, "duration": s.duration})

    def print_stats(self, console=None):
        """Print the timing table for the finished run"""
        print_schedule(self.report(), console=console)
