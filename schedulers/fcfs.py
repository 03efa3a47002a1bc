# First-Come, First-Served (FCFS) Scheduling Algorithm Implementation
# schedulers/fcfs.py

from ossim import Scheduler


class FCFSScheduler(Scheduler):
    """
    First-Come, First-Served (FCFS) Scheduling.
    - The process that arrives first is served first, ties keep registry order
    - Non-preemptive: once a process starts executing, it runs to completion
    """

    name = "FCFS"

    def run(self):
        """Walk the processes in arrival order, one slice each"""
        for process in self.arrival_order():
            # CPU idles until the process arrives
            if self.clock < process.arrival_time:
                self._record(f"CPU idle until {process.arrival_time}", event_type="idle")
                self.clock = process.arrival_time

            self._dispatch(process)
            self._execute(process, process.remaining_time)
            self._finish(process)
        return self
