# Round Robin Scheduling Algorithm Implementation
# schedulers/round_robin.py

from collections import deque

from ossim import Scheduler
from ossim.config import validate_quantum


class RRScheduler(Scheduler):
    """
    Round Robin (RR) Scheduling.
    - Processes are executed in FIFO order with a fixed time quantum
    - Preemptive: if a process doesn't finish in its quantum, it goes to the
      back of the ready queue, behind any process that arrived meanwhile
    """

    name = "RR"

    def __init__(self, quantum=2, verbose=False):
        super().__init__(verbose=verbose)
        self.quantum = validate_quantum(quantum)
        self.not_arrived = deque()
        self.ready_queue = deque()

    def _check_arrivals(self):
        """Move every process whose arrival time has been reached to the ready queue"""
        while self.not_arrived and self.not_arrived[0].arrival_time <= self.clock:
            process = self.not_arrived.popleft()
            process.status = "ready"
            self.ready_queue.append(process)
            self._record(f"{process.name} arrived", event_type="enqueue", proc=process.name)

    def run(self):
        self.not_arrived = deque(self.arrival_order())
        self.ready_queue = deque()
        self._check_arrivals()

        while self.ready_queue or self.not_arrived:
            if not self.ready_queue:
                # nothing runnable, jump to the next arrival
                next_arrival = self.not_arrived[0].arrival_time
                self._record(f"CPU idle until {next_arrival}", event_type="idle")
                self.clock = next_arrival
                self._check_arrivals()
                continue

            process = self.ready_queue.popleft()
            self._dispatch(process)
            self._execute(process, min(self.quantum, process.remaining_time))

            # new arrivals go ahead of the preempted process
            self._check_arrivals()

            if process.remaining_time > 0:
                process.status = "ready"
                self.ready_queue.append(process)
                self._record(
                    f"{process.name} preempted ({process.remaining_time} left)",
                    event_type="preempt",
                    proc=process.name,
                )
            else:
                self._finish(process)
        return self
