# process.py

STATUSES = ("waiting", "ready", "running", "finished")


class ProcessDescriptor:
    """
    Represents one simulated process (its PCB)
    Attributes:
        name: unique process name
        arrival_time: time the process enters the system
        run_time: original total CPU time, never modified
        remaining_time: CPU time still owed, counts down during scheduling
        program_name: program this process executes
        first_scheduled: clock value of the first dispatch, None until dispatched
        finish_time: clock value when the last slice ended
        status: one of "waiting", "ready", "running", "finished"
        visit_list: page numbers referenced by the process, filled by the trace builder
    Methods:
        finish(clock): mark the process finished at the given clock
        reset(): restore every mutable field to its load-time value
        turnaround_time / weighted_turnaround_time: metrics, 0 until finished
    """

    def __init__(self, name, arrival_time, run_time, program_name):
        """Initialize process with name, arrival time, run time and program"""
        self.name = name
        self.arrival_time = arrival_time
        self.run_time = run_time
        self.program_name = program_name
        self.reset()

    def reset(self):
        self.remaining_time = self.run_time
        self.first_scheduled = None
        self.finish_time = 0
        self.status = "waiting"
        self.visit_list = []

    def finish(self, clock):
        self.remaining_time = 0
        self.finish_time = clock
        self.status = "finished"

    @property
    def turnaround_time(self):
        if self.status != "finished":
            return 0
        return self.finish_time - self.arrival_time

    @property
    def weighted_turnaround_time(self):
        if self.status != "finished" or self.run_time == 0:
            return 0.0
        return self.turnaround_time / self.run_time

    def __repr__(self):
        return f"{self.name}"

    def __str__(self):
        return (f"Process[name:{self.name}, arrival:{self.arrival_time}, run:{self.run_time}, "
                f"program:{self.program_name}, status:{self.status}]")


class ProcessRegistry:
    """Ordered store of process descriptors keyed by unique name"""

    def __init__(self, processes=None):
        self._processes = {}
        for process in processes or []:
            self.add(process)

    def add(self, process):
        if process.name in self._processes:
            raise ValueError(f"Process {process.name} already registered")
        self._processes[process.name] = process
        return process

    def get(self, name):
        return self._processes.get(name)

    def first_running(self, program_name):
        """Return the first process, in registry order, that runs program_name"""
        for process in self._processes.values():
            if process.program_name == program_name:
                return process
        return None

    def program_names(self):
        """Program names referenced by processes, first-seen order, no duplicates"""
        names = []
        for process in self._processes.values():
            if process.program_name not in names:
                names.append(process.program_name)
        return names

    def reset(self):
        for process in self._processes.values():
            process.reset()

    def __iter__(self):
        return iter(list(self._processes.values()))

    def __len__(self):
        return len(self._processes)

    def __contains__(self, name):
        return name in self._processes
