from ossim.errors import InvalidConfiguration

from .fcfs import FCFSScheduler
from .round_robin import RRScheduler

# Map scheduler name to class (case-insensitive)
SCHEDULERS = {
    "fcfs": FCFSScheduler,
    "fcfsscheduler": FCFSScheduler,
    "rr": RRScheduler,
    "rrscheduler": RRScheduler,
    "roundrobin": RRScheduler,
}


def get_scheduler_class(name):
    SchedulerClass = SCHEDULERS.get(str(name).lower())
    if SchedulerClass is None:
        raise InvalidConfiguration(f"unknown scheduler {name!r}")
    return SchedulerClass


def run_scheduler(context, algorithm, quantum=None, verbose=False):
    """
    Run one scheduling simulation on a private copy of the context.
    Args:
        context: SimulationContext holding the process registry
        algorithm: scheduler name, e.g. "fcfs" or "rr"
        quantum: time slice, required by round robin
        verbose: print the event log while running
    Returns: the finished scheduler; call report() for the results
    """
    SchedulerClass = get_scheduler_class(algorithm)
    if SchedulerClass is RRScheduler:
        if quantum is None:
            raise InvalidConfiguration("round robin needs a time quantum")
        scheduler = RRScheduler(quantum=quantum, verbose=verbose)
    else:
        scheduler = SchedulerClass(verbose=verbose)

    run = context.fresh()
    for process in run.registry:
        scheduler.add_process(process)
    return scheduler.run()


__all__ = ["FCFSScheduler", "RRScheduler", "SCHEDULERS", "get_scheduler_class", "run_scheduler"]
