# errors.py

class SimulationError(Exception):
    """Base class for every error raised or recorded by the simulator core."""
    pass


class InvalidConfiguration(SimulationError, ValueError):
    """
    A configuration value the core cannot work with
    (non-positive page size or quantum, zero max pages, unknown strategy).
    Raised before any state is touched.
    """
    pass


class UnresolvedReference(SimulationError):
    """
    A record that points at something missing, e.g. an instruction step for a
    program no process runs. Never raised by the core: instances are collected
    on the SimulationContext and the simulation carries on.
    Attributes:
        kind: "step" or "program"
        name: the program name that could not be resolved
        detail: extra text for the operation log
    """

    def __init__(self, kind, name, detail=""):
        self.kind = kind
        self.name = name
        self.detail = detail
        message = f"unresolved {kind} reference to {name!r}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)
