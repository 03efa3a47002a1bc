# context.py
import copy

from .process import ProcessRegistry
from .program import ProgramCatalog


class SimulationContext:
    """
    Everything one simulation run works on: the process registry, the
    program catalog and the instruction steps.
    Attributes:
        registry: ProcessRegistry
        catalog: ProgramCatalog
        steps: list of InstructionStep, in file order
        unresolved: UnresolvedReference values recorded during the run
        log: operation log lines for unresolved references
    """

    def __init__(self, registry=None, catalog=None, steps=None):
        self.registry = registry if registry is not None else ProcessRegistry()
        self.catalog = catalog if catalog is not None else ProgramCatalog()
        self.steps = list(steps or [])
        self.unresolved = []
        self.log = []

    def fresh(self):
        """
        Return a private copy for one run with every mutable process field
        reset. The original context is left untouched, so repeating a run
        gives the same result.
        """
        run = SimulationContext(
            registry=copy.deepcopy(self.registry),
            catalog=copy.deepcopy(self.catalog),
            steps=self.steps,
        )
        run.registry.reset()
        return run

    def record_unresolved(self, reference):
        self.unresolved.append(reference)
        self.log.append(f"skipped: {reference}")
        return reference
