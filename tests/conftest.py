import pytest

from ossim import (
    FunctionDescriptor,
    InstructionStep,
    ProcessDescriptor,
    ProcessRegistry,
    ProgramCatalog,
    ProgramDescriptor,
    SimulationContext,
)


def make_registry(*rows):
    """rows of (name, arrival, run, program)"""
    return ProcessRegistry([ProcessDescriptor(*row) for row in rows])


@pytest.fixture
def registry_of():
    return make_registry


@pytest.fixture
def two_processes():
    return make_registry(("P1", 0, 5, "program1"), ("P2", 2, 3, "program2"))


@pytest.fixture
def context(two_processes):
    catalog = ProgramCatalog([
        ProgramDescriptor("program1", [FunctionDescriptor("main", 2), FunctionDescriptor("init", 3),
                                       FunctionDescriptor("io", 5)]),
        ProgramDescriptor("program2", [FunctionDescriptor("main", 4)]),
        ProgramDescriptor("empty"),
    ])
    steps = [
        InstructionStep("program1", 0, 1.5),
        InstructionStep("program1", 1, 9.0),
        InstructionStep("program2", 0, 4.0),
        InstructionStep("program1", 2, 2.0),
        InstructionStep("program1", 3, None),
        InstructionStep("ghost", 0, 3.0),
    ]
    return SimulationContext(two_processes, catalog, steps)
