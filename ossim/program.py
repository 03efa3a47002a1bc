# program.py
from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class InstructionStep:
    """
    One step of a program's run trace.
    address is None for the end-of-program marker.
    """
    program_name: str
    time_offset: int
    address: Optional[float] = None

    @property
    def is_end(self) -> bool:
        return self.address is None


@dataclass(frozen=True)
class FunctionDescriptor:
    name: str
    size: float


@dataclass
class ProgramDescriptor:
    """A program and its functions in declaration order"""
    name: str
    functions: List[FunctionDescriptor] = field(default_factory=list)

    @property
    def total_size(self) -> float:
        total = 0.0
        for function in self.functions:
            total += function.size
        return total


class ProgramCatalog:
    """Ordered store of program descriptors keyed by unique program name"""

    def __init__(self, programs=None):
        self._programs = {}
        for program in programs or []:
            self.add(program)

    def add(self, program):
        if program.name in self._programs:
            raise ValueError(f"Program {program.name} already registered")
        self._programs[program.name] = program
        return program

    def get(self, name):
        return self._programs.get(name)

    def add_function(self, program_name, function):
        """Append a function to a program, creating the program on first use"""
        program = self._programs.get(program_name)
        if program is None:
            program = self.add(ProgramDescriptor(program_name))
        program.functions.append(function)
        return program

    def __iter__(self):
        return iter(list(self._programs.values()))

    def __len__(self):
        return len(self._programs)

    def __contains__(self, name):
        return name in self._programs
