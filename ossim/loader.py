# loader.py
import logging
import math
import os

from .context import SimulationContext
from .process import ProcessDescriptor, ProcessRegistry
from .program import FunctionDescriptor, InstructionStep, ProgramCatalog, ProgramDescriptor

logger = logging.getLogger(__name__)

PROCESS_FILE = "Process.txt"
RUN_FILE = "run.txt"
PROGRAM_FILE = "program.txt"

END_OPERATIONS = ("end", "结束")


def _lines(filename):
    with open(filename, encoding="utf-8") as f:
        for lineno, line in enumerate(f, 1):
            line = line.strip()
            if line:
                yield lineno, line


def load_processes(filename):
    """
    Read process lines "name arrival run_time program".
    Malformed lines and duplicate names are skipped with a warning.
    """
    registry = ProcessRegistry()
    for lineno, line in _lines(filename):
        parts = line.split()
        if len(parts) < 4:
            logger.warning("%s:%d: expected 'name arrival run program', got %r", filename, lineno, line)
            continue
        try:
            arrival_time = int(parts[1])
            run_time = int(parts[2])
        except ValueError:
            logger.warning("%s:%d: arrival and run time must be integers: %r", filename, lineno, line)
            continue
        if arrival_time < 0 or run_time <= 0:
            logger.warning("%s:%d: arrival must be >= 0 and run time > 0: %r", filename, lineno, line)
            continue
        try:
            registry.add(ProcessDescriptor(parts[0], arrival_time, run_time, parts[3]))
        except ValueError as e:
            logger.warning("%s:%d: %s", filename, lineno, e)
    return registry


def load_run_steps(filename):
    """
    Read the run trace. A line starting with "program" names the program the
    following "offset operation address" lines belong to; the operation
    "end" marks the end of the program and carries no address.
    """
    steps = []
    current_program = ""
    for lineno, line in _lines(filename):
        if line.startswith("program"):
            current_program = line
            continue

        parts = line.split()
        if not current_program:
            logger.warning("%s:%d: step before any program line: %r", filename, lineno, line)
            continue
        if len(parts) < 2:
            logger.warning("%s:%d: expected 'offset operation address', got %r", filename, lineno, line)
            continue
        try:
            time_offset = int(parts[0])
            if parts[1].lower() in END_OPERATIONS:
                address = None
            elif len(parts) >= 3:
                address = float(parts[2])
                if not math.isfinite(address):
                    logger.warning("%s:%d: address must be a finite number: %r", filename, lineno, line)
                    continue
            else:
                logger.warning("%s:%d: missing address: %r", filename, lineno, line)
                continue
        except ValueError:
            logger.warning("%s:%d: bad number in %r", filename, lineno, line)
            continue
        steps.append(InstructionStep(current_program, time_offset, address))
    return steps


def load_programs(filename):
    """
    Read program details: "FName <program>" opens a program, the following
    "function size" lines belong to it.
    """
    catalog = ProgramCatalog()
    current_program = None
    for lineno, line in _lines(filename):
        parts = line.split()
        if parts[0] == "FName":
            if len(parts) < 2:
                logger.warning("%s:%d: FName line without a program name", filename, lineno)
                continue
            current_program = parts[1]
            if current_program not in catalog:
                catalog.add(ProgramDescriptor(current_program))
            continue

        if len(parts) < 2:
            logger.warning("%s:%d: expected 'function size', got %r", filename, lineno, line)
            continue
        if current_program is None:
            logger.warning("%s:%d: function not attached to any program: %r", filename, lineno, line)
            continue
        try:
            size = float(parts[1])
        except ValueError:
            logger.warning("%s:%d: bad function size in %r", filename, lineno, line)
            continue
        if not math.isfinite(size) or size < 0:
            logger.warning("%s:%d: function size must be a non-negative finite number: %r", filename, lineno, line)
            continue
        catalog.add_function(current_program, FunctionDescriptor(parts[0], size))
    return catalog


def load_context(directory="."):
    """Load Process.txt, run.txt and program.txt from a directory"""
    registry = load_processes(os.path.join(directory, PROCESS_FILE))
    steps = load_run_steps(os.path.join(directory, RUN_FILE))
    catalog = load_programs(os.path.join(directory, PROGRAM_FILE))
    logger.info(
        "loaded %d processes, %d run steps, %d programs from %s",
        len(registry), len(steps), len(catalog), directory,
    )
    return SimulationContext(registry, catalog, steps)
