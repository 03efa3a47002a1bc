# trace.py
import math

from .config import validate_page_size
from .errors import UnresolvedReference


def page_number(address, page_size):
    """Page holding a virtual address: floor(address / page_size)"""
    return int(math.floor(address / page_size))


def build_traces(context, page_size):
    """
    Turn the context's instruction steps into per-process page references.

    Every step with a real address is appended, as a page number, to the
    visit list of the first process (registry order) running the step's
    program. End markers are skipped. Steps for a program no process runs
    are recorded as UnresolvedReference on the context and skipped.

    Args:
        context: SimulationContext, mutated in place
        page_size: page size, must be positive
    Returns: number of page references appended
    """
    validate_page_size(page_size)

    appended = 0
    for step in context.steps:
        if step.is_end:
            continue

        process = context.registry.first_running(step.program_name)
        if process is None:
            context.record_unresolved(
                UnresolvedReference("step", step.program_name, f"time offset {step.time_offset}")
            )
            continue

        process.visit_list.append(page_number(step.address, page_size))
        appended += 1
    return appended


def calculate_page_requirements(catalog, page_size, referenced=(), unresolved=None):
    """
    Pages needed to hold each program's code: ceil(sum of function sizes / page_size).

    Args:
        catalog: ProgramCatalog
        page_size: page size, must be positive
        referenced: program names that are expected to exist in the catalog
        unresolved: optional SimulationContext (or anything with record_unresolved)
            receiving an UnresolvedReference for each referenced program missing
            from the catalog
    Returns: dict program name -> page count, in catalog order
    """
    validate_page_size(page_size)

    requirements = {}
    for program in catalog:
        requirements[program.name] = int(math.ceil(program.total_size / page_size))

    for name in referenced:
        if name not in catalog and unresolved is not None:
            unresolved.record_unresolved(UnresolvedReference("program", name, "not in program catalog"))

    return requirements
