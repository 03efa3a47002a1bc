from .config import SimulationConfig
from .context import SimulationContext
from .errors import InvalidConfiguration, SimulationError, UnresolvedReference
from .pager import PageManager
from .process import ProcessDescriptor, ProcessRegistry
from .program import FunctionDescriptor, InstructionStep, ProgramCatalog, ProgramDescriptor
from .recency import RecencyMap
from .report import ExecutionSlice, PagingReport, ProcessTiming, SchedulingReport
from .scheduler import Scheduler
from .trace import build_traces, calculate_page_requirements, page_number

__all__ = [
    "SimulationConfig",
    "SimulationContext",
    "InvalidConfiguration",
    "SimulationError",
    "UnresolvedReference",
    "PageManager",
    "ProcessDescriptor",
    "ProcessRegistry",
    "FunctionDescriptor",
    "InstructionStep",
    "ProgramCatalog",
    "ProgramDescriptor",
    "RecencyMap",
    "ExecutionSlice",
    "PagingReport",
    "ProcessTiming",
    "SchedulingReport",
    "Scheduler",
    "build_traces",
    "calculate_page_requirements",
    "page_number",
]
