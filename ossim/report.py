# report.py
from dataclasses import dataclass, field
from typing import Dict, List, Optional

COLUMNS = ["name", "arrival", "run", "start", "finish", "turnaround", "weighted"]


@dataclass(frozen=True)
class ExecutionSlice:
    """One uninterrupted stretch of CPU time given to a process"""
    name: str
    start: int
    end: int

    @property
    def duration(self):
        return self.end - self.start


@dataclass(frozen=True)
class ProcessTiming:
    name: str
    arrival_time: int
    run_time: int
    first_scheduled: Optional[int]
    finish_time: int
    turnaround_time: float
    weighted_turnaround_time: float

    @classmethod
    def from_process(cls, process):
        return cls(
            name=process.name,
            arrival_time=process.arrival_time,
            run_time=process.run_time,
            first_scheduled=process.first_scheduled,
            finish_time=process.finish_time,
            turnaround_time=process.turnaround_time,
            weighted_turnaround_time=process.weighted_turnaround_time,
        )

    def as_line(self):
        """Tab separated result line: turnaround without decimals, weighted with two"""
        start = self.first_scheduled if self.first_scheduled is not None else -1
        return (f"{self.name}\t{self.arrival_time}\t{self.run_time}\t{start}\t"
                f"{self.finish_time}\t{self.turnaround_time:.0f}\t{self.weighted_turnaround_time:.2f}")


@dataclass
class SchedulingReport:
    """
    Outcome of one scheduling run.
    Attributes:
        algorithm: "FCFS" or "RR"
        rows: one ProcessTiming per process, in arrival order
        slices: execution slices in the order they ran
        quantum: time slice for RR, None for FCFS
    """
    algorithm: str
    rows: List[ProcessTiming]
    slices: List[ExecutionSlice] = field(default_factory=list)
    quantum: Optional[int] = None

    @property
    def title(self):
        if self.quantum is None:
            return self.algorithm
        return f"{self.algorithm} (quantum={self.quantum})"

    @property
    def average_turnaround(self):
        if not self.rows:
            return 0.0
        return sum(row.turnaround_time for row in self.rows) / len(self.rows)

    @property
    def average_weighted_turnaround(self):
        if not self.rows:
            return 0.0
        return sum(row.weighted_turnaround_time for row in self.rows) / len(self.rows)

    def row(self, name):
        for row in self.rows:
            if row.name == name:
                return row
        raise KeyError(name)

    def slices_for(self, name):
        return [s for s in self.slices if s.name == name]

    def to_lines(self):
        """Section header, column header and one tab separated line per process"""
        lines = [f"=== {self.title} ===", "\t".join(COLUMNS)]
        lines.extend(row.as_line() for row in self.rows)
        return lines

    def append_to(self, filename):
        """Append this report to a result file, keeping earlier runs"""
        with open(filename, "a", encoding="utf-8") as f:
            f.write("\n" + "\n".join(self.to_lines()) + "\n")


@dataclass
class PagingReport:
    """
    Outcome of one paging run.
    Attributes:
        algorithm: "FIFO" or "LRU"
        page_size / max_pages: configuration the run used
        source: "requirements" or "trace"
        requirements: program name -> pages needed
        hits / faults: totals over the whole run
        log: operation log, one entry per hit, eviction and insertion
        evictions: evicted pages in eviction order
        per_process: process name -> {"hits", "faults", "hit_rate"} for trace runs
        visit_lists: process name -> page numbers built by the trace builder
        unresolved: UnresolvedReference values recorded during the run
    """
    algorithm: str
    page_size: float
    max_pages: int
    source: str
    requirements: Dict[str, int]
    hits: int = 0
    faults: int = 0
    log: List[str] = field(default_factory=list)
    evictions: List[int] = field(default_factory=list)
    per_process: Dict[str, dict] = field(default_factory=dict)
    visit_lists: Dict[str, List[int]] = field(default_factory=dict)
    unresolved: list = field(default_factory=list)

    @property
    def total_refs(self):
        return self.hits + self.faults

    @property
    def hit_rate(self):
        if self.total_refs == 0:
            return 0.0
        return self.hits / self.total_refs

    def get_stats(self):
        return {
            "hits": self.hits,
            "faults": self.faults,
            "hit_rate": round(self.hit_rate, 4),
            "total_refs": self.total_refs,
        }
