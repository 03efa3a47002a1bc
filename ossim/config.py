# config.py
import math
from dataclasses import dataclass

from .errors import InvalidConfiguration

ALGORITHMS = ("FIFO", "LRU")


@dataclass
class SimulationConfig:
    """
    Values the driver hands to the core.
    Attributes:
        page_size: page size, same unit as function sizes (> 0)
        max_pages: resident pages per process (>= 1)
        quantum: round robin time slice (> 0)
        algorithm: page replacement strategy, "FIFO" or "LRU"
    """
    page_size: float = 4.0
    max_pages: int = 3
    quantum: int = 2
    algorithm: str = "FIFO"

    def __post_init__(self):
        self.algorithm = str(self.algorithm).upper()

    def validate(self):
        """Raise InvalidConfiguration for the first bad value, return self otherwise"""
        validate_page_size(self.page_size)
        validate_max_pages(self.max_pages)
        validate_quantum(self.quantum)
        if self.algorithm not in ALGORITHMS:
            raise InvalidConfiguration(
                f"unknown replacement algorithm {self.algorithm!r}, expected one of {', '.join(ALGORITHMS)}"
            )
        return self

    @classmethod
    def from_args(cls, args):
        """
        Build a config from the driver's key=value argument dict.
        Missing keys keep their defaults; values that are not numbers
        raise InvalidConfiguration.
        """
        defaults = cls()
        try:
            page_size = float(args.get("page_size", defaults.page_size))
            max_pages = int(args.get("max_pages", defaults.max_pages))
            quantum = int(args.get("quantum", defaults.quantum))
        except ValueError as e:
            raise InvalidConfiguration(f"bad numeric argument: {e}") from e
        algorithm = args.get("algorithm", defaults.algorithm)
        return cls(page_size=page_size, max_pages=max_pages, quantum=quantum, algorithm=algorithm)


def validate_page_size(page_size):
    if not (page_size > 0 and math.isfinite(page_size)):
        raise InvalidConfiguration(f"page size must be a positive finite number, got {page_size}")
    return page_size


def validate_max_pages(max_pages):
    if not max_pages >= 1:
        raise InvalidConfiguration(f"max pages must be at least 1, got {max_pages}")
    return max_pages


def validate_quantum(quantum):
    if not (quantum > 0 and math.isfinite(quantum)):
        raise InvalidConfiguration(f"time quantum must be a positive finite number, got {quantum}")
    return quantum
