"""Explicit description of the parallelism available to a prime search."""

from dataclasses import dataclass
from typing import Self

from .SystemSpecs import SystemSpecs


@dataclass(frozen=True)
class ExecutionCapability:
    """Number of worker processes a coordinator may spawn.

    Passed explicitly so callers and tests can force either the parallel or
    the sequential code path.
    """

    workers: int = 0

    @property
    def can_parallelize(self) -> bool:
        return self.workers >= 1

    @classmethod
    def detect(cls) -> Self:
        if not SystemSpecs.supports_multiprocessing():
            return cls.sequential()
        return cls(SystemSpecs.get_num_parallel_processes())

    @classmethod
    def sequential(cls) -> Self:
        return cls(0)
