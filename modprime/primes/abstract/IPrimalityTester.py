from abc import ABC, abstractmethod
from typing import Optional

from ...mpc.types import MPZ
from ...utils.ExecutionCapability import ExecutionCapability
from ..types import CandidateReport


class IPrimalityTester(ABC):
    """Abstract base class defining the interface for probabilistic primality testing."""

    @staticmethod
    @abstractmethod
    def is_probably_prime_sync(w: MPZ, iterations: int) -> bool:
        """Run the Miller-Rabin test in the calling thread.

        Candidates are first prefiltered by trial division against the
        first 250 odd primes.

        Args:
            w (MPZ): Candidate, >= 0
            iterations (int): Number of Miller-Rabin rounds, >= 1

        Returns:
            bool: True if w is a probable prime, False if it is composite

        Raises:
            InvalidArgumentError: If w < 0 or iterations < 1
        """

    @staticmethod
    @abstractmethod
    async def is_probably_prime(
        w: MPZ,
        iterations: int,
        disable_parallel: bool = False,
        capability: Optional[ExecutionCapability] = None,
    ) -> bool:
        """Run the Miller-Rabin test, off the event loop when possible.

        Args:
            w (MPZ): Candidate, >= 0
            iterations (int): Number of Miller-Rabin rounds, >= 1
            disable_parallel (bool): Always test in the calling process
            capability (ExecutionCapability): Available parallelism, detected if None

        Returns:
            bool: True if w is a probable prime, False if it is composite
        """

    @staticmethod
    @abstractmethod
    def test_candidate(task_id: int, candidate: MPZ, iterations: int) -> CandidateReport:
        """Worker entry point: test one candidate and report the outcome.

        Args:
            task_id (int): Identifier of the task slot that owns the candidate
            candidate (MPZ): Value to test
            iterations (int): Number of Miller-Rabin rounds

        Returns:
            CandidateReport: The candidate and its verdict
        """
