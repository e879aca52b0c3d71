import asyncio
import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Optional, Set

from ..errors import InvalidArgumentError
from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import DEFAULT_ITERATIONS
from ..random import SecureRandom
from ..utils.ExecutionCapability import ExecutionCapability
from .PrimalityTester import PrimalityTester
from .types import CandidateReport

logger = logging.getLogger(__name__)


class PrimeSearchCoordinator:
    """Races a pool of worker processes to find a probable prime of a given bit length.

    Every task slot tests one candidate at a time. The first prime reported
    resolves the search; composites are answered with a fresh candidate for
    the same slot. Once resolved, pending work is cancelled and the pool is
    shut down without waiting for in-flight tests.
    """

    def __init__(
        self,
        bit_length: int,
        iterations: int = DEFAULT_ITERATIONS,
        capability: Optional[ExecutionCapability] = None,
    ) -> None:
        """Initialize the coordinator.

        Args:
            bit_length (int): Exact bit length of the prime to find, >= 1
            iterations (int): Miller-Rabin rounds per candidate
            capability (ExecutionCapability): Available parallelism, detected if None
        """
        if bit_length < 1:
            raise InvalidArgumentError("bit_length MUST be > 0")
        if iterations < 1:
            raise InvalidArgumentError("iterations MUST be >= 1")
        self._bit_length = bit_length
        self._iterations = iterations
        self._capability = capability if capability is not None else ExecutionCapability.detect()
        self._tested = 0

    def get_tested_count(self) -> int:
        return self._tested

    def search_sync(self) -> MPZ:
        """Test fresh candidates one after another in the calling thread."""
        logger.debug("Sequential search for a %d-bit prime", self._bit_length)
        while True:
            candidate = self._draw_candidate()
            self._tested += 1
            if PrimalityTester.is_probably_prime_sync(candidate, self._iterations):
                logger.debug("Found a %d-bit prime after %d candidates", self._bit_length, self._tested)
                return candidate

    async def search(self) -> MPZ:
        """Race the worker pool, or fall back to search_sync() without one."""
        if not self._capability.can_parallelize:
            return self.search_sync()

        workers = self._capability.workers
        logger.debug("Parallel search for a %d-bit prime on %d workers", self._bit_length, workers)

        loop = asyncio.get_running_loop()
        result: asyncio.Future = loop.create_future()
        executor = ProcessPoolExecutor(max_workers=workers)
        pending: Set[asyncio.Future] = set()
        try:
            for task_id in range(workers):
                self._dispatch(loop, executor, task_id, result, pending)

            while not result.done():
                done, pending = await asyncio.wait(pending, return_when=asyncio.FIRST_COMPLETED)
                for finished in done:
                    report: CandidateReport = finished.result()
                    self._tested += 1
                    if report.is_prime:
                        self._claim(result, report.candidate)
                    elif not result.done():
                        self._dispatch(loop, executor, report.task_id, result, pending)
        finally:
            for task in pending:
                task.cancel()
            executor.shutdown(wait=False, cancel_futures=True)
            logger.debug("Worker pool shut down, %d tasks abandoned", len(pending))

        logger.debug("Found a %d-bit prime after %d candidates", self._bit_length, self._tested)
        return result.result()

    # Private Methods
    # --------------

    def _draw_candidate(self) -> MPZ:
        # No evenness prefilter here, the tester rejects even values itself
        return MPC.from_bytes(SecureRandom.random_bits_sync(self._bit_length, True))

    def _dispatch(
        self,
        loop: asyncio.AbstractEventLoop,
        executor: ProcessPoolExecutor,
        task_id: int,
        result: asyncio.Future,
        pending: Set[asyncio.Future],
    ) -> None:
        """Hand a fresh candidate to the given task slot."""
        candidate = self._draw_candidate()
        try:
            future = loop.run_in_executor(
                executor, PrimalityTester.test_candidate, task_id, candidate, self._iterations
            )
        except RuntimeError:
            # The pool is gone because the search already resolved
            if result.done():
                return
            raise
        pending.add(future)

    @staticmethod
    def _claim(result: asyncio.Future, prime: MPZ) -> bool:
        """First writer wins, later reports are ignored."""
        if result.done():
            return False
        result.set_result(prime)
        return True
