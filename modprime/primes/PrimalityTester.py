import asyncio
from concurrent.futures import ProcessPoolExecutor
from typing import Optional

from ..bigint_math import BigIntMath
from ..errors import InvalidArgumentError
from ..mpc import MPC
from ..mpc.types import MPZ
from ..protocol_constants import DEFAULT_ITERATIONS
from ..random import SecureRandom
from ..utils.ExecutionCapability import ExecutionCapability
from .abstract.IPrimalityTester import IPrimalityTester
from .constants import FIRST_PRIMES
from .types import CandidateReport


class PrimalityTester(IPrimalityTester):
    """Implementation of the Miller-Rabin probabilistic primality test."""

    @staticmethod
    def is_probably_prime_sync(w: MPZ, iterations: int = DEFAULT_ITERATIONS) -> bool:
        PrimalityTester._validate(w, iterations)
        return PrimalityTester._is_probably_prime(MPC.mpz(w), iterations)

    @staticmethod
    async def is_probably_prime(
        w: MPZ,
        iterations: int = DEFAULT_ITERATIONS,
        disable_parallel: bool = False,
        capability: Optional[ExecutionCapability] = None,
    ) -> bool:
        PrimalityTester._validate(w, iterations)
        if capability is None:
            capability = ExecutionCapability.detect()

        if disable_parallel or not capability.can_parallelize:
            return PrimalityTester._is_probably_prime(MPC.mpz(w), iterations)

        loop = asyncio.get_running_loop()
        executor = ProcessPoolExecutor(max_workers=1)
        try:
            report = await loop.run_in_executor(
                executor, PrimalityTester.test_candidate, 0, MPC.mpz(w), iterations
            )
        finally:
            # A cancelled caller must not block the loop on the in-flight test
            executor.shutdown(wait=False, cancel_futures=True)
        return report.is_prime

    @staticmethod
    def test_candidate(task_id: int, candidate: MPZ, iterations: int) -> CandidateReport:
        return CandidateReport(
            task_id, candidate, PrimalityTester._is_probably_prime(candidate, iterations)
        )

    # Private Methods
    # --------------

    @staticmethod
    def _validate(w: MPZ, iterations: int) -> None:
        if w < 0:
            raise InvalidArgumentError("w MUST be >= 0")
        if iterations < 1:
            raise InvalidArgumentError("iterations MUST be >= 1")

    @staticmethod
    def _is_probably_prime(w: MPZ, iterations: int) -> bool:
        """Miller-Rabin as described in FIPS 186-4, appendix C.3.1."""
        # Even values other than 2 are composite, and the witness loop needs w > 1
        if w == 2:
            return True
        if (w & 1) == 0 or w == 1:
            return False

        for p in FIRST_PRIMES:
            if p > w:
                break
            if w == p:
                return True
            if w % p == 0:
                return False

        # w - 1 = 2^a * m with m odd
        d = w - 1
        a = 0
        m = d
        while (m & 1) == 0:
            m >>= 1
            a += 1

        for _ in range(iterations):
            b = SecureRandom.uniform_between(w - 2, 2)
            z = BigIntMath.mod_pow(b, m, w)
            if z == 1 or z == d:
                continue
            for _ in range(a - 1):
                z = BigIntMath.mod_pow(z, 2, w)
                if z == d:
                    break
                if z == 1:
                    return False
            if z != d:
                return False
        return True
