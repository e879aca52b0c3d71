from typing import Optional

from ..mpc.types import MPZ
from ..protocol_constants import DEFAULT_ITERATIONS
from ..utils.ExecutionCapability import ExecutionCapability
from .abstract.IPrimes import IPrimes
from .PrimalityTester import PrimalityTester
from .PrimeSearchCoordinator import PrimeSearchCoordinator


class Primes(IPrimes):
    """Implementation of prime number generation."""

    @staticmethod
    async def is_probably_prime(
        w: MPZ, iterations: int = DEFAULT_ITERATIONS, disable_parallel: bool = False
    ) -> bool:
        return await PrimalityTester.is_probably_prime(w, iterations, disable_parallel)

    @staticmethod
    async def generate_prime(
        bit_length: int,
        iterations: int = DEFAULT_ITERATIONS,
        capability: Optional[ExecutionCapability] = None,
    ) -> MPZ:
        return await PrimeSearchCoordinator(bit_length, iterations, capability).search()

    @staticmethod
    def generate_prime_sync(bit_length: int, iterations: int = DEFAULT_ITERATIONS) -> MPZ:
        coordinator = PrimeSearchCoordinator(
            bit_length, iterations, ExecutionCapability.sequential()
        )
        return coordinator.search_sync()
