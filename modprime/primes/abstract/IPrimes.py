from abc import ABC, abstractmethod
from typing import Optional

from ...mpc.types import MPZ
from ...utils.ExecutionCapability import ExecutionCapability


class IPrimes(ABC):
    """Abstract base class defining the interface for prime number generation."""

    @staticmethod
    @abstractmethod
    async def is_probably_prime(
        w: MPZ, iterations: int, disable_parallel: bool = False
    ) -> bool:
        """Check whether w is a probable prime.

        Args:
            w (MPZ): Candidate, >= 0
            iterations (int): Number of Miller-Rabin rounds
            disable_parallel (bool): Always test in the calling process

        Returns:
            bool: True if w is a probable prime
        """

    @staticmethod
    @abstractmethod
    async def generate_prime(
        bit_length: int, iterations: int, capability: Optional[ExecutionCapability] = None
    ) -> MPZ:
        """Get a random probable prime, racing worker processes when available.

        Args:
            bit_length (int): Exact number of bits of the prime
            iterations (int): Number of Miller-Rabin rounds per candidate
            capability (ExecutionCapability): Available parallelism, detected if None

        Returns:
            MPZ: A probable prime with its top bit set
        """

    @staticmethod
    @abstractmethod
    def generate_prime_sync(bit_length: int, iterations: int) -> MPZ:
        """Get a random probable prime without spawning any worker.

        Args:
            bit_length (int): Exact number of bits of the prime
            iterations (int): Number of Miller-Rabin rounds per candidate

        Returns:
            MPZ: A probable prime with its top bit set
        """
