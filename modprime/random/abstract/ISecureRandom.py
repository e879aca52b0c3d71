from abc import ABC, abstractmethod
from ...mpc.types import MPZ


class ISecureRandom(ABC):
    """Abstract base class defining the interface for secure random number generation."""

    @staticmethod
    @abstractmethod
    def random_bytes_sync(byte_length: int, force_top_bit: bool = False) -> bytes:
        """Get cryptographically secure random bytes.

        Args:
            byte_length (int): Number of bytes, >= 1
            force_top_bit (bool): Set the most significant bit of the first byte

        Returns:
            bytes: The random bytes

        Raises:
            InvalidArgumentError: If byte_length < 1
        """

    @staticmethod
    @abstractmethod
    async def random_bytes(byte_length: int, force_top_bit: bool = False) -> bytes:
        """Awaitable version of random_bytes_sync()."""

    @staticmethod
    @abstractmethod
    def random_bits_sync(bit_length: int, force_top_bit: bool = False) -> bytes:
        """Get a cryptographically secure random bit string.

        The excess high-order bits of the first byte are zeroed so the value
        spans exactly bit_length bits.

        Args:
            bit_length (int): Number of bits, >= 1
            force_top_bit (bool): Set the highest valid bit, fixing the bit length

        Returns:
            bytes: ceil(bit_length / 8) big-endian bytes

        Raises:
            InvalidArgumentError: If bit_length < 1
        """

    @staticmethod
    @abstractmethod
    async def random_bits(bit_length: int, force_top_bit: bool = False) -> bytes:
        """Awaitable version of random_bits_sync()."""

    @staticmethod
    @abstractmethod
    def uniform_between(max: MPZ, min: MPZ = 1) -> MPZ:
        """Get a uniformly distributed random integer in [min, max].

        Args:
            max (MPZ): Inclusive upper bound
            min (MPZ): Inclusive lower bound, defaults to 1

        Returns:
            MPZ: Random value in [min, max]

        Raises:
            InvalidArgumentError: If max <= min
        """
