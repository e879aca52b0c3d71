from abc import ABC, abstractmethod
from ..types import MPZ, T


class IMPC(ABC):
    """Abstract base class defining the interface for multi-precision conversions."""

    @staticmethod
    @abstractmethod
    def mpz(value: T) -> MPZ:
        """Convert a Python integer to an mpz.

        Args:
            value (int): Integer value to convert

        Returns:
            MPZ: Multi-precision integer
        """

    @staticmethod
    @abstractmethod
    def from_bytes(buf: bytes) -> MPZ:
        """Interpret a big-endian byte sequence as a non-negative integer.

        Args:
            buf (bytes): Big-endian bytes, most significant byte first

        Returns:
            MPZ: The encoded integer
        """

    @staticmethod
    @abstractmethod
    def to_hex(value: MPZ) -> str:
        """Render a value as a hex string without the 0x prefix.

        Args:
            value (MPZ): Value to render

        Returns:
            str: Lowercase hex digits
        """
