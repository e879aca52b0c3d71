from abc import ABC, abstractmethod
from typing import NamedTuple
from ...mpc.types import MPZ


class EGcdResult(NamedTuple):
    """Result of the extended Euclidean algorithm: a*x + b*y == g."""

    g: MPZ
    x: MPZ
    y: MPZ


class IBigIntMath(ABC):
    """Abstract base class defining the interface for modular arithmetic primitives."""

    @staticmethod
    @abstractmethod
    def abs(a: MPZ) -> MPZ:
        """Absolute value of a."""

    @staticmethod
    @abstractmethod
    def max(a: MPZ, b: MPZ) -> MPZ:
        """Greater of a and b."""

    @staticmethod
    @abstractmethod
    def min(a: MPZ, b: MPZ) -> MPZ:
        """Lesser of a and b."""

    @staticmethod
    @abstractmethod
    def bit_length(a: MPZ) -> int:
        """Get the number of bits of a positive integer.

        Args:
            a (MPZ): Integer >= 1

        Returns:
            int: The minimal bits such that 2^(bits-1) <= a < 2^bits

        Raises:
            InvalidArgumentError: If a < 1
        """

    @staticmethod
    @abstractmethod
    def e_gcd(a: MPZ, b: MPZ) -> EGcdResult:
        """Extended Euclidean algorithm.

        Args:
            a (MPZ): Integer > 0
            b (MPZ): Integer > 0

        Returns:
            EGcdResult: (g, x, y) such that a*x + b*y == g == gcd(a, b)

        Raises:
            InvalidArgumentError: If a <= 0 or b <= 0
        """

    @staticmethod
    @abstractmethod
    def gcd(a: MPZ, b: MPZ) -> MPZ:
        """Greatest common divisor (binary algorithm). Always non-negative.

        If either operand is zero the absolute value of the other is returned.
        """

    @staticmethod
    @abstractmethod
    def lcm(a: MPZ, b: MPZ) -> MPZ:
        """Least common multiple. Zero when both operands are zero."""

    @staticmethod
    @abstractmethod
    def to_zn(a: MPZ, n: MPZ) -> MPZ:
        """Get the canonical residue of a modulo n.

        Args:
            a (MPZ): Any integer
            n (MPZ): Modulus > 0

        Returns:
            MPZ: Value in [0, n)

        Raises:
            InvalidArgumentError: If n <= 0
        """

    @staticmethod
    @abstractmethod
    def mod_inv(a: MPZ, n: MPZ) -> MPZ:
        """Get the modular multiplicative inverse of a modulo n.

        Args:
            a (MPZ): Integer to invert
            n (MPZ): Modulus > 0

        Returns:
            MPZ: x in [0, n) with a*x == 1 (mod n)

        Raises:
            InvalidArgumentError: If n <= 0, or if a is a multiple of n
            NoInverseExistsError: If gcd(a, n) != 1
        """

    @staticmethod
    @abstractmethod
    def mod_pow(b: MPZ, e: MPZ, n: MPZ) -> MPZ:
        """Compute b^e mod n. A negative e computes the inverse of b^|e|.

        Args:
            b (MPZ): Base
            e (MPZ): Exponent, may be negative
            n (MPZ): Modulus > 0

        Returns:
            MPZ: Value in [0, n)

        Raises:
            InvalidArgumentError: If n <= 0, or if e < 0 and b^|e| is a multiple of n
            NoInverseExistsError: If e < 0 and b^|e| is not invertible modulo n
        """
