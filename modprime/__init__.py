"""
Arbitrary-precision modular arithmetic and Miller-Rabin prime generation on top of gmpy2.
"""

from .bigint_math import BigIntMath, EGcdResult
from .errors import ModPrimeError, InvalidArgumentError, NoInverseExistsError
from .mpc import MPC, MPZ
from .primes import Primes, PrimalityTester, PrimeSearchCoordinator
from .random import SecureRandom
from .rsa import RSA
from .utils import ExecutionCapability

__all__ = [
    "BigIntMath",
    "EGcdResult",
    "ModPrimeError",
    "InvalidArgumentError",
    "NoInverseExistsError",
    "MPC",
    "MPZ",
    "Primes",
    "PrimalityTester",
    "PrimeSearchCoordinator",
    "SecureRandom",
    "RSA",
    "ExecutionCapability",
]

__version__ = "0.1.0"
