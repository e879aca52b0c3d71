"""Prime number testing and generation module."""

from .Primes import Primes
from .PrimalityTester import PrimalityTester
from .PrimeSearchCoordinator import PrimeSearchCoordinator
from .types import CandidateReport
from .abstract.IPrimes import IPrimes
from .abstract.IPrimalityTester import IPrimalityTester

__all__ = [
    "Primes",
    "PrimalityTester",
    "PrimeSearchCoordinator",
    "CandidateReport",
    "IPrimes",
    "IPrimalityTester",
]
