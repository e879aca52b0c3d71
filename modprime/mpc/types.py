"""Type definitions for multi-precision computing operations."""

from typing import TypeVar, NewType
from gmpy2 import mpz as _mpz

# Canonical arbitrary-precision integer type
MPZ = NewType("MPZ", _mpz)

# Generic type variable for values that may still be machine ints
T = TypeVar("T", MPZ, int)
