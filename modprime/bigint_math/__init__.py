"""Modular arithmetic module."""

from .BigIntMath import BigIntMath
from .abstract.IBigIntMath import IBigIntMath, EGcdResult

__all__ = ["BigIntMath", "IBigIntMath", "EGcdResult"]
