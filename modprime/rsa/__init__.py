"""RSA key parameter module."""

from .RSA import RSA
from .abstract.IRSA import IRSA

__all__ = ["RSA", "IRSA"]
