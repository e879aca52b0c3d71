"""Secure random number generation module."""

from .SecureRandom import SecureRandom
from .abstract.ISecureRandom import ISecureRandom

__all__ = ["SecureRandom", "ISecureRandom"]
