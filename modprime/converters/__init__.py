"""Converters between modprime objects and plain data."""

from .rsa_converter import RSAConverter

__all__ = ["RSAConverter"]
