"""Utility modules for modprime."""

from .SystemSpecs import SystemSpecs
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables
from .ExecutionCapability import ExecutionCapability

__all__ = ["SystemSpecs", "EnvironmentManager", "EnvironmentVariables", "ExecutionCapability"]
