"""Utility class for system specifications and resource management."""

import multiprocessing
from .EnvironmentManager import EnvironmentManager, EnvironmentVariables


class SystemSpecs:
    """Utility class for determining system specifications and resource allocation."""

    @staticmethod
    def get_num_parallel_processes() -> int:
        """
        Calculate the number of worker processes available to a prime search.

        Returns the number of CPU cores minus the units reserved for
        orchestration, never below 0. A result of 0 means no worker can be
        spawned and callers should run sequentially.

        The reservation can be configured via the RESERVED_PARALLEL_UNITS
        environment variable. Default is 1.

        Returns:
            int: Number of parallel processes to use
        """
        reserved = EnvironmentManager.get_int(EnvironmentVariables.RESERVED_PARALLEL_UNITS)
        return max(multiprocessing.cpu_count() - max(reserved, 0), 0)

    @staticmethod
    def supports_multiprocessing() -> bool:
        """
        Check whether process pools can be created on this platform.

        Platforms without a working sem_open fail to import
        multiprocessing.synchronize, which every process pool needs.

        Returns:
            bool: True if process pools are usable
        """
        try:
            import multiprocessing.synchronize  # noqa: F401
        except ImportError:
            return False
        return True
