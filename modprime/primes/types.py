"""Messages exchanged between the prime search coordinator and its workers."""

from typing import NamedTuple
from ..mpc.types import MPZ


class CandidateReport(NamedTuple):
    """Outcome of testing one candidate in a worker."""

    task_id: int
    candidate: MPZ
    is_prime: bool
