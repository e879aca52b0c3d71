import gmpy2
from .abstract.IMPC import IMPC
from .types import MPZ, T


class MPC(IMPC):
    """Implementation of multi-precision conversions backed by gmpy2."""

    @staticmethod
    def mpz(value: T) -> MPZ:
        return gmpy2.mpz(value)

    @staticmethod
    def from_bytes(buf: bytes) -> MPZ:
        return gmpy2.mpz(int.from_bytes(buf, "big"))

    @staticmethod
    def to_hex(value: MPZ) -> str:
        return gmpy2.mpz(value).digits(16)
