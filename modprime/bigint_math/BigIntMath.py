from ..errors import InvalidArgumentError, NoInverseExistsError
from ..mpc import MPC
from ..mpc.types import MPZ
from .abstract.IBigIntMath import IBigIntMath, EGcdResult


class BigIntMath(IBigIntMath):
    """Implementation of modular arithmetic over gmpy2 integers."""

    @staticmethod
    def abs(a: MPZ) -> MPZ:
        return a if a >= 0 else -a

    @staticmethod
    def max(a: MPZ, b: MPZ) -> MPZ:
        return a if a >= b else b

    @staticmethod
    def min(a: MPZ, b: MPZ) -> MPZ:
        return b if a >= b else a

    @staticmethod
    def bit_length(a: MPZ) -> int:
        if a < 1:
            raise InvalidArgumentError("a MUST be >= 1")
        return int(MPC.mpz(a).bit_length())

    @staticmethod
    def e_gcd(a: MPZ, b: MPZ) -> EGcdResult:
        if a <= 0 or b <= 0:
            raise InvalidArgumentError("a and b MUST be > 0")
        a, b = MPC.mpz(a), MPC.mpz(b)

        x, y = MPC.mpz(0), MPC.mpz(1)
        u, v = MPC.mpz(1), MPC.mpz(0)
        while a != 0:
            q, r = b // a, b % a
            m, n = x - u * q, y - v * q
            b, a = a, r
            x, y = u, v
            u, v = m, n
        return EGcdResult(b, x, y)

    @staticmethod
    def gcd(a: MPZ, b: MPZ) -> MPZ:
        a = BigIntMath.abs(MPC.mpz(a))
        b = BigIntMath.abs(MPC.mpz(b))
        if a == 0:
            return b
        if b == 0:
            return a

        # Factor out the powers of two both operands share
        shift = 0
        while ((a | b) & 1) == 0:
            a >>= 1
            b >>= 1
            shift += 1

        while (a & 1) == 0:
            a >>= 1
        # a is odd from here on
        while b != 0:
            while (b & 1) == 0:
                b >>= 1
            if a > b:
                a, b = b, a
            b -= a

        return a << shift

    @staticmethod
    def lcm(a: MPZ, b: MPZ) -> MPZ:
        a, b = MPC.mpz(a), MPC.mpz(b)
        if a == 0 and b == 0:
            return MPC.mpz(0)
        return BigIntMath.abs((a // BigIntMath.gcd(a, b)) * b)

    @staticmethod
    def to_zn(a: MPZ, n: MPZ) -> MPZ:
        if n <= 0:
            raise InvalidArgumentError("n MUST be > 0")
        a_zn = MPC.mpz(a) % n
        return a_zn + n if a_zn < 0 else a_zn

    @staticmethod
    def mod_inv(a: MPZ, n: MPZ) -> MPZ:
        egcd = BigIntMath.e_gcd(BigIntMath.to_zn(a, n), n)
        if egcd.g != 1:
            raise NoInverseExistsError(a, n)
        return BigIntMath.to_zn(egcd.x, n)

    @staticmethod
    def mod_pow(b: MPZ, e: MPZ, n: MPZ) -> MPZ:
        if n <= 0:
            raise InvalidArgumentError("n MUST be > 0")
        if n == 1:
            return MPC.mpz(0)

        b = BigIntMath.to_zn(b, n)
        e = MPC.mpz(e)
        if e < 0:
            return BigIntMath.mod_inv(BigIntMath.mod_pow(b, BigIntMath.abs(e), n), n)

        # Right-to-left square and multiply
        r = MPC.mpz(1)
        while e > 0:
            if e & 1:
                r = r * b % n
            e >>= 1
            b = b * b % n
        return r
