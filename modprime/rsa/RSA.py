import logging
from typing import Optional, Self

from ..bigint_math import BigIntMath
from ..errors import InvalidArgumentError, NoInverseExistsError
from ..mpc import MPC
from ..mpc.types import MPZ
from ..primes import Primes
from ..protocol_constants import DEFAULT_ITERATIONS, RSA_PUBLIC_EXPONENT
from ..utils.ExecutionCapability import ExecutionCapability
from .abstract.IRSA import IRSA

logger = logging.getLogger(__name__)


class RSA(IRSA):
    """Implementation of RSA key parameters."""

    def __init__(self, p: MPZ, q: MPZ, e: MPZ = RSA_PUBLIC_EXPONENT) -> None:
        """Initialize RSA from two primes.

        Args:
            p (MPZ): First prime factor
            q (MPZ): Second prime factor, different from p
            e (MPZ): Public exponent, must be invertible modulo φ(N)

        Raises:
            InvalidArgumentError: If p == q
            NoInverseExistsError: If e shares a factor with φ(N)
        """
        if p == q:
            raise InvalidArgumentError("p and q MUST be distinct")
        self._p = MPC.mpz(p)
        self._q = MPC.mpz(q)
        self._e = MPC.mpz(e)

        # Calculate modulus N, the totients and the private exponent
        self._N = self._calculate_N()
        self._phi = self._calculate_phi()
        self._lambda = self._calculate_lambda()
        self._d = BigIntMath.mod_inv(self._e, self._phi)

    @classmethod
    async def generate(
        cls,
        bit_size: int,
        iterations: int = DEFAULT_ITERATIONS,
        capability: Optional[ExecutionCapability] = None,
    ) -> Self:
        """Generate RSA parameters, racing worker processes for each prime.

        Args:
            bit_size (int): Number of bits for RSA modulus.
                          Each prime will be bit_size/2 bits.
            iterations (int): Miller-Rabin rounds per candidate
            capability (ExecutionCapability): Available parallelism, detected if None
        """
        prime_size = cls._prime_size(bit_size)
        while True:
            p = await Primes.generate_prime(prime_size, iterations, capability)
            q = await Primes.generate_prime(prime_size, iterations, capability)
            rsa = cls._try_build(p, q)
            if rsa is not None:
                return rsa

    @classmethod
    def generate_sync(cls, bit_size: int, iterations: int = DEFAULT_ITERATIONS) -> Self:
        """Sequential version of generate()."""
        prime_size = cls._prime_size(bit_size)
        while True:
            p = Primes.generate_prime_sync(prime_size, iterations)
            q = Primes.generate_prime_sync(prime_size, iterations)
            rsa = cls._try_build(p, q)
            if rsa is not None:
                return rsa

    def get_p(self) -> MPZ:
        return self._p

    def get_q(self) -> MPZ:
        return self._q

    def get_N(self) -> MPZ:
        return self._N

    def get_phi(self) -> MPZ:
        return self._phi

    def get_eulers_totient(self) -> MPZ:
        return self.get_phi()

    def get_carmichael_totient(self) -> MPZ:
        return self._lambda

    def get_e(self) -> MPZ:
        return self._e

    def get_d(self) -> MPZ:
        return self._d

    # Private methods
    # --------------

    @staticmethod
    def _prime_size(bit_size: int) -> int:
        if bit_size < 4:
            raise InvalidArgumentError("bit_size MUST be >= 4")
        return bit_size // 2

    @classmethod
    def _try_build(cls, p: MPZ, q: MPZ) -> Optional[Self]:
        """Build from a freshly drawn pair, or None if the pair must be redrawn."""
        if p == q:
            logger.debug("Drew the same prime twice, retrying")
            return None
        try:
            return cls(p, q)
        except NoInverseExistsError:
            logger.debug("Public exponent not invertible modulo phi, retrying")
            return None

    def _calculate_N(self) -> MPZ:
        """Calculate the RSA modulus N = p * q."""
        return MPC.mpz(self._p * self._q)

    def _calculate_phi(self) -> MPZ:
        """Calculate Euler's totient φ(N) = (p-1)(q-1)."""
        return MPC.mpz((self._p - 1) * (self._q - 1))

    def _calculate_lambda(self) -> MPZ:
        """Calculate Carmichael's totient λ(N) = lcm(p-1, q-1)."""
        return BigIntMath.lcm(self._p - 1, self._q - 1)
