import asyncio
import secrets

from ..bigint_math import BigIntMath
from ..errors import InvalidArgumentError
from ..mpc import MPC
from ..mpc.types import MPZ
from .abstract.ISecureRandom import ISecureRandom


class SecureRandom(ISecureRandom):
    """Implementation of secure random number generation on top of the OS CSPRNG."""

    @staticmethod
    def random_bytes_sync(byte_length: int, force_top_bit: bool = False) -> bytes:
        if byte_length < 1:
            raise InvalidArgumentError("byte_length MUST be > 0")

        buf = bytearray(secrets.token_bytes(byte_length))
        # A leading zero byte would silently shorten the value
        if force_top_bit:
            buf[0] |= 0x80
        return bytes(buf)

    @staticmethod
    async def random_bytes(byte_length: int, force_top_bit: bool = False) -> bytes:
        if byte_length < 1:
            raise InvalidArgumentError("byte_length MUST be > 0")
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, SecureRandom.random_bytes_sync, byte_length, force_top_bit
        )

    @staticmethod
    def random_bits_sync(bit_length: int, force_top_bit: bool = False) -> bytes:
        if bit_length < 1:
            raise InvalidArgumentError("bit_length MUST be > 0")

        byte_length = (bit_length + 7) // 8
        buf = bytearray(SecureRandom.random_bytes_sync(byte_length, False))
        return SecureRandom._fit_to_bit_length(buf, bit_length, force_top_bit)

    @staticmethod
    async def random_bits(bit_length: int, force_top_bit: bool = False) -> bytes:
        if bit_length < 1:
            raise InvalidArgumentError("bit_length MUST be > 0")

        byte_length = (bit_length + 7) // 8
        buf = bytearray(await SecureRandom.random_bytes(byte_length, False))
        return SecureRandom._fit_to_bit_length(buf, bit_length, force_top_bit)

    @staticmethod
    def uniform_between(max: MPZ, min: MPZ = 1) -> MPZ:
        if max <= min:
            raise InvalidArgumentError("Arguments MUST be: max > min")

        interval = MPC.mpz(max) - min
        bit_len = BigIntMath.bit_length(interval)
        # Rejection sampling, reducing modulo interval would bias low values
        while True:
            rnd = MPC.from_bytes(SecureRandom.random_bits_sync(bit_len))
            if rnd <= interval:
                return rnd + min

    # Private Methods
    # --------------

    @staticmethod
    def _fit_to_bit_length(buf: bytearray, bit_length: int, force_top_bit: bool) -> bytes:
        """Zero the excess high-order bits and optionally set the top valid bit."""
        bit_length_mod8 = bit_length % 8
        if bit_length_mod8 != 0:
            buf[0] &= (1 << bit_length_mod8) - 1
        if force_top_bit:
            buf[0] |= (1 << (bit_length_mod8 - 1)) if bit_length_mod8 != 0 else 0x80
        return bytes(buf)
