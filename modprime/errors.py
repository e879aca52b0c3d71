"""Exceptions raised by modprime."""


class ModPrimeError(Exception):
    pass


class InvalidArgumentError(ModPrimeError, ValueError):
    """An argument is outside the domain of the operation (non-positive
    length or modulus, empty sampling interval, negative candidate...)."""


class NoInverseExistsError(ModPrimeError, ArithmeticError):
    """The operand shares a non-trivial factor with the modulus."""

    def __init__(self, a, n):
        super().__init__(f"{a} does not have inverse modulo {n}")
        self.a = a
        self.n = n
