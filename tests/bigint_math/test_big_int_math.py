import pytest
from gmpy2 import mpz

from modprime.bigint_math import BigIntMath, EGcdResult
from modprime.errors import InvalidArgumentError, NoInverseExistsError
from modprime.mpc import MPC


PAIRS = [
    (mpz(12), mpz(8)),
    (mpz(8), mpz(12)),
    (mpz(17), mpz(5)),
    (mpz(1), mpz(1)),
    (mpz(2) ** 64, mpz(6) ** 20),
    (mpz(123456789012345678901234567890), mpz(987654321098765432109876543210)),
]


def test_abs_max_min():
    """Test the trivial comparisons on positive and negative values."""
    assert BigIntMath.abs(mpz(-5)) == 5
    assert BigIntMath.abs(mpz(5)) == 5
    assert BigIntMath.abs(mpz(0)) == 0
    assert BigIntMath.max(mpz(3), mpz(-7)) == 3
    assert BigIntMath.min(mpz(3), mpz(-7)) == -7
    assert BigIntMath.max(mpz(4), mpz(4)) == 4


@pytest.mark.parametrize(
    "value, expected",
    [(1, 1), (2, 2), (3, 2), (255, 8), (256, 9), (2**521 - 1, 521)],
)
def test_bit_length(value, expected):
    """Test bit_length against known boundaries."""
    assert BigIntMath.bit_length(MPC.mpz(value)) == expected


@pytest.mark.parametrize("value", [0, -1])
def test_bit_length_rejects_non_positive(value):
    """Test that bit_length requires a >= 1."""
    with pytest.raises(InvalidArgumentError):
        BigIntMath.bit_length(MPC.mpz(value))


def test_e_gcd_known_values():
    """Test e_gcd(12, 8) yields g=4 and a valid Bezout identity."""
    result = BigIntMath.e_gcd(mpz(12), mpz(8))
    assert isinstance(result, EGcdResult)
    assert result.g == 4
    assert 12 * result.x + 8 * result.y == 4


@pytest.mark.parametrize("a, b", PAIRS)
def test_e_gcd_bezout_identity(a, b):
    """Test that a*x + b*y == g and g == gcd(a, b)."""
    g, x, y = BigIntMath.e_gcd(a, b)
    assert a * x + b * y == g
    assert g == BigIntMath.gcd(a, b)


@pytest.mark.parametrize("a, b", [(0, 5), (5, 0), (-3, 5), (5, -3)])
def test_e_gcd_rejects_non_positive(a, b):
    """Test that e_gcd requires both operands to be positive."""
    with pytest.raises(InvalidArgumentError):
        BigIntMath.e_gcd(MPC.mpz(a), MPC.mpz(b))


@pytest.mark.parametrize("a, b", PAIRS + [(mpz(-12), mpz(18)), (mpz(-12), mpz(-18))])
def test_gcd_is_symmetric_and_non_negative(a, b):
    """Test gcd(a, b) == gcd(b, a) >= 0."""
    assert BigIntMath.gcd(a, b) == BigIntMath.gcd(b, a)
    assert BigIntMath.gcd(a, b) >= 0


@pytest.mark.parametrize("a", [mpz(0), mpz(7), mpz(-7), mpz(2) ** 100])
def test_gcd_with_zero(a):
    """Test gcd(a, 0) == abs(a)."""
    assert BigIntMath.gcd(a, mpz(0)) == BigIntMath.abs(a)
    assert BigIntMath.gcd(mpz(0), a) == BigIntMath.abs(a)


def test_gcd_known_values():
    """Test the binary gcd on values with shared and unshared powers of two."""
    assert BigIntMath.gcd(mpz(12), mpz(8)) == 4
    assert BigIntMath.gcd(mpz(-48), mpz(180)) == 12
    assert BigIntMath.gcd(mpz(17), mpz(5)) == 1
    assert BigIntMath.gcd(mpz(2) ** 40 * 3, mpz(2) ** 35 * 9) == mpz(2) ** 35 * 3


def test_lcm():
    """Test lcm, including the both-zero case."""
    assert BigIntMath.lcm(mpz(4), mpz(6)) == 12
    assert BigIntMath.lcm(mpz(-4), mpz(6)) == 12
    assert BigIntMath.lcm(mpz(0), mpz(0)) == 0
    assert BigIntMath.lcm(mpz(0), mpz(5)) == 0
    assert BigIntMath.lcm(mpz(21), mpz(6)) == 42


@pytest.mark.parametrize("a", [-25, -1, 0, 1, 6, 7, 8, 10**30, -(10**30)])
def test_to_zn_range_and_periodicity(a):
    """Test to_zn(a, n) lies in [0, n) and to_zn(a, n) == to_zn(a + n, n)."""
    n = mpz(7)
    a = MPC.mpz(a)
    r = BigIntMath.to_zn(a, n)
    assert 0 <= r < n
    assert r == BigIntMath.to_zn(a + n, n)
    assert (a - r) % n == 0


@pytest.mark.parametrize("n", [0, -7])
def test_to_zn_rejects_non_positive_modulus(n):
    """Test that to_zn requires n > 0."""
    with pytest.raises(InvalidArgumentError):
        BigIntMath.to_zn(mpz(3), MPC.mpz(n))


def test_mod_inv_known_values():
    """Test mod_inv(4, 7) == 2."""
    assert BigIntMath.mod_inv(mpz(4), mpz(7)) == 2
    assert BigIntMath.mod_inv(mpz(-3), mpz(7)) == 2


@pytest.mark.parametrize(
    "a, n",
    [(4, 7), (3, 11), (10, 17), (65537, 2**64 - 59), (2**127 - 1, 2**89 - 1)],
)
def test_mod_inv_inverts(a, n):
    """Test a * mod_inv(a, n) == 1 (mod n) for coprime a and n."""
    a, n = MPC.mpz(a), MPC.mpz(n)
    inv = BigIntMath.mod_inv(a, n)
    assert 0 <= inv < n
    assert (a * inv) % n == 1


@pytest.mark.parametrize("a, n", [(4, 8), (6, 9), (-10, 25)])
def test_mod_inv_no_inverse(a, n):
    """Test that mod_inv fails when a shares a factor with n."""
    with pytest.raises(NoInverseExistsError):
        BigIntMath.mod_inv(MPC.mpz(a), MPC.mpz(n))


@pytest.mark.parametrize("a, n", [(0, 7), (14, 7), (6, 1)])
def test_mod_inv_multiple_of_modulus(a, n):
    """Test that a zero residue is rejected by e_gcd as an invalid argument."""
    with pytest.raises(InvalidArgumentError):
        BigIntMath.mod_inv(MPC.mpz(a), MPC.mpz(n))


def test_mod_pow_known_value():
    """Test mod_pow(4, 13, 497) == 445."""
    assert BigIntMath.mod_pow(mpz(4), mpz(13), mpz(497)) == 445


@pytest.mark.parametrize(
    "b, e, n",
    [(4, 13, 497), (-4, 13, 497), (2, 10**6, 10**9 + 7), (3, 0, 5), (0, 0, 5), (12345, 678, 2**61 - 1)],
)
def test_mod_pow_matches_builtin(b, e, n):
    """Test mod_pow agrees with the builtin three-argument pow and lies in [0, n)."""
    r = BigIntMath.mod_pow(MPC.mpz(b), MPC.mpz(e), MPC.mpz(n))
    assert 0 <= r < n
    assert r == pow(b, e, n)


def test_mod_pow_zero_exponent_and_unit_modulus():
    """Test mod_pow(b, 0, n) == 1 for n > 1 and mod_pow(b, e, 1) == 0."""
    assert BigIntMath.mod_pow(mpz(9), mpz(0), mpz(10)) == 1
    assert BigIntMath.mod_pow(mpz(9), mpz(5), mpz(1)) == 0


def test_mod_pow_negative_exponent():
    """Test mod_pow(b, -e, n) == mod_inv(mod_pow(b, e, n), n)."""
    b, e, n = mpz(3), mpz(5), mpz(7)
    expected = BigIntMath.mod_inv(BigIntMath.mod_pow(b, e, n), n)
    assert BigIntMath.mod_pow(b, -e, n) == expected
    assert (BigIntMath.mod_pow(b, -e, n) * BigIntMath.mod_pow(b, e, n)) % n == 1


def test_mod_pow_negative_exponent_without_inverse():
    """Test that a negative exponent fails when the power is not invertible."""
    with pytest.raises(NoInverseExistsError):
        BigIntMath.mod_pow(mpz(2), mpz(-1), mpz(6))
    with pytest.raises(InvalidArgumentError):
        BigIntMath.mod_pow(mpz(2), mpz(-3), mpz(8))


@pytest.mark.parametrize("n", [0, -5])
def test_mod_pow_rejects_non_positive_modulus(n):
    """Test that mod_pow requires n > 0."""
    with pytest.raises(InvalidArgumentError):
        BigIntMath.mod_pow(mpz(2), mpz(3), MPC.mpz(n))
