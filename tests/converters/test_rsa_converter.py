from gmpy2 import mpz

from modprime.converters import RSAConverter
from modprime.rsa import RSA


def test_convert_rsa_to_dict():
    """Test conversion of an RSA instance to hex strings."""
    rsa = RSA(mpz(61), mpz(53), mpz(17))
    data = RSAConverter.to_dict(rsa)

    assert data == {
        "p": "3d",
        "q": "35",
        "N": "ca1",
        "phi": "c30",
        "e": "11",
        "d": "ac1",
    }
    assert all(int(value, 16) >= 0 for value in data.values())
