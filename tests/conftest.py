import pytest

from ecelgamal.curve import CurveParams
from ecelgamal.curves import p256, secp256k1, toy23
from ecelgamal.keys import keypair_from_private
from ecelgamal.rng import SeededScalarSource


@pytest.fixture
def toy():
    """y² = x³ + x + 1 over F_23, G = (3, 10)."""
    return toy23()


@pytest.fixture
def secp():
    return secp256k1()


@pytest.fixture
def nist():
    return p256()


@pytest.fixture
def zero_curve():
    """y² = x³ + x over F_23: the affine point (0, 0) lies on it."""
    return CurveParams(p=23, a=1, b=0, gx=0, gy=0, n=2, name="zero23")


@pytest.fixture
def seeded():
    return SeededScalarSource(20240601)


@pytest.fixture
def secp_keys(secp):
    return keypair_from_private(secp, 0xC0FFEE1234567890ABCDEF)
