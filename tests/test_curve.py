import pytest

from ecelgamal.curve import (
    INFINITY,
    CurveParams,
    Point,
    inverse_mod,
    is_on_curve,
    point_add,
    point_double,
    point_neg,
    point_on_curve,
    require_on_curve,
    scalar_multiply,
)
from ecelgamal.errors import ArithmeticSingularity, InvalidCurveParams, PointNotOnCurve

# multiples k·G of G = (3, 10) on the toy curve (group order 28)
TOY_MULTIPLES = {
    1: (3, 10),
    2: (7, 12),
    3: (19, 5),
    4: (17, 3),
    5: (9, 16),
    6: (12, 4),
    7: (11, 3),
    9: (0, 1),
    12: (5, 4),
    14: (4, 0),
    21: (11, 20),
}

SECP_2G = (
    0xC6047F9441ED7D6D3045406E95C07CD85C778E4B8CEF3CA7ABAC09B95C709EE5,
    0x1AE168FEA63DC339A3C58419466CEAEEF7F632653266D0E1236431A950CFE52A,
)


# ── Point ───────────────────────────────────────────────────────────────

def test_infinity_is_distinct_from_origin():
    assert INFINITY.is_infinity()
    assert Point(0, 0) != INFINITY
    assert not Point(0, 0).is_infinity()
    assert Point.infinity() == INFINITY


def test_infinity_has_no_coordinates():
    with pytest.raises(ArithmeticSingularity):
        INFINITY.x
    with pytest.raises(ArithmeticSingularity):
        INFINITY.y
    assert INFINITY.coords() is None


def test_point_is_immutable_value():
    P = Point(3, 10)
    with pytest.raises(AttributeError):
        P._x = 4
    assert P == Point.affine(3, 10)
    assert hash(P) == hash(Point(3, 10))
    assert len({P, Point(3, 10), INFINITY, Point.infinity()}) == 2


def test_point_constructor_rejects_half_points():
    with pytest.raises(ValueError):
        Point(1, None)
    with pytest.raises(ValueError):
        Point(1, 2, infinity=True)


# ── CurveParams ─────────────────────────────────────────────────────────

def test_toy_base_point_on_curve(toy):
    assert is_on_curve(toy, 3, 10)
    assert is_on_curve(toy, toy.G.x, toy.G.y)
    assert not is_on_curve(toy, 3, 11)


def test_presets_satisfy_on_curve_invariant(toy, secp, nist):
    for params in (toy, secp, nist):
        assert is_on_curve(params, params.gx, params.gy)
        assert point_on_curve(params, params.G)


def test_base_point_off_curve_rejected():
    with pytest.raises(InvalidCurveParams, match="not on the curve"):
        CurveParams(p=23, a=1, b=1, gx=3, gy=11, n=29)


def test_origin_base_point_judged_by_curve_equation(zero_curve):
    # (0, 0) does not satisfy y² = x³ + x + 1, whatever the raw check says
    with pytest.raises(InvalidCurveParams, match="not on the curve"):
        CurveParams(p=23, a=1, b=1, gx=0, gy=0, n=29)
    assert point_on_curve(zero_curve, zero_curve.G)


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(p=3, a=1, b=1, gx=0, gy=1, n=5),
        dict(p=23, a=23, b=1, gx=3, gy=10, n=29),
        dict(p=23, a=1, b=-1, gx=3, gy=10, n=29),
        dict(p=23, a=1, b=1, gx=26, gy=10, n=29),
        dict(p=23, a=1, b=1, gx=3, gy=10, n=1),
    ],
)
def test_invalid_parameters_rejected(kwargs):
    with pytest.raises(InvalidCurveParams):
        CurveParams(**kwargs)


def test_curve_params_immutable(toy):
    with pytest.raises(AttributeError):
        toy.p = 29


def test_curve_params_dict_round_trip(secp):
    assert CurveParams.from_dict(secp.to_dict()) == secp


def test_from_dict_accepts_decimal_and_hex_strings():
    params = CurveParams.from_dict(
        {"p": "23", "a": "0x1", "b": 1, "gx": "3", "gy": "0xa", "n": "29"}
    )
    assert (params.p, params.a, params.gy) == (23, 1, 10)


def test_from_dict_reports_missing_fields():
    with pytest.raises(InvalidCurveParams, match="gx, gy"):
        CurveParams.from_dict({"p": 23, "a": 1, "b": 1, "n": 29})


def test_from_dict_rejects_garbage():
    with pytest.raises(InvalidCurveParams):
        CurveParams.from_dict(
            {"p": "twenty-three", "a": 1, "b": 1, "gx": 3, "gy": 10, "n": 29}
        )


# ── on-curve checks and the (0, 0) sentinel ─────────────────────────────

def test_legacy_sentinel_accepted_by_raw_check(toy):
    # (0, 0) is not on y² = x³ + x + 1, the raw predicate still accepts it
    assert is_on_curve(toy, 0, 0)
    assert not point_on_curve(toy, Point(0, 0))


def test_origin_is_an_ordinary_point_when_on_curve(zero_curve):
    origin = Point(0, 0)
    assert point_on_curve(zero_curve, origin)
    assert point_add(zero_curve, origin, INFINITY) == origin
    assert point_add(zero_curve, INFINITY, origin) == origin


def test_require_on_curve(toy):
    assert require_on_curve(toy, toy.G) == toy.G
    assert require_on_curve(toy, INFINITY) is INFINITY
    with pytest.raises(PointNotOnCurve):
        require_on_curve(toy, Point(3, 11))
    with pytest.raises(PointNotOnCurve):
        require_on_curve(toy, Point(3 + 23, 10))


# ── field helpers ───────────────────────────────────────────────────────

def test_inverse_mod():
    for k in range(1, 23):
        assert k * inverse_mod(k, 23) % 23 == 1
    assert inverse_mod(-1, 23) == 22
    with pytest.raises(ArithmeticSingularity):
        inverse_mod(0, 23)
    with pytest.raises(ArithmeticSingularity):
        inverse_mod(46, 23)


# ── group law ───────────────────────────────────────────────────────────

def test_identity_laws(toy):
    P = Point(*TOY_MULTIPLES[5])
    assert point_add(toy, P, INFINITY) == P
    assert point_add(toy, INFINITY, P) == P
    assert point_add(toy, INFINITY, INFINITY) == INFINITY


def test_add_inverse_gives_infinity(toy):
    G = toy.G
    assert point_neg(toy, G) == Point(3, 13)
    assert point_add(toy, G, point_neg(toy, G)) == INFINITY
    assert point_neg(toy, INFINITY) == INFINITY


def test_doubling_and_addition_match_known_multiples(toy):
    G = toy.G
    assert point_double(toy, G) == Point(*TOY_MULTIPLES[2])
    assert point_add(toy, G, Point(*TOY_MULTIPLES[2])) == Point(*TOY_MULTIPLES[3])
    assert point_add(toy, Point(*TOY_MULTIPLES[3]), Point(*TOY_MULTIPLES[4])) == Point(
        *TOY_MULTIPLES[7]
    )


def test_results_are_normalised(toy):
    for a in TOY_MULTIPLES.values():
        for b in TOY_MULTIPLES.values():
            if a == b == TOY_MULTIPLES[14]:
                continue
            R = point_add(toy, Point(*a), Point(*b))
            if not R.is_infinity():
                assert 0 <= R.x < 23 and 0 <= R.y < 23
                assert point_on_curve(toy, R)


def test_doubling_point_with_zero_y_is_singular(toy, zero_curve):
    two_torsion = Point(*TOY_MULTIPLES[14])
    with pytest.raises(ArithmeticSingularity):
        point_double(toy, two_torsion)
    with pytest.raises(ArithmeticSingularity):
        point_double(zero_curve, Point(0, 0))


def test_point_add_does_not_mutate_inputs(toy):
    P, Q = Point(3, 10), Point(7, 12)
    point_add(toy, P, Q)
    assert P == Point(3, 10) and Q == Point(7, 12)


def test_secp256k1_doubling(secp):
    assert point_double(secp, secp.G) == Point(*SECP_2G)


# ── scalar multiplication ───────────────────────────────────────────────

@pytest.mark.parametrize("k,expected", sorted(TOY_MULTIPLES.items()))
def test_scalar_multiply_known_values(toy, k, expected):
    assert scalar_multiply(toy, toy.G, k) == Point(*expected)


def test_scalar_multiply_zero_and_identity(toy):
    assert scalar_multiply(toy, toy.G, 0) == INFINITY
    assert scalar_multiply(toy, INFINITY, 5) == INFINITY


def test_scalar_multiply_group_order(toy, secp):
    assert scalar_multiply(toy, toy.G, 28) == INFINITY
    assert scalar_multiply(toy, toy.G, 29) == toy.G
    assert scalar_multiply(secp, secp.G, secp.n) == INFINITY
    assert scalar_multiply(secp, secp.G, secp.n - 1) == point_neg(secp, secp.G)


def test_scalar_multiply_rejects_negative(toy):
    with pytest.raises(ValueError):
        scalar_multiply(toy, toy.G, -1)


def test_scalar_multiply_distributes_over_addition(toy):
    G = toy.G
    for k1 in range(0, 31):
        for k2 in range(0, 31):
            if k1 % 28 == 14 and k2 % 28 == 14:
                continue  # would double the 2-torsion point
            lhs = scalar_multiply(toy, G, k1 + k2)
            rhs = point_add(
                toy, scalar_multiply(toy, G, k1), scalar_multiply(toy, G, k2)
            )
            assert lhs == rhs, (k1, k2)


def test_scalar_multiply_consistency_on_secp256k1(secp, seeded):
    for _ in range(4):
        k1 = seeded.random_scalar(secp.n)
        k2 = seeded.random_scalar(secp.n)
        lhs = scalar_multiply(secp, secp.G, k1 + k2)
        rhs = point_add(
            secp, scalar_multiply(secp, secp.G, k1), scalar_multiply(secp, secp.G, k2)
        )
        assert lhs == rhs


def test_p256_uses_reduced_a(nist):
    assert nist.a == nist.p - 3
    assert scalar_multiply(nist, nist.G, nist.n) == INFINITY
    assert point_on_curve(nist, scalar_multiply(nist, nist.G, 0xDEADBEEF))
