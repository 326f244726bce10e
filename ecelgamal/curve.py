"""
Affine elliptic-curve arithmetic over a prime field.

Curves are in short Weierstrass form

    y² = x³ + a·x + b   (mod p)

and described by an immutable :class:`CurveParams` that also fixes a base
point *G* and its order *n*.  Points are immutable :class:`Point` values;
every operation returns a new point.

The point at infinity is a separate tag, not a coordinate pair, so the
affine point ``(0, 0)`` (which lies on any curve with ``b = 0``) is never
mistaken for the identity.

Arithmetic is plain Python ``int`` and makes no constant-time claim: the
double-and-add loop branches on scalar bits.

References
----------
- SEC 1 v2 §2.2.1   elliptic curves over F_p
- Hankerson, Menezes, Vanstone, *Guide to ECC*, Alg. 3.26 (right-to-left
  binary method)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import ArithmeticSingularity, InvalidCurveParams, PointNotOnCurve

logger = logging.getLogger(__name__)


# ── Point  (tagged: identity | affine) ──────────────────────────────────
class Point:
    """
    Point on a short Weierstrass curve.

    The identity (point at infinity) is represented by a flag rather than
    by sentinel coordinates; this matches the algebraic convention
    *P + O = P* and keeps ``(0, 0)`` usable as an ordinary affine point.
    """

    __slots__ = ("_x", "_y", "_inf")

    def __init__(
        self,
        x: Optional[int] = None,
        y: Optional[int] = None,
        *,
        infinity: bool = False,
    ) -> None:
        if infinity:
            if x is not None or y is not None:
                raise ValueError("identity point takes no coordinates")
        elif x is None or y is None:
            raise ValueError("affine point needs both coordinates")
        self._x = x
        self._y = y
        self._inf = infinity

    # constructors -----------------------------------------------------------
    @classmethod
    def infinity(cls) -> Point:
        """Point at infinity — additive identity."""
        return cls(infinity=True)

    @classmethod
    def affine(cls, x: int, y: int) -> Point:
        return cls(int(x), int(y))

    # accessors --------------------------------------------------------------
    @property
    def x(self) -> int:
        if self._inf:
            raise ArithmeticSingularity("point at infinity has no x-coordinate")
        return self._x  # type: ignore[return-value]

    @property
    def y(self) -> int:
        if self._inf:
            raise ArithmeticSingularity("point at infinity has no y-coordinate")
        return self._y  # type: ignore[return-value]

    def is_infinity(self) -> bool:
        return self._inf

    def coords(self) -> Optional[tuple]:
        """``(x, y)`` for an affine point, ``None`` for the identity."""
        if self._inf:
            return None
        return (self._x, self._y)

    # immutability -----------------------------------------------------------
    def __setattr__(self, name: str, value: Any) -> None:
        if hasattr(self, "_inf"):
            raise AttributeError("Point is immutable")
        object.__setattr__(self, name, value)

    # comparison / hashing ---------------------------------------------------
    def __eq__(self, o: object) -> bool:
        if not isinstance(o, Point):
            return NotImplemented
        if self._inf or o._inf:
            return self._inf and o._inf
        return self._x == o._x and self._y == o._y

    def __hash__(self) -> int:
        if self._inf:
            return hash(("Point", None))
        return hash(("Point", self._x, self._y))

    def __repr__(self) -> str:
        if self._inf:
            return "Point(∞)"
        return f"Point({self._x}, {self._y})"


INFINITY = Point.infinity()


# ── CurveParams ─────────────────────────────────────────────────────────
def _as_int(value: Any, field: str) -> int:
    """Accept ints, decimal strings and ``0x`` hex strings."""
    if isinstance(value, bool):
        raise InvalidCurveParams(f"{field}: expected integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value.strip(), 0)
        except ValueError:
            raise InvalidCurveParams(f"{field}: not an integer: {value!r}") from None
    raise InvalidCurveParams(f"{field}: expected integer, got {type(value).__name__}")


@dataclass(frozen=True)
class CurveParams:
    """
    Immutable description of  y² = x³ + a·x + b  over F_p  with base
    point  G = (gx, gy)  of order  n.

    Construction validates the parameters and rejects a base point that
    does not satisfy the curve equation; a successfully built instance is
    safe to share between threads.

    Raises
    ------
    InvalidCurveParams
        If ``p ≤ 3``, a coefficient or coordinate lies outside ``[0, p-1]``,
        ``n ≤ 1``, or *G* is not on the curve.
    """

    p: int
    a: int
    b: int
    gx: int
    gy: int
    n: int
    name: str = ""

    def __post_init__(self) -> None:
        label = self.name or "curve"
        if self.p <= 3:
            raise InvalidCurveParams(f"{label}: modulus p must exceed 3, got {self.p}")
        for field in ("a", "b", "gx", "gy"):
            v = getattr(self, field)
            if not 0 <= v < self.p:
                raise InvalidCurveParams(
                    f"{label}: {field} = {v} outside [0, p-1]"
                )
        if self.n <= 1:
            raise InvalidCurveParams(f"{label}: base point order n must exceed 1")
        if not point_on_curve(self, Point(self.gx, self.gy)):
            raise InvalidCurveParams(
                f"{label}: base point ({self.gx}, {self.gy}) is not on the curve"
            )
        logger.debug("curve %s validated (%d-bit field)", label, self.field_bits)

    # constructors -----------------------------------------------------------
    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> CurveParams:
        """Build from a mapping with keys ``p, a, b, gx, gy, n[, name]``."""
        missing = [k for k in ("p", "a", "b", "gx", "gy", "n") if k not in data]
        if missing:
            raise InvalidCurveParams(f"missing curve fields: {', '.join(missing)}")
        return cls(
            p=_as_int(data["p"], "p"),
            a=_as_int(data["a"], "a"),
            b=_as_int(data["b"], "b"),
            gx=_as_int(data["gx"], "gx"),
            gy=_as_int(data["gy"], "gy"),
            n=_as_int(data["n"], "n"),
            name=str(data.get("name", "")),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "p": hex(self.p),
            "a": hex(self.a),
            "b": hex(self.b),
            "gx": hex(self.gx),
            "gy": hex(self.gy),
            "n": hex(self.n),
        }

    # derived ----------------------------------------------------------------
    @property
    def G(self) -> Point:
        """Base point."""
        return Point(self.gx, self.gy)

    @property
    def field_bits(self) -> int:
        return self.p.bit_length()

    def is_field_element(self, v: int) -> bool:
        return 0 <= v < self.p

    def __repr__(self) -> str:
        if self.name:
            return f"CurveParams({self.name})"
        return f"CurveParams(p={self.p}, a={self.a}, b={self.b})"


# ── validity ────────────────────────────────────────────────────────────
def is_on_curve(params: CurveParams, x: int, y: int) -> bool:
    """
    Curve-equation test on raw coordinates.

    The coordinate pair ``(0, 0)`` is accepted unconditionally: older
    callers used it as the encoding of the point at infinity.  Code that
    holds a :class:`Point` should call :func:`point_on_curve` instead,
    which judges ``(0, 0)`` by the equation.
    """
    if x == 0 and y == 0:
        return True
    p = params.p
    return (y * y - (x * x * x + params.a * x + params.b)) % p == 0


def point_on_curve(params: CurveParams, P: Point) -> bool:
    if P.is_infinity():
        return True
    x, y = P.x, P.y
    if not (params.is_field_element(x) and params.is_field_element(y)):
        return False
    return (y * y - (x * x * x + params.a * x + params.b)) % params.p == 0


def require_on_curve(params: CurveParams, P: Point, what: str = "point") -> Point:
    """Return *P* unchanged, or raise ``PointNotOnCurve``."""
    if not point_on_curve(params, P):
        raise PointNotOnCurve(f"{what} {P!r} is not on {params!r}")
    return P


# ── field helpers ───────────────────────────────────────────────────────
def inverse_mod(k: int, p: int) -> int:
    """Multiplicative inverse of *k* modulo prime *p*."""
    k %= p
    if k == 0:
        raise ArithmeticSingularity(f"no inverse of 0 modulo {p}")
    return pow(k, -1, p)


# ── group law ───────────────────────────────────────────────────────────
def point_neg(params: CurveParams, P: Point) -> Point:
    if P.is_infinity():
        return P
    return Point(P.x, (-P.y) % params.p)


def point_add(params: CurveParams, P: Point, Q: Point) -> Point:
    """
    Affine addition  P + Q.

    Handles the identity on either side and the vertical-line case
    (``P.x == Q.x``, ``P.y != Q.y``) which yields the identity.  Equal
    inputs take the tangent (doubling) slope.

    Raises ``ArithmeticSingularity`` when doubling a point with ``y = 0``:
    the tangent is vertical and ``2·y`` has no inverse.
    """
    if P.is_infinity():
        return Q
    if Q.is_infinity():
        return P

    p = params.p
    x1, y1 = P.x, P.y
    x2, y2 = Q.x, Q.y

    if x1 == x2 and y1 != y2:
        return INFINITY

    if x1 == x2:
        s = (3 * x1 * x1 + params.a) * inverse_mod(2 * y1, p) % p
        x3 = (s * s - 2 * x1) % p
    else:
        s = (y2 - y1) * inverse_mod(x2 - x1, p) % p
        x3 = (s * s - x1 - x2) % p
    y3 = (s * (x1 - x3) - y1) % p
    return Point(x3, y3)


def point_double(params: CurveParams, P: Point) -> Point:
    return point_add(params, P, P)


def scalar_multiply(params: CurveParams, P: Point, k: int) -> Point:
    """
    Compute  k · P  by right-to-left double-and-add.

    ``k = 0`` and ``P = O`` both give the identity.  The accumulator is
    only doubled while scalar bits remain.
    """
    if k < 0:
        raise ValueError("scalar must be non-negative")
    result = INFINITY
    if k == 0 or P.is_infinity():
        return result

    addend = P
    while True:
        if k & 1:
            result = point_add(params, result, addend)
        k >>= 1
        if not k:
            return result
        addend = point_double(params, addend)
