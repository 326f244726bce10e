"""
ElGamal key generation.

A key pair is a private scalar  d ∈ [1, n-1]  and the public point
Q = d·G.  The private scalar is never part of any serialised artefact;
its lifetime is up to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from .curve import CurveParams, Point, point_on_curve, scalar_multiply
from .errors import InvalidCurveParams, PointNotOnCurve
from .rng import ScalarSource, default_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeyPair:
    """(private scalar, public point) — ``repr`` hides the private half."""

    private_key: int = field(repr=False)
    public_key: Point

    def public_only(self) -> Point:
        return self.public_key


def generate_keypair(
    params: CurveParams,
    source: Optional[ScalarSource] = None,
) -> KeyPair:
    """
    Draw  d ∈ [1, n-1]  and compute  Q = d·G.

    Raises ``InvalidCurveParams`` if the base point order is ≤ 1.
    """
    if params.n <= 1:
        raise InvalidCurveParams(f"point order must exceed 1, got {params.n}")
    src = source or default_source()
    d = src.random_scalar(params.n)
    pub = scalar_multiply(params, params.G, d)
    logger.debug("generated key pair on %r", params)
    return KeyPair(private_key=d, public_key=pub)


def keypair_from_private(params: CurveParams, private_key: int) -> KeyPair:
    """Rebuild the key pair for a known private scalar."""
    if not 1 <= private_key < params.n:
        raise ValueError(f"private key must lie in [1, {params.n - 1}]")
    return KeyPair(
        private_key=private_key,
        public_key=scalar_multiply(params, params.G, private_key),
    )


def validate_public_key(params: CurveParams, public_key: Point) -> None:
    """Reject the identity and points off the curve."""
    if public_key.is_infinity():
        raise PointNotOnCurve("public key is the point at infinity")
    if not point_on_curve(params, public_key):
        raise PointNotOnCurve(f"public key {public_key!r} is not on {params!r}")
