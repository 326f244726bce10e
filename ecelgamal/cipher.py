"""
Elliptic-curve ElGamal over field elements.

Encryption of  m_1 … m_L  under public point Q:

    k  ← [1, n-1]                 (one ephemeral scalar per call)
    C1 = k·G
    S  = k·Q                      (shared point, computed once)
    c_i = (m_i + S.x) mod p

Decryption with private scalar d recovers the same shared point as
S = d·C1 = d·k·G = k·Q  and returns  m_i = (c_i − S.x) mod p.

The scheme masks each element with the x-coordinate of the shared point;
it provides confidentiality only and no integrity check.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .codec import bytes_to_elements, elements_to_bytes
from .curve import CurveParams, Point, require_on_curve, scalar_multiply
from .errors import ArithmeticSingularity, CodecRangeError, PointNotOnCurve
from .keys import validate_public_key
from .rng import ScalarSource, default_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Ciphertext:
    """
    ElGamal ciphertext  (C1, C2).

    ``c1`` is the ephemeral point k·G shared by the whole message;
    ``c2`` holds one masked field element per plaintext element.
    """

    c1: Point
    c2: Tuple[int, ...]

    def __post_init__(self) -> None:
        # accept any sequence, store a tuple
        object.__setattr__(self, "c2", tuple(self.c2))

    def __len__(self) -> int:
        return len(self.c2)


def _shared_x(params: CurveParams, P: Point, scalar: int) -> int:
    S = scalar_multiply(params, P, scalar)
    if S.is_infinity():
        raise ArithmeticSingularity("shared point is the point at infinity")
    return S.x


def encrypt(
    params: CurveParams,
    public_key: Point,
    elements: Sequence[int],
    source: Optional[ScalarSource] = None,
) -> Ciphertext:
    """
    Encrypt a sequence of field elements under *public_key*.

    Raises
    ------
    PointNotOnCurve
        *public_key* is the identity or not on the curve.
    CodecRangeError
        An element lies outside ``[0, p-1]``.
    ArithmeticSingularity
        The shared point degenerates to the identity.
    """
    validate_public_key(params, public_key)
    elements = list(elements)
    p = params.p
    for i, m in enumerate(elements):
        if not 0 <= m < p:
            raise CodecRangeError(f"plaintext element {i} = {m} outside [0, {p - 1}]")

    src = source or default_source()
    k = src.random_scalar(params.n)
    c1 = scalar_multiply(params, params.G, k)
    sx = _shared_x(params, public_key, k)
    c2 = tuple((m + sx) % p for m in elements)
    logger.debug("encrypted %d element(s) on %r", len(c2), params)
    return Ciphertext(c1=c1, c2=c2)


def decrypt(
    params: CurveParams,
    c1: Point,
    c2: Sequence[int],
    private_key: int,
) -> List[int]:
    """
    Recover the plaintext elements from ``(c1, c2)``.

    Raises ``PointNotOnCurve`` for an invalid *c1* and ``CodecRangeError``
    when a ciphertext element is not a field element.
    """
    if c1.is_infinity():
        raise PointNotOnCurve("C1 is the point at infinity")
    require_on_curve(params, c1, "C1")
    c2 = list(c2)
    p = params.p
    for i, c in enumerate(c2):
        if not 0 <= c < p:
            raise CodecRangeError(f"ciphertext element {i} = {c} outside [0, {p - 1}]")

    sx = _shared_x(params, c1, private_key)
    out = [(c - sx) % p for c in c2]
    logger.debug("decrypted %d element(s) on %r", len(out), params)
    return out


# ── byte-level convenience ──────────────────────────────────────────────
def encrypt_bytes(
    params: CurveParams,
    public_key: Point,
    data: bytes,
    source: Optional[ScalarSource] = None,
) -> Ciphertext:
    return encrypt(params, public_key, bytes_to_elements(data, params.p), source)


def decrypt_bytes(
    params: CurveParams,
    ciphertext: Ciphertext,
    private_key: int,
) -> bytes:
    return elements_to_bytes(
        decrypt(params, ciphertext.c1, ciphertext.c2, private_key)
    )
