"""
Error taxonomy for ecelgamal.

Every failure the package can detect belongs to exactly one
:class:`ErrorKind`.  Each kind has its own exception class, and every
exception instance carries its ``kind`` so callers can dispatch on it
without string matching::

    try:
        ct = encrypt(params, pub, elements)
    except ECElGamalError as exc:
        if exc.kind is ErrorKind.CODEC_RANGE:
            ...

The classes also derive from the closest built-in exception
(``ValueError`` / ``ZeroDivisionError``) so generic handlers keep working.
None of these errors is retried internally; they surface immediately.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_CURVE_PARAMS = "invalid curve parameters"
    POINT_NOT_ON_CURVE = "point not on curve"
    ARITHMETIC_SINGULARITY = "arithmetic singularity"
    CODEC_RANGE = "codec range error"
    MALFORMED_RECORD = "malformed record"


class ECElGamalError(Exception):
    """Base class of all errors raised by this package."""

    kind: ErrorKind

    def __str__(self) -> str:
        msg = super().__str__()
        return f"{self.kind.value}: {msg}" if msg else self.kind.value


class InvalidCurveParams(ECElGamalError, ValueError):
    """Curve description rejected at construction (or point order ≤ 1)."""

    kind = ErrorKind.INVALID_CURVE_PARAMS


class PointNotOnCurve(ECElGamalError, ValueError):
    """Advisory validity check failed at an API boundary."""

    kind = ErrorKind.POINT_NOT_ON_CURVE


class ArithmeticSingularity(ECElGamalError, ZeroDivisionError):
    """Modular inverse of a non-invertible value, or a degenerate point."""

    kind = ErrorKind.ARITHMETIC_SINGULARITY


class CodecRangeError(ECElGamalError, ValueError):
    """A value does not fit the field or the byte range."""

    kind = ErrorKind.CODEC_RANGE


class MalformedRecord(ECElGamalError, ValueError):
    """Length-prefixed record is truncated or inconsistent."""

    kind = ErrorKind.MALFORMED_RECORD
