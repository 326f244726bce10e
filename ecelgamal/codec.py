"""
Byte ↔ field-element mapping and the ciphertext record format.

Plaintext bytes are widened one-to-one to field elements, which needs
``p > 255``.  Ciphertexts are persisted as length-prefixed decimal
records:

    record     := LEN (8 bytes, little-endian u64) ‖ ASCII decimal digits
    ciphertext := record(C1.x) ‖ record(C1.y) ‖ LEN_C2 (8 bytes)
                  ‖ record(c_0) ‖ … ‖ record(c_{LEN_C2-1})

``LEN_C2`` counts elements, not bytes.  The layout matches files written
by the original tool on x86-64 (native ``size_t``).
"""

from __future__ import annotations

import struct
from typing import TYPE_CHECKING, BinaryIO, List, Sequence, Tuple

from .curve import Point
from .errors import CodecRangeError, MalformedRecord

if TYPE_CHECKING:
    from .cipher import Ciphertext

_LEN = struct.Struct("<Q")
LEN_BYTES = _LEN.size

# far above any field in use (P-521 needs 157 digits), below CPython's
# int-from-text limit
MAX_RECORD_DIGITS = 4096


# ── bytes ↔ elements ────────────────────────────────────────────────────
def bytes_to_elements(data: bytes, p: int) -> List[int]:
    """One field element per byte; requires ``p > 255``."""
    if p <= 255:
        raise CodecRangeError(f"field modulus {p} cannot hold byte values (need p > 255)")
    return list(data)


def elements_to_bytes(elements: Sequence[int]) -> bytes:
    """
    Narrow each element back to one byte.

    An element outside ``[0, 255]`` means the wrong key or curve was used,
    or the ciphertext is corrupt.
    """
    for i, v in enumerate(elements):
        if not 0 <= v <= 255:
            raise CodecRangeError(f"element {i} = {v} does not fit in a byte")
    return bytes(elements)


# ── single records ──────────────────────────────────────────────────────
def write_zz_record(value: int) -> bytes:
    if value < 0:
        raise CodecRangeError(f"cannot encode negative value {value}")
    digits = str(value).encode("ascii")
    return _LEN.pack(len(digits)) + digits


def _read_len(buf: bytes, offset: int, what: str) -> Tuple[int, int]:
    end = offset + LEN_BYTES
    if end > len(buf):
        raise MalformedRecord(
            f"{what}: truncated length field at offset {offset} "
            f"({len(buf) - offset} of {LEN_BYTES} bytes)"
        )
    (n,) = _LEN.unpack_from(buf, offset)
    return n, end


def read_zz_record(buf: bytes, offset: int = 0) -> Tuple[int, int]:
    """
    Decode one record at *offset*.

    Returns ``(value, next_offset)``.
    """
    n, start = _read_len(buf, offset, "record")
    if n == 0:
        raise MalformedRecord(f"record at offset {offset} has zero length")
    if n > MAX_RECORD_DIGITS:
        raise MalformedRecord(
            f"record at offset {offset} declares {n} digits (limit {MAX_RECORD_DIGITS})"
        )
    end = start + n
    if end > len(buf):
        raise MalformedRecord(
            f"record at offset {offset} declares {n} digits, "
            f"only {len(buf) - start} bytes remain"
        )
    digits = bytes(buf[start:end])
    if not digits.isdigit():
        raise MalformedRecord(f"record at offset {offset} is not decimal: {digits[:16]!r}")
    try:
        value = int(digits)
    except ValueError as e:
        raise MalformedRecord(f"record at offset {offset}: {e}") from e
    return value, end


# ── ciphertext ──────────────────────────────────────────────────────────
def serialize_ciphertext(ct: Ciphertext) -> bytes:
    if ct.c1.is_infinity():
        raise CodecRangeError("C1 is the point at infinity and has no coordinates")
    parts = [
        write_zz_record(ct.c1.x),
        write_zz_record(ct.c1.y),
        _LEN.pack(len(ct.c2)),
    ]
    parts.extend(write_zz_record(c) for c in ct.c2)
    return b"".join(parts)


def deserialize_ciphertext(data: bytes) -> Ciphertext:
    from .cipher import Ciphertext

    x, off = read_zz_record(data, 0)
    y, off = read_zz_record(data, off)
    count, off = _read_len(data, off, "element count")
    # every record needs at least LEN + one digit
    if count > (len(data) - off) // (LEN_BYTES + 1):
        raise MalformedRecord(
            f"element count {count} exceeds what {len(data) - off} bytes can hold"
        )
    c2 = []
    for _ in range(count):
        v, off = read_zz_record(data, off)
        c2.append(v)
    if off != len(data):
        raise MalformedRecord(f"{len(data) - off} trailing byte(s) after ciphertext")
    return Ciphertext(c1=Point(x, y), c2=tuple(c2))


def dump_ciphertext(ct: Ciphertext, fp: BinaryIO) -> None:
    fp.write(serialize_ciphertext(ct))


def load_ciphertext(fp: BinaryIO) -> Ciphertext:
    return deserialize_ciphertext(fp.read())
