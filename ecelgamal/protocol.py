"""
High-level EC-ElGamal orchestration.

Provides a single ``ECElGamal`` class that ties together key generation,
byte encoding, encryption and the ciphertext file format into a small API
suitable for both scripts and integration testing.

Usage
-----
::

    from ecelgamal.protocol import ECElGamal

    scheme = ECElGamal.setup("secp256k1")
    keys = scheme.keygen()

    ct = scheme.encrypt(keys.public_key, b"hello world")
    assert scheme.decrypt(keys.private_key, ct) == b"hello world"

    # files, in the record format of ecelgamal.codec
    scheme.encrypt_file(keys.public_key, "data.bin", "encrypted.bin")
    scheme.decrypt_file(keys.private_key, "encrypted.bin", "decrypted.bin")
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Optional, Union

from .cipher import Ciphertext, decrypt_bytes, encrypt_bytes
from .curve import CurveParams, Point
from .curves import get_curve
from .errors import CodecRangeError
from .files import (
    PathLike,
    read_binary_file,
    read_ciphertext_file,
    write_binary_file,
    write_ciphertext_file,
)
from .keys import KeyPair, generate_keypair
from .rng import ScalarSource, default_source

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Timing:
    """Wall-clock duration of the last operation."""

    operation: str
    seconds: float
    elements: int = 0


class ECElGamal:
    """
    Byte-oriented EC-ElGamal on a fixed curve.

    The curve field must exceed 255 so that every byte is a field
    element; ``setup`` and ``__init__`` reject smaller curves.
    """

    def __init__(
        self,
        params: CurveParams,
        source: Optional[ScalarSource] = None,
    ) -> None:
        if params.p <= 255:
            raise CodecRangeError(
                f"{params!r}: field modulus {params.p} cannot hold byte values"
            )
        self._params = params
        self._source = source or default_source()
        self.last_timing: Optional[Timing] = None

    # ── factories ──────────────────────────────────────────────────────

    @classmethod
    def setup(
        cls,
        curve: Union[str, CurveParams] = "secp256k1",
        source: Optional[ScalarSource] = None,
    ) -> ECElGamal:
        """Create a scheme from a preset name or explicit parameters."""
        params = get_curve(curve) if isinstance(curve, str) else curve
        return cls(params, source)

    @property
    def params(self) -> CurveParams:
        return self._params

    def _record(self, operation: str, start: float, elements: int = 0) -> None:
        self.last_timing = Timing(operation, time.perf_counter() - start, elements)
        logger.debug(
            "%s: %d element(s) in %.6f s",
            operation, elements, self.last_timing.seconds,
        )

    # ── keys ───────────────────────────────────────────────────────────

    def keygen(self) -> KeyPair:
        start = time.perf_counter()
        keys = generate_keypair(self._params, self._source)
        self._record("keygen", start)
        return keys

    # ── in-memory ──────────────────────────────────────────────────────

    def encrypt(self, public_key: Point, data: bytes) -> Ciphertext:
        start = time.perf_counter()
        ct = encrypt_bytes(self._params, public_key, data, self._source)
        self._record("encrypt", start, len(ct))
        return ct

    def decrypt(self, private_key: int, ciphertext: Ciphertext) -> bytes:
        start = time.perf_counter()
        data = decrypt_bytes(self._params, ciphertext, private_key)
        self._record("decrypt", start, len(ciphertext))
        return data

    # ── files ──────────────────────────────────────────────────────────

    def encrypt_file(self, public_key: Point, src: PathLike, dst: PathLike) -> Ciphertext:
        ct = self.encrypt(public_key, read_binary_file(src))
        write_ciphertext_file(dst, ct)
        logger.debug("encrypted %s -> %s", src, dst)
        return ct

    def decrypt_file(self, private_key: int, src: PathLike, dst: PathLike) -> bytes:
        data = self.decrypt(private_key, read_ciphertext_file(src))
        write_binary_file(dst, data)
        logger.debug("decrypted %s -> %s", src, dst)
        return data
