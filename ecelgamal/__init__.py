"""
ecelgamal: ElGamal encryption on elliptic curves over prime fields.

A self-contained affine-coordinate curve engine with an ElGamal layer
that encrypts arbitrary binary payloads byte by byte:

- **Curve arithmetic** — validated curve parameters, tagged points
  (identity vs. affine), addition, doubling, double-and-add
- **ElGamal** — one ephemeral point per message, every element masked
  with the x-coordinate of the shared point
- **Wire format** — length-prefixed decimal records for ciphertext files

Security: illustration only.  Arithmetic is not constant-time and the
ciphertext carries no integrity protection.

Quick start
-----------
::

    from ecelgamal import ECElGamal

    scheme = ECElGamal.setup("secp256k1")
    keys = scheme.keygen()

    ct = scheme.encrypt(keys.public_key, b"attack at dawn")
    assert scheme.decrypt(keys.private_key, ct) == b"attack at dawn"
"""

__version__ = "0.1.0"

# ── errors ──────────────────────────────────────────────────────────────
from .errors import (
    ErrorKind,
    ECElGamalError,
    InvalidCurveParams,
    PointNotOnCurve,
    ArithmeticSingularity,
    CodecRangeError,
    MalformedRecord,
)

# ── curve arithmetic ────────────────────────────────────────────────────
from .curve import (
    Point,
    INFINITY,
    CurveParams,
    is_on_curve,
    point_on_curve,
    require_on_curve,
    inverse_mod,
    point_neg,
    point_add,
    point_double,
    scalar_multiply,
)
from .curves import available_curves, get_curve, load_curve

# ── randomness ──────────────────────────────────────────────────────────
from .rng import (
    ScalarSource,
    SystemScalarSource,
    SeededScalarSource,
    FixedScalarSource,
    default_source,
)

# ── ElGamal ─────────────────────────────────────────────────────────────
from .keys import KeyPair, generate_keypair, keypair_from_private, validate_public_key
from .cipher import Ciphertext, encrypt, decrypt, encrypt_bytes, decrypt_bytes
from .protocol import ECElGamal, Timing

# ── encoding & files ────────────────────────────────────────────────────
from .codec import (
    bytes_to_elements,
    elements_to_bytes,
    write_zz_record,
    read_zz_record,
    serialize_ciphertext,
    deserialize_ciphertext,
    dump_ciphertext,
    load_ciphertext,
)
from .files import (
    read_binary_file,
    write_binary_file,
    read_ciphertext_file,
    write_ciphertext_file,
    generate_test_file,
)

__all__ = [
    # version
    "__version__",
    # errors
    "ErrorKind", "ECElGamalError", "InvalidCurveParams", "PointNotOnCurve",
    "ArithmeticSingularity", "CodecRangeError", "MalformedRecord",
    # curve
    "Point", "INFINITY", "CurveParams", "is_on_curve", "point_on_curve",
    "require_on_curve", "inverse_mod", "point_neg", "point_add",
    "point_double", "scalar_multiply",
    "available_curves", "get_curve", "load_curve",
    # randomness
    "ScalarSource", "SystemScalarSource", "SeededScalarSource",
    "FixedScalarSource", "default_source",
    # elgamal
    "KeyPair", "generate_keypair", "keypair_from_private",
    "validate_public_key",
    "Ciphertext", "encrypt", "decrypt", "encrypt_bytes", "decrypt_bytes",
    "ECElGamal", "Timing",
    # encoding & files
    "bytes_to_elements", "elements_to_bytes", "write_zz_record",
    "read_zz_record", "serialize_ciphertext", "deserialize_ciphertext",
    "dump_ciphertext", "load_ciphertext",
    "read_binary_file", "write_binary_file", "read_ciphertext_file",
    "write_ciphertext_file", "generate_test_file",
]
