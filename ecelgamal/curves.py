"""
Named curve presets and loading of external curve parameters.

``toy23`` is the tiny textbook curve used for illustration and
known-answer tests; its field cannot hold a byte, so it is useless for
file encryption.  Real deployments pass their own parameters, either as
a preset name or as a JSON file::

    {"name": "mycurve", "p": "0x...", "a": "0x...", "b": "0x...",
     "gx": "0x...", "gy": "0x...", "n": "0x..."}
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Callable, Dict, List, Union

from .curve import CurveParams
from .errors import InvalidCurveParams

ENV_CURVE = "ECELGAMAL_CURVE"
DEFAULT_CURVE = "secp256k1"


def toy23() -> CurveParams:
    return CurveParams(p=23, a=1, b=1, gx=3, gy=10, n=29, name="toy23")


def secp256k1() -> CurveParams:
    # SEC 2 v2 §2.4.1
    return CurveParams(
        p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
        a=0,
        b=7,
        gx=0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
        gy=0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
        n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
        name="secp256k1",
    )


def p256() -> CurveParams:
    # FIPS 186-4 D.1.2.3; a = -3 stored as p - 3
    p = 0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF
    return CurveParams(
        p=p,
        a=p - 3,
        b=0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
        gx=0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
        gy=0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
        n=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
        name="p256",
    )


_PRESETS: Dict[str, Callable[[], CurveParams]] = {
    "toy23": toy23,
    "secp256k1": secp256k1,
    "p256": p256,
}


def available_curves() -> List[str]:
    return sorted(_PRESETS)


def get_curve(name: str) -> CurveParams:
    try:
        factory = _PRESETS[name.lower()]
    except KeyError:
        raise InvalidCurveParams(
            f"unknown curve {name!r}; available: {', '.join(available_curves())}"
        ) from None
    return factory()


def default_curve_name() -> str:
    """Preset selected by ``$ECELGAMAL_CURVE``, else ``secp256k1``."""
    return os.environ.get(ENV_CURVE, DEFAULT_CURVE)


def load_curve(path: Union[str, Path]) -> CurveParams:
    """Read and validate curve parameters from a JSON file."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise InvalidCurveParams(f"{path}: not valid JSON ({e})") from e
    if not isinstance(data, dict):
        raise InvalidCurveParams(f"{path}: expected a JSON object")
    data.setdefault("name", path.stem)
    return CurveParams.from_dict(data)
