"""
Command-line interface.

::

    ecelgamal genbin --size 50 --output data.bin
    ecelgamal keygen --curve secp256k1
    ecelgamal encrypt --public X Y --input data.bin --output encrypted.bin
    ecelgamal decrypt --private D --input encrypted.bin --output decrypted.bin
    ecelgamal demo --input data.bin

Keys are printed in decimal and passed back on the command line; the tool
never writes the private key to disk.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from . import __version__
from .curve import CurveParams, Point
from .curves import available_curves, default_curve_name, get_curve, load_curve
from .errors import ECElGamalError
from .files import DEFAULT_TEST_SIZE, generate_test_file
from .keys import validate_public_key
from .protocol import ECElGamal

logger = logging.getLogger(__name__)


def _curve_from_args(args: argparse.Namespace) -> CurveParams:
    if args.curve_file:
        return load_curve(args.curve_file)
    return get_curve(args.curve or default_curve_name())


def _cmd_genbin(args: argparse.Namespace) -> int:
    data = generate_test_file(args.output, size=args.size, random_bytes=args.random)
    print(f"wrote {len(data)} bytes to {args.output}")
    return 0


def _cmd_keygen(args: argparse.Namespace) -> int:
    params = _curve_from_args(args)
    keys = ECElGamal(params).keygen()
    print(f"curve:       {params.name or 'custom'}")
    print(f"public key:  {keys.public_key.x} {keys.public_key.y}")
    print(f"private key: {keys.private_key}")
    return 0


def _cmd_encrypt(args: argparse.Namespace) -> int:
    scheme = ECElGamal(_curve_from_args(args))
    pub = Point(*args.public)
    validate_public_key(scheme.params, pub)
    ct = scheme.encrypt_file(pub, args.input, args.output)
    print(f"encrypted {len(ct)} bytes to {args.output} "
          f"in {scheme.last_timing.seconds:.6f} s")
    return 0


def _cmd_decrypt(args: argparse.Namespace) -> int:
    scheme = ECElGamal(_curve_from_args(args))
    data = scheme.decrypt_file(args.private, args.input, args.output)
    print(f"decrypted {len(data)} bytes to {args.output} "
          f"in {scheme.last_timing.seconds:.6f} s")
    return 0


def _cmd_demo(args: argparse.Namespace) -> int:
    params = _curve_from_args(args)
    scheme = ECElGamal(params)
    keys = scheme.keygen()

    print("curve parameters:")
    for k in ("p", "a", "b", "gx", "gy", "n"):
        print(f"  {k}: {getattr(params, k)}")
    print(f"public key (x, y): ({keys.public_key.x}, {keys.public_key.y})")

    original = scheme.encrypt_file(keys.public_key, args.input, args.encrypted)
    print(f"encrypted {len(original)} bytes to {args.encrypted} "
          f"in {scheme.last_timing.seconds:.6f} s")

    plain = scheme.decrypt_file(keys.private_key, args.encrypted, args.decrypted)
    print(f"decrypted to {args.decrypted} in {scheme.last_timing.seconds:.6f} s")

    with open(args.input, "rb") as f:
        if f.read() != plain:
            logger.error("round trip mismatch: %s != %s", args.input, args.decrypted)
            return 1
    print("round trip OK")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ecelgamal",
        description="Elliptic-curve ElGamal encryption of binary files",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging")

    curve_opts = argparse.ArgumentParser(add_help=False)
    group = curve_opts.add_mutually_exclusive_group()
    group.add_argument(
        "--curve",
        help=f"preset curve ({', '.join(available_curves())}); "
             f"default from $ECELGAMAL_CURVE or secp256k1",
    )
    group.add_argument("--curve-file", help="JSON file with p, a, b, gx, gy, n")

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("genbin", help="write a test input file")
    p.add_argument("--size", type=int, default=DEFAULT_TEST_SIZE)
    p.add_argument("--random", action="store_true", help="random bytes instead of 'A'")
    p.add_argument("--output", default="data.bin")
    p.set_defaults(func=_cmd_genbin)

    p = sub.add_parser("keygen", parents=[curve_opts], help="generate a key pair")
    p.set_defaults(func=_cmd_keygen)

    p = sub.add_parser("encrypt", parents=[curve_opts], help="encrypt a file")
    p.add_argument("--public", type=int, nargs=2, metavar=("X", "Y"), required=True)
    p.add_argument("--input", default="data.bin")
    p.add_argument("--output", default="encrypted.bin")
    p.set_defaults(func=_cmd_encrypt)

    p = sub.add_parser("decrypt", parents=[curve_opts], help="decrypt a file")
    p.add_argument("--private", type=int, metavar="D", required=True)
    p.add_argument("--input", default="encrypted.bin")
    p.add_argument("--output", default="decrypted.bin")
    p.set_defaults(func=_cmd_decrypt)

    p = sub.add_parser("demo", parents=[curve_opts], help="keygen, encrypt and decrypt a file")
    p.add_argument("--input", default="data.bin")
    p.add_argument("--encrypted", default="encrypted.bin")
    p.add_argument("--decrypted", default="decrypted.bin")
    p.set_defaults(func=_cmd_demo)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        return args.func(args)
    except (ECElGamalError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
