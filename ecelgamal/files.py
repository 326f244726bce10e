"""
File helpers: raw binary files, ciphertext files and test-data files.

Every write lands in a temporary file next to the target and is moved
into place with ``os.replace``, so a failed run never leaves a partial
file under the final name.
"""

from __future__ import annotations

import logging
import os
import secrets
import tempfile
from pathlib import Path
from typing import Union

from .cipher import Ciphertext
from .codec import deserialize_ciphertext, serialize_ciphertext

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]

DEFAULT_TEST_SIZE = 50
DEFAULT_FILL = b"A"


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


def read_binary_file(path: PathLike) -> bytes:
    return Path(path).read_bytes()


def write_binary_file(path: PathLike, data: bytes) -> None:
    path = Path(path)
    fd, tmp = tempfile.mkstemp(prefix=f".{path.name}.", dir=path.parent)
    try:
        with os.fdopen(fd, "wb") as f:
            # mkstemp creates 0600; give the file the mode open() would
            os.fchmod(f.fileno(), 0o666 & ~_current_umask())
            f.write(data)
        os.replace(tmp, path)
    except BaseException:
        os.unlink(tmp)
        raise
    logger.debug("wrote %d bytes to %s", len(data), path)


def write_ciphertext_file(path: PathLike, ct: Ciphertext) -> None:
    write_binary_file(path, serialize_ciphertext(ct))


def read_ciphertext_file(path: PathLike) -> Ciphertext:
    return deserialize_ciphertext(read_binary_file(path))


def generate_test_file(
    path: PathLike,
    size: int = DEFAULT_TEST_SIZE,
    fill: bytes = DEFAULT_FILL,
    random_bytes: bool = False,
) -> bytes:
    """
    Write *size* bytes of test data to *path* and return them.

    By default the file is *size* repetitions of *fill* (``b"A"``);
    with ``random_bytes=True`` the content comes from the CSPRNG.
    """
    if size < 0:
        raise ValueError("size must be non-negative")
    if random_bytes:
        data = secrets.token_bytes(size)
    else:
        if len(fill) != 1:
            raise ValueError("fill must be a single byte")
        data = fill * size
    write_binary_file(path, data)
    return data
