from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable

from caesarlab.classical.caesar import decode, encode

logger = logging.getLogger(__name__)


class SameFileError(ValueError):
    """Source and destination point at the same file."""


def _transform_file(src: str | Path, dst: str | Path, fn: Callable[[str], str]) -> int:
    src_p, dst_p = Path(src), Path(dst)
    if src_p.resolve() == dst_p.resolve():
        raise SameFileError(f"Refusing to overwrite the input file {src_p}; choose another destination.")

    # Read (and decode) everything first so a bad input never touches dst.
    # newline="" keeps the original line endings untouched
    with src_p.open("r", encoding="utf-8", newline="") as reader:
        lines = reader.readlines()

    dst_p.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{dst_p.name}.", dir=dst_p.parent)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as writer:
            for line in lines:
                writer.write(fn(line))
        os.replace(tmp_name, dst_p)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return len(lines)


def encrypt_file(src: str | Path, dst: str | Path, shift: int) -> int:
    """Encrypt ``src`` line by line into ``dst``; returns the number of lines."""
    n = _transform_file(src, dst, lambda line: encode(line, shift))
    logger.info("Encrypted %s -> %s (%d lines, shift %d)", src, dst, n, shift)
    return n


def decrypt_file(src: str | Path, dst: str | Path, shift: int) -> int:
    """Decrypt ``src`` line by line into ``dst``; returns the number of lines."""
    n = _transform_file(src, dst, lambda line: decode(line, shift))
    logger.info("Decrypted %s -> %s (%d lines, shift %d)", src, dst, n, shift)
    return n
