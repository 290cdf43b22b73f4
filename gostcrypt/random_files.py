"""Dump generator output to files, raw or as text of bits."""

from __future__ import annotations

import os
from pathlib import Path

from .xoroshiro import XoroShiroPlus256


def _open_append(path, mode: str):
    fd = os.open(path, os.O_APPEND | os.O_WRONLY | os.O_CREAT, 0o600)
    return os.fdopen(fd, mode)


def _value_bytes(rng: XoroShiroPlus256, count: int):
    for _ in range(count):
        yield rng.next().to_bytes(8, "little")


def write_values(rng: XoroShiroPlus256, count: int, path) -> Path:
    """Append ``count`` values to ``path`` as 8 little-endian bytes each."""
    path = Path(path)
    with _open_append(path, "ab") as out:
        for chunk in _value_bytes(rng, count):
            out.write(chunk)
    return path


def write_values_as_bits(rng: XoroShiroPlus256, count: int, path) -> Path:
    """Append ``count`` values to ``path`` as text of '0' and '1', 64 per value."""
    path = Path(path)
    with _open_append(path, "a") as out:
        for chunk in _value_bytes(rng, count):
            out.write("".join(f"{byte:08b}" for byte in chunk))
    return path


def create_1mb_file(rng: XoroShiroPlus256, directory=".") -> tuple[Path, Path]:
    """Write 1 MiB of values, then the same number as bit text."""
    count = 131072
    binary = write_values(rng, count, Path(directory) / "xorshift_1mb.bin")
    bits = create_n_values_bits_file(rng, count, directory)
    return binary, bits


def create_100mb_file(rng: XoroShiroPlus256, directory=".") -> Path:
    return write_values(rng, 13107200, Path(directory) / "xorshift_100mb.bin")


def create_1000mb_file(rng: XoroShiroPlus256, directory=".") -> Path:
    return write_values(rng, 131072000, Path(directory) / "xorshift_1000mb.bin")


def create_1000_values(rng: XoroShiroPlus256, directory=".") -> Path:
    return write_values(rng, 1000, Path(directory) / "xorshift_1000values.bin")


def create_10000_values(rng: XoroShiroPlus256, directory=".") -> Path:
    return write_values(rng, 10000, Path(directory) / "xorshift_10000values.bin")


def create_n_values_bits_file(rng: XoroShiroPlus256, n: int, directory=".") -> Path:
    return write_values_as_bits(rng, n, Path(directory) / f"xorshift_{n}bin.txt")