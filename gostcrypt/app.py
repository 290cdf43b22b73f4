"""Command that round-trips data through the CTR-ACPKM mode under self-checks."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from .ctr_acpkm import CtrAcpkm, MacMismatchError
from .kuznyechik import BLOCK_SIZE
from .validation import IntegrityError, validate_file

log = logging.getLogger(__name__)

DEFAULT_INPUT = "fileName1"

RUN_KEY = bytes.fromhex(
    "8094a8bcc0d4e8fc8195a9bdc1d5e9fd8296aabec2d6eafe8397abbfc3d7ebff"
)
TEST_KEY = bytes.fromhex(
    "8899aabbccddeeff0011223344556677fedcba98765432100123456789abcdef"
)
TEST_PLAINTEXT = bytes.fromhex(
    "1122334455667700ffeeddccbbaa9988"
    "00112233445566778899aabbcceeff0a"
    "112233445566778899aabbcceeff0a00"
    "2233445566778899aabbcceeff0a0011"
)
TEST_IV = bytes.fromhex("31323334353637383930d0b062636566")


def _blocks(data: bytes):
    if len(data) % BLOCK_SIZE:
        raise ValueError(f"data length must be a multiple of {BLOCK_SIZE} bytes")
    for start in range(0, len(data), BLOCK_SIZE):
        yield data[start : start + BLOCK_SIZE]


def _round_trip(mode: CtrAcpkm, data: bytes) -> int:
    count = 0
    for block in _blocks(data):
        ciphertext, mac = mode.encrypt(block)
        if mode.decrypt(ciphertext, mac) != block:
            raise RuntimeError("incorrect decrypt")
        count += 1
    return count


def _process(data: bytes, key: bytes, iv, program_path, started: float) -> int:
    algorithm_started = time.perf_counter()

    digest = validate_file(program_path)
    log.info("The validation function finished!")

    mode = CtrAcpkm(key, iv)
    try:
        count = _round_trip(mode, data)
    finally:
        mode.clear()

    validate_file(program_path, digest)
    log.info("The validation function finished!")

    now = time.perf_counter()
    log.info("The total working time of the program: %f", now - started)
    log.info("The total working time of the algorithm CTR-ACPKM: %f", now - algorithm_started)
    return count


def run(input_path=DEFAULT_INPUT, program_path=None) -> int:
    """Encrypt and decrypt every block of ``input_path`` with a random IV.

    The program file is hashed before and after; return the number of blocks.
    """
    started = time.perf_counter()
    if program_path is None:
        program_path = sys.argv[0]
    log.info("Start reading the file.")
    data = Path(input_path).read_bytes()
    log.info("The file has been read.")
    return _process(data, RUN_KEY, None, program_path, started)


def self_test(program_path=None) -> int:
    """Round-trip the fixed test vector; return the number of blocks."""
    started = time.perf_counter()
    if program_path is None:
        program_path = sys.argv[0]
    return _process(TEST_PLAINTEXT, TEST_KEY, TEST_IV, program_path, started)


def main(argv=None) -> int:
    """Command-line entry point; return the exit status."""
    parser = argparse.ArgumentParser(
        description="Round-trip data through CTR-ACPKM with integrity checks."
    )
    parser.add_argument("input", nargs="?", default=DEFAULT_INPUT, help="file to process")
    parser.add_argument("--test", action="store_true", help="run on the fixed test vector")
    parser.add_argument("--program", default=None, help="file whose integrity is checked")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(message)s")
    try:
        if args.test:
            self_test(args.program)
        else:
            run(args.input, args.program)
    except OSError as exc:
        log.error("Error reading file: %s", exc)
        return 1
    except (IntegrityError, MacMismatchError, ValueError, RuntimeError) as exc:
        log.error("%s", exc)
        return 1
    return 0