"""HMAC on Streebog-512 and a two-round key derivation function built on it."""

from __future__ import annotations

import secrets
from dataclasses import dataclass

from .streebog import Streebog

KEY_SIZE = 32
HMAC_BLOCK_SIZE = 128

_INITIAL_ZI = bytes.fromhex(
    "8094a8bcc0d4e8fc8195a9bdc1d5e9fd8296aabec2d6eafe8397abbfc3d7ebff"
) + bytes(32)


def hmac_streebog512(key, data) -> bytes:
    """Return the 64-byte HMAC of ``data`` under ``key`` with Streebog-512.

    One hash object runs through the whole computation without being reset,
    so the key digest (for long keys) and the inner pass feed the outer pass.
    """
    key = bytes(key)
    data = bytes(data)
    h = Streebog(64)
    if len(key) > HMAC_BLOCK_SIZE:
        h.update(key)
        k0 = h.digest()
    else:
        k0 = key
    k0 = k0.ljust(HMAC_BLOCK_SIZE, b"\x00")
    ipad = bytes(b ^ 0x36 for b in k0)
    opad = bytes(b ^ 0x5C for b in k0)
    h.update(ipad + data)
    inner = h.digest()
    h.update(opad + inner)
    return h.digest()


def _length_field() -> bytes:
    return KEY_SIZE.to_bytes(8, "little")


@dataclass
class Kdf:
    """Key derivation from a key and the T, P, U and A parameters."""

    key: bytes
    t: bytes
    p: bytes
    u: bytes
    a: bytes
    size: int = KEY_SIZE

    def __post_init__(self) -> None:
        self.key = bytes(self.key)
        self.t = bytes(self.t)
        self.p = bytes(self.p)
        self.u = bytes(self.u)
        self.a = bytes(self.a)

    def generate(self) -> bytes:
        """Derive a 32-byte key."""
        k1 = hmac_streebog512(self.key, self.t)[:KEY_SIZE]
        counter = (1).to_bytes(32, "little")
        message = (
            b"\xfc"
            + counter
            + _INITIAL_ZI
            + self.a
            + _length_field()
            + self.p
            + self.u
        )
        return hmac_streebog512(k1, message)[:KEY_SIZE]

    def clear(self) -> None:
        """Overwrite every parameter with random filler."""

        def filler(limit: int) -> bytes:
            return str(secrets.randbelow(limit)).encode()

        self.key = filler(10_000_000)
        self.size = secrets.randbelow(1_000_000)
        self.t = filler(100_000)
        self.p = filler(10_000)
        self.u = filler(10_000_000)
        self.a = filler(10_000_000)