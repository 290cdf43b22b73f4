"""Single-block CTR-ACPKM style encryption on Kuznyechik with a Streebog MAC."""

from __future__ import annotations

import os

from .kuznyechik import BLOCK_SIZE, Kuznyechik, xor_blocks
from .streebog import streebog256


class MacMismatchError(ValueError):
    """Raised when a received MAC does not match the ciphertext."""


def make_gamma(iv, key) -> bytes:
    """Return the keystream block: the IV encrypted under ``key``."""
    cipher = Kuznyechik(key)
    try:
        return cipher.encrypt_block(iv)
    finally:
        cipher.clear()


def verification_code(ciphertext) -> bytes:
    """Return the 256-bit Streebog digest used as the MAC of ``ciphertext``."""
    return streebog256(bytes(ciphertext))


def _check_mac(ciphertext, mac) -> None:
    if verification_code(ciphertext) != bytes(mac):
        raise MacMismatchError("Expected MAC isn't equal to received MAC")


def _random_iv() -> bytes:
    return os.urandom(BLOCK_SIZE)


class CtrAcpkm:
    """Mode with a keystream block fixed at construction time."""

    def __init__(self, key, iv=None) -> None:
        if iv is None:
            iv = _random_iv()
        self.gamma: bytes | None = make_gamma(iv, key)

    def _gamma(self) -> bytes:
        if self.gamma is None:
            raise ValueError("cipher state has been cleared")
        return self.gamma

    def encrypt(self, plaintext) -> tuple[bytes, bytes]:
        """Encrypt one 16-byte block; return the ciphertext and its MAC."""
        ciphertext = xor_blocks(plaintext, self._gamma())
        return ciphertext, verification_code(ciphertext)

    def decrypt(self, ciphertext, mac) -> bytes:
        """Check the MAC and decrypt one 16-byte block."""
        gamma = self._gamma()
        _check_mac(ciphertext, mac)
        return xor_blocks(ciphertext, gamma)

    def clear(self) -> None:
        """Drop the keystream block."""
        self.gamma = None


class KeyedCtrAcpkm:
    """Mode with a fixed IV whose key is supplied for every block."""

    def __init__(self, iv=None) -> None:
        if iv is None:
            iv = _random_iv()
        iv = bytes(iv)
        if len(iv) != BLOCK_SIZE:
            raise ValueError(f"invalid IV size, expected {BLOCK_SIZE} bytes")
        self.iv = iv

    def encrypt(self, plaintext, key) -> tuple[bytes, bytes]:
        """Encrypt one 16-byte block under ``key``; return ciphertext and MAC."""
        ciphertext = xor_blocks(plaintext, make_gamma(self.iv, key))
        return ciphertext, verification_code(ciphertext)

    def decrypt(self, ciphertext, key, mac) -> bytes:
        """Check the MAC and decrypt one 16-byte block under ``key``."""
        gamma = make_gamma(self.iv, key)
        _check_mac(ciphertext, mac)
        return xor_blocks(ciphertext, gamma)

    def clear(self) -> None:
        """Overwrite the IV with zeros."""
        self.iv = bytes(BLOCK_SIZE)