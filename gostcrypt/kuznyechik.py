"""Kuznyechik block cipher (GOST R 34.12-2015): 128-bit blocks, 256-bit keys."""

from __future__ import annotations

BLOCK_SIZE = 16
KEY_SIZE = 32
ROUNDS = 9

SBOX = bytes.fromhex(
    "fceedd11cf6e3116"
    "fbc4fada23c5044d"
    "e977f0db932e99ba"
    "1736f1bb14cd5fc1"
    "f918655ae25cef21"
    "811c3c428b018e4f"
    "058402aee36a8fa0"
    "060bed987fd4d31f"
    "eb342c51eac848ab"
    "f22a68a2fd3acecc"
    "b5700e56080c7612"
    "bf7213479cb75d87"
    "15a19629107b9ac7"
    "f391786f9d9eb2b1"
    "3275193dff358a7e"
    "6d54c680c3bd0d57"
    "dff524a93ea843c9"
    "d779d6f67c22b903"
    "e00fecde7a94b0bc"
    "dce828504e330a4a"
    "a79760731e006244"
    "1ab83882649f2641"
    "ad454692275e552f"
    "8ca3a57d69d5953b"
    "0758b34086ac1df7"
    "30376be488d9e789"
    "e11b83494c3ff8fe"
    "8d53aa90cad88561"
    "207167a42d2b095b"
    "cb9b25d0bee56c52"
    "59a674d2e6f4b4c0"
    "d166afc2394b63b6"
)


def _invert(box: bytes) -> bytes:
    inverse = bytearray(len(box))
    for index, value in enumerate(box):
        inverse[value] = index
    return bytes(inverse)


SBOX_INV = _invert(SBOX)

L_VECTOR = bytes.fromhex("94208510c2c001fb01c0c21085209401")


def gf_mul(a: int, b: int) -> int:
    """Multiply two bytes in GF(2^8) modulo x^8 + x^7 + x^6 + x + 1."""
    if not (0 <= a <= 0xFF and 0 <= b <= 0xFF):
        raise ValueError("operands must be bytes in range 0..255")
    product = 0
    while b:
        if b & 1:
            product ^= a
        a = ((a << 1) & 0xFF) ^ 0xC3 if a & 0x80 else a << 1
        b >>= 1
    return product


_MUL_TABLES = {c: bytes(gf_mul(v, c) for v in range(256)) for c in set(L_VECTOR)}
_L_TABLES = tuple(_MUL_TABLES[c] for c in L_VECTOR)


def _as_block(block, what: str = "block") -> bytes:
    data = bytes(block)
    if len(data) != BLOCK_SIZE:
        raise ValueError(f"invalid {what} size, expected {BLOCK_SIZE} bytes")
    return data


def xor_blocks(a, b) -> bytes:
    """XOR two 16-byte blocks."""
    first = _as_block(a)
    second = _as_block(b)
    return bytes(x ^ y for x, y in zip(first, second))


def s_transform(block) -> bytes:
    """Substitute every byte through the S-box."""
    return _as_block(block).translate(SBOX)


def s_inverse(block) -> bytes:
    """Substitute every byte through the inverse S-box."""
    return _as_block(block).translate(SBOX_INV)


def l_transform(block) -> bytes:
    """Apply the linear transform L (sixteen rounds of R)."""
    data = _as_block(block)
    for _ in range(BLOCK_SIZE):
        t = 0
        for table, byte in zip(_L_TABLES, data):
            t ^= table[byte]
        data = bytes([t]) + data[:-1]
    return data


def l_inverse(block) -> bytes:
    """Undo the linear transform L."""
    data = _as_block(block)
    for _ in range(BLOCK_SIZE):
        rest = data[1:]
        t = data[0]
        for table, byte in zip(_L_TABLES, rest):
            t ^= table[byte]
        data = rest + bytes([t])
    return data


KEY_CONSTANTS = tuple(
    l_transform(bytes(BLOCK_SIZE - 1) + bytes([i + 1])) for i in range(32)
)


class Kuznyechik:
    """Kuznyechik cipher with a fixed 32-byte key."""

    def __init__(self, key) -> None:
        key = bytes(key)
        if len(key) != KEY_SIZE:
            raise ValueError(f"invalid key size, expected key with {KEY_SIZE} bytes")
        even, odd = key[:BLOCK_SIZE], key[BLOCK_SIZE:]
        round_keys = [even, odd]
        constants = iter(KEY_CONSTANTS)
        for _ in range(4):
            for _ in range(8):
                mixed = l_transform(s_transform(xor_blocks(even, next(constants))))
                even, odd = xor_blocks(mixed, odd), even
            round_keys.extend((even, odd))
        self._round_keys = round_keys

    def encrypt_block(self, block) -> bytes:
        """Encrypt one 16-byte block."""
        data = _as_block(block)
        for key in self._round_keys[:ROUNDS]:
            data = l_transform(s_transform(xor_blocks(data, key)))
        return xor_blocks(data, self._round_keys[ROUNDS])

    def decrypt_block(self, block) -> bytes:
        """Decrypt one 16-byte block."""
        data = _as_block(block)
        for key in reversed(self._round_keys[1 : ROUNDS + 1]):
            data = s_inverse(l_inverse(xor_blocks(data, key)))
        return xor_blocks(data, self._round_keys[0])

    def clear(self) -> None:
        """Overwrite the round keys with zeros."""
        self._round_keys = [bytes(BLOCK_SIZE) for _ in self._round_keys]