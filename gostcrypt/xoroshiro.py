"""A 256-bit xoroshiro-style pseudo-random generator producing 64-bit values."""

from __future__ import annotations

SEED_SIZE = 32
_MASK = (1 << 64) - 1


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (64 - shift))) & _MASK


class XoroShiroPlus256:
    """Generator seeded with 32 bytes read as four big-endian 64-bit words."""

    def __init__(self, seed) -> None:
        seed = bytes(seed)
        if len(seed) != SEED_SIZE:
            raise ValueError(f"seed must be {SEED_SIZE} bytes")
        self._state = [
            int.from_bytes(seed[i : i + 8], "big") for i in range(0, SEED_SIZE, 8)
        ]

    @property
    def seed(self) -> bytes:
        """The current state as 32 bytes."""
        return b"".join(word.to_bytes(8, "big") for word in self._state)

    def next(self) -> int:
        """Advance the state and return the next 64-bit value."""
        s0, s1, s2, s3 = self._state
        self._state = [
            s0 ^ s3 ^ s1,
            s1 ^ s2 ^ s0,
            s2 ^ s0 ^ ((s1 << 17) & _MASK),
            _rotl(s3 ^ s1, 45),
        ]
        return (s0 + s3) & _MASK

    def __iter__(self) -> XoroShiroPlus256:
        return self

    def __next__(self) -> int:
        return self.next()