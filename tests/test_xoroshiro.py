from itertools import islice

import pytest

from gostcrypt.xoroshiro import XoroShiroPlus256

SEED = bytes(range(32))


def test_zero_seed_stays_zero():
    rng = XoroShiroPlus256(bytes(32))
    assert [rng.next() for _ in range(5)] == [0] * 5
    assert rng.seed == bytes(32)


def test_first_value_is_sum_of_outer_words():
    seed = (1).to_bytes(8, "big") + bytes(16) + (2).to_bytes(8, "big")
    assert XoroShiroPlus256(seed).next() == 3


def test_same_seed_same_sequence():
    a = XoroShiroPlus256(SEED)
    b = XoroShiroPlus256(SEED)
    assert [a.next() for _ in range(20)] == [b.next() for _ in range(20)]


def test_iteration_matches_next():
    a = XoroShiroPlus256(SEED)
    b = XoroShiroPlus256(SEED)
    assert list(islice(a, 10)) == [b.next() for _ in range(10)]


def test_values_fit_in_64_bits():
    rng = XoroShiroPlus256(b"\xff" * 32)
    assert all(0 <= v < 2**64 for v in islice(rng, 100))


def test_state_advances():
    rng = XoroShiroPlus256(SEED)
    assert rng.seed == SEED
    rng.next()
    assert rng.seed != SEED


def test_bad_seed_size():
    with pytest.raises(ValueError):
        XoroShiroPlus256(b"\x00" * 31)