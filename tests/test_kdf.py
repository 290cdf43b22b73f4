import pytest

from gostcrypt.kdf import KEY_SIZE, Kdf, hmac_streebog512

KEY = bytes(range(32))


def test_hmac_length_and_determinism():
    first = hmac_streebog512(KEY, b"data")
    assert len(first) == 64
    assert first == hmac_streebog512(KEY, b"data")


def test_hmac_short_key_equals_zero_padded_key():
    assert hmac_streebog512(b"k", b"msg") == hmac_streebog512(
        b"k" + bytes(127), b"msg"
    )


def test_hmac_long_key_is_hashed():
    long_key = bytes(range(129))
    result = hmac_streebog512(long_key, b"msg")
    assert len(result) == 64
    assert result != hmac_streebog512(long_key[:128], b"msg")


def test_hmac_depends_on_data_and_key():
    base = hmac_streebog512(KEY, b"a")
    assert base != hmac_streebog512(KEY, b"b")
    assert base != hmac_streebog512(bytes(32), b"a")


def test_generate_size_and_determinism():
    kdf = Kdf(KEY, b"t", b"p", b"u", b"a")
    derived = kdf.generate()
    assert len(derived) == KEY_SIZE
    assert derived == Kdf(KEY, b"t", b"p", b"u", b"a").generate()


@pytest.mark.parametrize(
    "args",
    [
        (bytes(32), b"t", b"p", b"u", b"a"),
        (KEY, b"T", b"p", b"u", b"a"),
        (KEY, b"t", b"P", b"u", b"a"),
        (KEY, b"t", b"p", b"U", b"a"),
        (KEY, b"t", b"p", b"u", b"A"),
    ],
)
def test_generate_depends_on_every_parameter(args):
    base = Kdf(KEY, b"t", b"p", b"u", b"a").generate()
    assert Kdf(*args).generate() != base


def test_a_and_u_take_different_positions():
    assert (
        Kdf(KEY, b"", b"", b"x", b"").generate()
        != Kdf(KEY, b"", b"", b"", b"x").generate()
    )


def test_clear_overwrites_parameters():
    kdf = Kdf(KEY, b"t-param", b"p-param", b"u-param", b"a-param")
    before = kdf.generate()
    kdf.clear()
    assert kdf.key != KEY
    assert kdf.t != b"t-param"
    assert kdf.key.isdigit()
    assert kdf.generate() != before