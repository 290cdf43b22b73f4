from gostcrypt.random_files import (
    create_1000_values,
    create_10000_values,
    create_1mb_file,
    create_n_values_bits_file,
    write_values,
    write_values_as_bits,
)
from gostcrypt.xoroshiro import XoroShiroPlus256

SEED = bytes(range(32))


def test_write_values_content(tmp_path):
    path = write_values(XoroShiroPlus256(SEED), 5, tmp_path / "out.bin")
    data = path.read_bytes()
    rng = XoroShiroPlus256(SEED)
    expected = [rng.next() for _ in range(5)]
    assert [
        int.from_bytes(data[i : i + 8], "little") for i in range(0, 40, 8)
    ] == expected


def test_write_values_appends(tmp_path):
    target = tmp_path / "out.bin"
    rng = XoroShiroPlus256(SEED)
    write_values(rng, 3, target)
    write_values(rng, 3, target)
    fresh = XoroShiroPlus256(SEED)
    assert target.read_bytes() == b"".join(
        fresh.next().to_bytes(8, "little") for _ in range(6)
    )


def test_bits_match_binary(tmp_path):
    binary = write_values(XoroShiroPlus256(SEED), 4, tmp_path / "a.bin").read_bytes()
    text = write_values_as_bits(XoroShiroPlus256(SEED), 4, tmp_path / "a.txt").read_text()
    assert len(text) == 4 * 64
    assert set(text) <= {"0", "1"}
    assert bytes(int(text[i : i + 8], 2) for i in range(0, len(text), 8)) == binary


def test_create_1000_values(tmp_path):
    path = create_1000_values(XoroShiroPlus256(SEED), tmp_path)
    assert path.name == "xorshift_1000values.bin"
    assert path.stat().st_size == 8000


def test_create_10000_values(tmp_path):
    path = create_10000_values(XoroShiroPlus256(SEED), tmp_path)
    assert path.name == "xorshift_10000values.bin"
    assert path.stat().st_size == 80000


def test_create_n_values_bits_file_name(tmp_path):
    path = create_n_values_bits_file(XoroShiroPlus256(SEED), 7, tmp_path)
    assert path.name == "xorshift_7bin.txt"
    assert len(path.read_text()) == 7 * 64


def test_create_1mb_file(tmp_path):
    binary, bits = create_1mb_file(XoroShiroPlus256(SEED), tmp_path)
    assert binary.name == "xorshift_1mb.bin"
    assert binary.stat().st_size == 131072 * 8
    assert bits.name == "xorshift_131072bin.txt"
    assert bits.stat().st_size == 131072 * 64