import pytest

from gostcrypt.app import TEST_PLAINTEXT, main, run, self_test


@pytest.fixture
def program(tmp_path):
    path = tmp_path / "program.bin"
    path.write_bytes(b"program image" * 50)
    return path


def test_run_counts_blocks(tmp_path, program):
    data = tmp_path / "input.bin"
    data.write_bytes(bytes(range(48)))
    assert run(data, program) == 3


def test_run_empty_input(tmp_path, program):
    data = tmp_path / "input.bin"
    data.write_bytes(b"")
    assert run(data, program) == 0


def test_run_rejects_partial_block(tmp_path, program):
    data = tmp_path / "input.bin"
    data.write_bytes(bytes(20))
    with pytest.raises(ValueError):
        run(data, program)


def test_run_missing_input(tmp_path, program):
    with pytest.raises(FileNotFoundError):
        run(tmp_path / "absent", program)


def test_run_missing_program(tmp_path):
    data = tmp_path / "input.bin"
    data.write_bytes(bytes(16))
    with pytest.raises(FileNotFoundError):
        run(data, tmp_path / "absent")


def test_self_test_covers_vector(program):
    assert self_test(program) == len(TEST_PLAINTEXT) // 16


def test_main_self_test_succeeds(program):
    assert main(["--test", "--program", str(program)]) == 0


def test_main_run_succeeds(tmp_path, program):
    data = tmp_path / "input.bin"
    data.write_bytes(bytes(range(32)))
    assert main([str(data), "--program", str(program)]) == 0


def test_main_missing_input_fails(tmp_path, program):
    assert main([str(tmp_path / "absent"), "--program", str(program)]) == 1


def test_main_partial_block_fails(tmp_path, program):
    data = tmp_path / "input.bin"
    data.write_bytes(bytes(5))
    assert main([str(data), "--program", str(program)]) == 1