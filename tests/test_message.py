import pytest

from gostcrypt.message import Message


def test_build_layout():
    payload = bytes(range(16))
    icv = bytes(range(32, 64))
    msg = Message.build(1, payload, icv)
    assert msg.seq_num == b"\x00\x00\x00\x01"
    assert msg.digits[:8] == bytes.fromhex("0000f88000000001")
    assert msg.digits[8:24] == payload
    assert msg.digits[24:] == icv
    assert len(msg.digits) == 56


def test_header_fields():
    msg = Message.build(0, bytes(16), bytes(32))
    assert msg.external_key_id_flag_with_version == b"\x00\x00"
    assert msg.cs == b"\xf8"
    assert msg.key_id == b"\x80"


def test_sequence_number_is_big_endian():
    msg = Message.build(0x01020304, bytes(16), bytes(32))
    assert msg.seq_num == bytes([1, 2, 3, 4])


def test_sequence_number_out_of_range():
    with pytest.raises(ValueError):
        Message.build(2**32, bytes(16), bytes(32))
    with pytest.raises(ValueError):
        Message.build(-1, bytes(16), bytes(32))


def test_str_format():
    msg = Message.build(2, b"\xaa" * 16, b"\xbb" * 32)
    lines = str(msg).split("\n")
    assert lines[0] == "Message:"
    assert lines[1] == "    ExternalKeyIdFlagWithVersion: 0000"
    assert lines[2] == "    CS:                           f8"
    assert lines[3] == "    KeyId:                        80"
    assert lines[4] == "    SeqNum:                       00000002"
    assert lines[5] == "    Payload:                      " + "aa" * 16
    assert lines[6] == "    ICV:                          " + "bb" * 32
    assert lines[7] == "    As block:                     " + msg.digits.hex()
    assert len(lines) == 8