"""Packet layout: header fields, sequence number, payload and integrity check."""

from __future__ import annotations

from dataclasses import dataclass

EXTERNAL_KEY_ID_FLAG_WITH_VERSION = b"\x00\x00"
CS = b"\xf8"
KEY_ID = b"\x80"


@dataclass(frozen=True)
class Message:
    """One encoded packet with its fields and the assembled bytes."""

    external_key_id_flag_with_version: bytes
    cs: bytes
    key_id: bytes
    seq_num: bytes
    payload: bytes
    icv: bytes
    digits: bytes

    @classmethod
    def build(cls, seq_num: int, payload, icv) -> Message:
        """Assemble a packet from a 32-bit sequence number, payload and ICV."""
        if not 0 <= seq_num < 2**32:
            raise ValueError("sequence number must fit in 32 bits")
        seq = seq_num.to_bytes(4, "big")
        payload = bytes(payload)
        icv = bytes(icv)
        digits = EXTERNAL_KEY_ID_FLAG_WITH_VERSION + CS + KEY_ID + seq + payload + icv
        return cls(
            external_key_id_flag_with_version=EXTERNAL_KEY_ID_FLAG_WITH_VERSION,
            cs=CS,
            key_id=KEY_ID,
            seq_num=seq,
            payload=payload,
            icv=icv,
            digits=digits,
        )

    def __str__(self) -> str:
        return (
            "Message:\n"
            f"    ExternalKeyIdFlagWithVersion: {self.external_key_id_flag_with_version.hex()}\n"
            f"    CS:                           {self.cs.hex()}\n"
            f"    KeyId:                        {self.key_id.hex()}\n"
            f"    SeqNum:                       {self.seq_num.hex()}\n"
            f"    Payload:                      {self.payload.hex()}\n"
            f"    ICV:                          {self.icv.hex()}\n"
            f"    As block:                     {self.digits.hex()}"
        )