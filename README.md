# gostcrypt

Pure-Python implementations of Russian GOST cryptographic primitives, plus a few
helpers built on them. There are no third-party runtime dependencies.

Modules:

- `gostcrypt.streebog`: the Streebog hash (GOST R 34.11-2012), 256- and 512-bit digests.
- `gostcrypt.kuznyechik`: the Kuznyechik 128-bit block cipher (GOST R 34.12-2015) and its
  building blocks (`s_transform`, `s_inverse`, `l_transform`, `l_inverse`, `xor_blocks`,
  `gf_mul`).
- `gostcrypt.ctr_acpkm`: single-block gamma encryption in the style of CTR-ACPKM, with a
  Streebog-256 digest of the ciphertext as the verification code.
- `gostcrypt.kdf`: HMAC over Streebog-512 and a two-round key derivation function.
- `gostcrypt.xoroshiro`: a xoroshiro256+ style pseudo-random generator.
- `gostcrypt.random_files`: dumping generator output to files.
- `gostcrypt.message`: the packet layout with header fields, sequence number, payload and ICV.
- `gostcrypt.validation`: file integrity checks by digest.
- `gostcrypt.app`: the `gostcrypt` command.

These are reference implementations, written for clarity and study. They make no
attempt at constant-time behaviour and are slow. Do not rely on them to protect
real data.

## Hashing

```python
from gostcrypt.streebog import Streebog, streebog256, streebog512

digest = streebog256(b"message")        # 32 bytes
long_digest = streebog512(b"message")   # 64 bytes

h = Streebog(32)
h.update(b"mess")
h.update(b"age")
print(h.hexdigest())
```

`Streebog(digest_size)` accepts 32 or 64 and follows the familiar `hashlib` shape:
`update`, `digest`, `hexdigest`, `copy` and `reset`. `digest()` leaves the state
intact, so more data may be fed afterwards.

## Block cipher

```python
from gostcrypt.kuznyechik import Kuznyechik

key = bytes(range(32))            # made-up 32-byte key
cipher = Kuznyechik(key)
ct = cipher.encrypt_block(bytes(16))
assert cipher.decrypt_block(ct) == bytes(16)
cipher.clear()                    # overwrite the round keys with zeros
```

Keys must be 32 bytes and blocks 16 bytes; other sizes raise `ValueError`.

## CTR-ACPKM style mode

```python
from gostcrypt.ctr_acpkm import CtrAcpkm, MacMismatchError

key = bytes(range(32))
iv = bytes(16)
mode = CtrAcpkm(key, iv)
ciphertext, mac = mode.encrypt(b"sixteen byte msg")
plaintext = mode.decrypt(ciphertext, mac)
```

`CtrAcpkm` encrypts the IV once under the key and XORs that keystream block with
every 16-byte block it is given; the same keystream block is used for every call.
Without an IV a random one is drawn. A verification code that does not match the
ciphertext raises `MacMismatchError`. After `clear()` the mode refuses to work.

`KeyedCtrAcpkm(iv)` keeps only the IV and takes the key on every
`encrypt(plaintext, key)` / `decrypt(ciphertext, key, mac)` call.
`make_gamma(iv, key)` and `verification_code(ciphertext)` are available directly.

## HMAC and key derivation

```python
from gostcrypt.kdf import Kdf, hmac_streebog512

tag = hmac_streebog512(b"secret", b"data")                          # 64 bytes
derived = Kdf(b"secret", b"label", b"p", b"u", b"a").generate()    # 32 bytes
```

`hmac_streebog512` runs a single hash object through the whole computation without
resetting it between passes, so its output differs from a textbook HMAC.
`Kdf.clear()` overwrites every parameter with random filler.

## Pseudo-random numbers

```python
from gostcrypt.xoroshiro import XoroShiroPlus256

rng = XoroShiroPlus256(bytes(range(32)))
first = rng.next()
more = [value for _, value in zip(range(4), rng)]
```

The 32-byte seed is read as four big-endian 64-bit words; `rng.seed` returns the
current state in the same form.

`gostcrypt.random_files` appends generator output to files, either as raw
little-endian 64-bit values (`write_values(rng, count, path)`) or as text of `0`/`1`
digits, 64 per value (`write_values_as_bits(rng, count, path)`). Ready-made helpers
take a directory (default: the current one): `create_1000_values`,
`create_10000_values`, `create_1mb_file` (raw file plus bit-text file),
`create_100mb_file`, `create_1000mb_file` and `create_n_values_bits_file`.

## Messages

```python
from gostcrypt.message import Message

msg = Message.build(1, bytes(16), bytes(32))
print(msg)
assert len(msg.digits) == 56
```

`Message.build(seq_num, payload, icv)` takes a sequence number that fits in 32 bits
and assembles the fixed header (`00 00`, `f8`, `80`), the big-endian sequence
number, the payload and the ICV into `digits`.

## File validation

```python
from gostcrypt.validation import IntegrityError, file_digest, validate_file

digest = file_digest("some.bin")                  # Streebog-256 by default
validate_file("some.bin", digest)                 # raises IntegrityError on mismatch
```

Supported algorithms are `"streebog256"`, `"streebog512"` and `"md5"`; any other
name raises `ValueError`.

## Command line

```
gostcrypt [INPUT] [--test] [--program PATH]
```

The command hashes a program file (by default the running script) with
Streebog-256, encrypts and decrypts every 16-byte block of `INPUT` (default
`fileName1`) with `CtrAcpkm` under a fixed key and a random IV, checks each block
comes back unchanged, and hashes the program file again to confirm it did not
change. The input length must be a multiple of 16 bytes. `--test` uses a built-in
64-byte test vector with a fixed key and IV instead of a file. Timings are logged,
and the exit status is 1 on any error. The same steps are available as
`gostcrypt.app.run(input_path, program_path)` and
`gostcrypt.app.self_test(program_path)`, which return the number of blocks processed.

## What it does not do

The package does not encrypt or decrypt streams of packets: there is no encoder or
decoder that turns data into `Message` objects or back. It does not write any
ciphertext to disk, and the command only checks the round trip in memory.