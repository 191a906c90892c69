"""SHA-256 message digest (FIPS 180-4)."""

from __future__ import annotations

import struct

_MASK = 0xFFFFFFFF

# First 32 bits of the fractional parts of the cube roots of the first 64 primes.
_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5,
    0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC,
    0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7,
    0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3,
    0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5,
    0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

# First 32 bits of the fractional parts of the square roots of the first 8 primes.
_H0 = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)


def _rotr(word: int, count: int) -> int:
    return ((word >> count) | (word << (32 - count))) & _MASK


def _sigma_zero(word: int) -> int:
    return _rotr(word, 7) ^ _rotr(word, 18) ^ (word >> 3)


def _sigma_one(word: int) -> int:
    return _rotr(word, 17) ^ _rotr(word, 19) ^ (word >> 10)


def _cap_sigma_zero(word: int) -> int:
    return _rotr(word, 2) ^ _rotr(word, 13) ^ _rotr(word, 22)


def _cap_sigma_one(word: int) -> int:
    return _rotr(word, 6) ^ _rotr(word, 11) ^ _rotr(word, 25)


def _ch(x: int, y: int, z: int) -> int:
    return (x & y) ^ (~x & z & _MASK)


def _maj(x: int, y: int, z: int) -> int:
    return (x & y) ^ (x & z) ^ (y & z)


def _pad(message: bytes) -> bytes:
    """Pad to a multiple of 64 bytes, ending with the bit length."""
    bit_length = (len(message) * 8) & 0xFFFFFFFFFFFFFFFF
    zeros = (55 - len(message)) % 64
    return message + b"\x80" + b"\x00" * zeros + struct.pack(">Q", bit_length)


def _compress(state: list[int], block: bytes) -> None:
    words = list(struct.unpack(">16I", block))
    for t in range(16, 64):
        words.append(
            (_sigma_one(words[t - 2]) + words[t - 7]
             + _sigma_zero(words[t - 15]) + words[t - 16]) & _MASK
        )
    a, b, c, d, e, f, g, h = state
    for k, w in zip(_K, words):
        t1 = (h + _cap_sigma_one(e) + _ch(e, f, g) + k + w) & _MASK
        t2 = (_cap_sigma_zero(a) + _maj(a, b, c)) & _MASK
        h, g, f, e = g, f, e, (d + t1) & _MASK
        d, c, b, a = c, b, a, (t1 + t2) & _MASK
    for i, value in enumerate((a, b, c, d, e, f, g, h)):
        state[i] = (state[i] + value) & _MASK


def sha256_digest(data: bytes | bytearray | memoryview | str) -> bytes:
    """Return the 32-byte SHA-256 digest of *data* (text is UTF-8 encoded)."""
    if isinstance(data, str):
        message = data.encode("utf-8")
    elif isinstance(data, (bytes, bytearray, memoryview)):
        message = bytes(data)
    else:
        raise TypeError(f"cannot hash object of type {type(data).__name__}")
    state = list(_H0)
    padded = _pad(message)
    for offset in range(0, len(padded), 64):
        _compress(state, padded[offset:offset + 64])
    return struct.pack(">8I", *state)