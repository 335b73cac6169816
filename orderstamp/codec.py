"""Order-preserving encoding of real numbers into stamp characters.

``encode`` maps a float onto a fixed-width string so that comparing two
encoded strings gives the same answer as comparing the numbers. Every
character lies in ``[CHAR_MIN, CHAR_MAX)``, the alphabet used by stamps.
"""
from __future__ import annotations

import math
import struct

CHAR_MIN = 1
CHAR_MAX = 254

ENCODED_LEN = 9

_BASE = CHAR_MAX - CHAR_MIN
_SIGN_BIT = 1 << 63
_MASK = (1 << 64) - 1


def _to_bits(value: float) -> int:
    (bits,) = struct.unpack(">Q", struct.pack(">d", value))
    return bits


def _from_bits(bits: int) -> float:
    (value,) = struct.unpack(">d", struct.pack(">Q", bits))
    return value


def encode(value: float) -> str:
    """Return the ``ENCODED_LEN`` character encoding of ``value``.

    Negative numbers have all their bits flipped and non-negative ones get
    the sign bit set, which makes unsigned integer order match float order.
    The integer is then written as big-endian base-253 digits.

    Ints are accepted only when a float holds them exactly; larger ones
    (above 2**53 in magnitude, for most) would collapse onto a neighbour.
    """
    number = float(value)
    if math.isnan(number):
        raise ValueError("cannot encode NaN")
    if number != value:
        raise ValueError("value not exactly representable as a float")
    bits = _to_bits(number)
    if bits & _SIGN_BIT:
        bits = ~bits & _MASK
    else:
        bits |= _SIGN_BIT
    digits = []
    for _ in range(ENCODED_LEN):
        bits, digit = divmod(bits, _BASE)
        digits.append(chr(CHAR_MIN + digit))
    return "".join(reversed(digits))


def decode(stamp: str) -> float:
    """Return the number encoded at the start of ``stamp``.

    Characters past ``ENCODED_LEN`` are ignored, so a full stamp (encoded
    value plus key) can be passed directly.
    """
    if len(stamp) < ENCODED_LEN:
        raise ValueError(f"stamp shorter than {ENCODED_LEN} characters")
    bits = 0
    for ch in stamp[:ENCODED_LEN]:
        digit = ord(ch) - CHAR_MIN
        if not 0 <= digit < _BASE:
            raise ValueError(f"character {ord(ch)} outside the stamp alphabet")
        bits = bits * _BASE + digit
    if bits > _MASK:
        raise ValueError("not a valid encoded number")
    if bits & _SIGN_BIT:
        bits ^= _SIGN_BIT
    else:
        bits = ~bits & _MASK
    value = _from_bits(bits)
    if math.isnan(value):
        raise ValueError("not a valid encoded number")
    return value
