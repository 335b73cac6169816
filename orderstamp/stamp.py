"""Order stamps: sortable strings that let a list item move with one write.

Each item of an ordered list keeps a stamp in a sortable column. Inserting or
moving an item only requires a new stamp for that item, generated with
``between`` from its future neighbours, or with ``start``/``end`` at the
edges of the list. No other row is rewritten.

Stamps are built from characters in ``[CHAR_MIN, CHAR_MAX)`` and ordered by
plain code point comparison. Every generated stamp ends with a random suffix
so that concurrent callers asking for a stamp between the same neighbours
get different values. The guarantee is probabilistic: two suffixes collide
with probability about 253**-16.
"""
from __future__ import annotations

import logging
import math
import random
import time
from typing import Callable, Optional

from . import codec
from .codec import CHAR_MAX, CHAR_MIN

logger = logging.getLogger(__name__)

RANDOM_SUFFIX_LEN = 16

# highest character a stamp may contain
_CEILING = CHAR_MAX - 1

_system_random = random.SystemRandom()


class InvalidArgument(ValueError):
    """No stamp can sort strictly between the given stamps."""


def wall_clock_ms() -> float:
    return time.time() * 1000


def random_int(low: float, high: float, rng: Optional[random.Random] = None) -> int:
    """Return a uniformly random integer in ``[ceil(low), floor(high))``.

    ``low`` is returned unchanged when ``low == high``, so callers that need
    an int back must pass int bounds, as ``between`` does.
    """
    if low == high:
        return low
    return (rng or _system_random).randrange(math.ceil(low), math.floor(high))


def common_prefix_len(a: str, b: str) -> int:
    n = 0
    for x, y in zip(a, b):
        if x != y:
            break
        n += 1
    return n


def is_valid(stamp: str) -> bool:
    """True when ``stamp`` is non-empty and only uses the stamp alphabet."""
    return bool(stamp) and all(CHAR_MIN <= ord(ch) < CHAR_MAX for ch in stamp)


def value_of(stamp: str) -> float:
    """Return the number a ``from_value``/``start``/``end`` stamp was built from."""
    return codec.decode(stamp)


class StampGenerator:
    """Generates stamps from an injectable clock and random source.

    ``clock`` returns the current time as a real number (milliseconds by
    default). ``rng`` is any ``random.Random`` compatible object. Generators
    hold no mutable state of their own and are safe to share between threads.
    """

    def __init__(
        self,
        clock: Optional[Callable[[], float]] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.clock = clock or wall_clock_ms
        self.rng = rng or _system_random

    def random_int(self, low: float, high: float) -> int:
        return random_int(low, high, self.rng)

    def random_suffix(self, length: int = RANDOM_SUFFIX_LEN) -> str:
        return "".join(chr(self.random_int(CHAR_MIN, CHAR_MAX)) for _ in range(length))

    def start(self) -> str:
        """Stamp before every stamp previously returned by ``start``."""
        return self.from_value(-self.clock())

    def end(self) -> str:
        """Stamp after every stamp previously returned by ``end``."""
        return self.from_value(self.clock())

    def start_many(self, count: int) -> list[str]:
        """``count`` increasing stamps that all sort before earlier ``start`` stamps."""
        return self._many(-self.clock(), count)

    def end_many(self, count: int) -> list[str]:
        """``count`` increasing stamps that all sort after earlier ``end`` stamps."""
        return self._many(self.clock(), count)

    def _many(self, value: float, count: int) -> list[str]:
        keys: set[str] = set()
        while len(keys) < count:
            keys.add(self.random_suffix())
        prefix = codec.encode(value)
        return [prefix + key for key in sorted(keys)]

    def from_value(self, value: float, key: Optional[str] = None) -> str:
        """Stamp ordered by ``value``.

        ``key`` is appended to the encoded value to break ties between equal
        values. Pass an existing unique identifier to avoid the random suffix
        used when it is omitted.
        """
        if key is None:
            key = self.random_suffix()
        return codec.encode(value) + key

    def between(self, prev: str, nxt: str) -> str:
        """Return a new stamp sorting strictly between ``prev`` and ``nxt``.

        The arguments may be given in either order. Raises ``InvalidArgument``
        when they are equal, or when ``nxt`` only extends ``prev`` with
        ``CHAR_MIN`` characters, which leaves no room for a random stamp.
        """
        if prev == nxt:
            raise InvalidArgument("prev and next must be different")
        if prev > nxt:
            prev, nxt = nxt, prev

        prefix_len = common_prefix_len(prev, nxt)
        out = [nxt[:prefix_len]]

        if prefix_len < len(prev):
            # prev[prefix_len] < nxt[prefix_len]; anything from the first up to
            # but excluding the second keeps the result below nxt
            out.append(chr(self.random_int(ord(prev[prefix_len]), ord(nxt[prefix_len]))))
            # raise the result above prev past any run of ceiling characters
            for ch in prev[prefix_len + 1 :]:
                code = ord(ch)
                if code < _CEILING:
                    out.append(chr(self.random_int(code + 1, CHAR_MAX)))
                    break
                out.append(ch)
        else:
            # prev is a prefix of nxt: go below nxt's remainder
            for ch in nxt[prefix_len:]:
                code = ord(ch)
                if code > CHAR_MIN:
                    out.append(chr(self.random_int(CHAR_MIN, code)))
                    break
                out.append(ch)
            else:
                raise InvalidArgument("no stamp sorts between prev and next")

        out.append(self.random_suffix())
        stamp = "".join(out)
        logger.debug("generated stamp of length %d between lengths %d and %d", len(stamp), len(prev), len(nxt))
        return stamp


default_generator = StampGenerator()


def random_suffix(length: int = RANDOM_SUFFIX_LEN) -> str:
    return default_generator.random_suffix(length)


def start() -> str:
    return default_generator.start()


def end() -> str:
    return default_generator.end()


def from_value(value: float, key: Optional[str] = None) -> str:
    return default_generator.from_value(value, key)


def between(prev: str, nxt: str) -> str:
    return default_generator.between(prev, nxt)
