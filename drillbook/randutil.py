"""Random helpers: a debiased bounded draw and a closed-range draw."""

import random

_WORD_BITS = 32
_WORD_MASK = (1 << _WORD_BITS) - 1
_RAND_BITS = 31


def _source(rng):
    return random if rng is None else rng


def bounded_rand(upper, rng=None):
    """Return an unbiased integer in ``[0, upper)``.

    Uses the "debiased modulo, once" method over 32-bit draws: a draw is
    rejected when it falls into the incomplete block at the top of the range.
    """
    if upper <= 0:
        raise ValueError("upper bound must be positive")
    if upper > _WORD_MASK:
        raise ValueError("upper bound does not fit in 32 bits")
    source = _source(rng)
    threshold = (-upper) & _WORD_MASK
    while True:
        draw = source.getrandbits(_WORD_BITS)
        remainder = draw % upper
        if draw - remainder <= threshold:
            return remainder


def rand_in_range(low, high, rng=None):
    """Return an integer in the closed range ``[low, high]``."""
    if high < low:
        raise ValueError("high must not be less than low")
    return _source(rng).getrandbits(_RAND_BITS) % (high - low + 1) + low