"""Shortcode generation utility

This module provides a helper for drawing random short codes over the
Base62 alphabet. Uniqueness is not guaranteed here; callers redraw until
the code is free.

Functions:
    random_shortcode(length=6, rng=None):
        Draw a random Base62 short code.

Example:
    >>> import random
    >>> from clickshortener.utils import random_shortcode
    >>> code = random_shortcode(rng=random.Random(42))
    >>> len(code)
    6
"""

import random
import string

from clickshortener.constants import Shortcode


ALPHABET = string.ascii_lowercase + string.ascii_uppercase + string.digits
BASE = len(ALPHABET)  # 26 lowercase + 26 uppercase + 10 digits

_system_random = random.SystemRandom()


def random_shortcode(length: int = Shortcode.LENGTH, rng: random.Random | None = None) -> str:
    """Draw a random Base62 short code.

    Every character is drawn independently and uniformly from the 62-symbol
    alphabet [a-zA-Z0-9], giving BASE**length equally likely codes.

    Args:
        length (int, optional):
            Number of characters in the code. Defaults to 6.

        rng (random.Random, optional):
            Source of randomness. Defaults to a system-entropy generator.
            Pass a seeded random.Random for reproducible draws.

    Returns:
        str: A short alphanumeric code.

    Raises:
        TypeError: If length is not an integer.
        ValueError: If length is not positive.
    """
    if isinstance(length, bool) or not isinstance(length, int):
        raise TypeError(f'Length must be of type integer (given type: {type(length)}).')
    if length < 1:
        raise ValueError(f'Length must be a positive integer (given value: {length}).')

    rng = rng or _system_random
    return ''.join(rng.choice(ALPHABET) for _ in range(length))
