"""
Byte-random providers for field sampling.

A random source is any object with a ``randbytes(n)`` method returning ``n``
bytes. ``random.Random`` instances and the test DRNG both qualify.
"""

import logging
import os
import random
import secrets

logger = logging.getLogger(__name__)


class SystemRandomSource:
    """Random bytes from the operating system CSPRNG."""

    def randbytes(self, n):
        return secrets.token_bytes(n)

    def __repr__(self):
        return "SystemRandomSource()"


def default_random_source():
    """Return the OS CSPRNG, or a non-cryptographic fallback if there is none.

    The fallback is ``random.Random`` and must not be used for anything
    security sensitive.
    """
    try:
        os.urandom(1)
    except NotImplementedError:
        logger.warning(
            "no OS randomness source available; falling back to random.Random, "
            "which is NOT suitable for cryptographic use"
        )
        return random.Random()
    return SystemRandomSource()
