"""
Parameters derived from a prime modulus.

Everything here is a pure function of ``p``: two ``FieldParameters`` built
from the same prime are interchangeable, so derivation is cached per modulus.
"""

import logging
from dataclasses import dataclass
from functools import lru_cache

from .errors import InvalidModulus

logger = logging.getLogger(__name__)

# Deterministic for p < 3.3 * 10**24, strong probable-prime test above that.
_WITNESSES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def is_probable_prime(n):
    """Miller-Rabin test against a fixed set of prime witnesses."""
    if n < 2:
        return False
    for q in _WITNESSES:
        if n % q == 0:
            return n == q

    d, r = n - 1, 0
    while d % 2 == 0:
        d //= 2
        r += 1

    for a in _WITNESSES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def check_modulus(p):
    """Raise InvalidModulus unless p is an odd prime greater than 2."""
    if isinstance(p, bool) or not isinstance(p, int):
        raise InvalidModulus(f"modulus must be an int, got {type(p).__name__}")
    if p <= 2:
        raise InvalidModulus(f"modulus must be greater than 2, got {p}")
    if p % 2 == 0:
        raise InvalidModulus(f"modulus must be odd, got {p}")
    if not is_probable_prime(p):
        raise InvalidModulus(f"modulus is not prime: {p}")


@dataclass(frozen=True)
class FieldParameters:
    """Constants of GF(p) used by the arithmetic, ordering and sqrt code."""

    p: int
    bit_length: int
    mask: int
    half: int
    nonresidue: int
    s: int
    t: int
    nonresidue_to_t: int


def find_nonresidue(p):
    """Smallest n >= 2 with n^((p-1)/2) == -1 (mod p)."""
    e = (p - 1) >> 1
    minus_one = p - 1
    n = 2
    while pow(n, e, p) != minus_one:
        n += 1
    return n


def two_adic_decomposition(p):
    """Return (s, t) with p - 1 = t * 2^s and t odd."""
    s = 0
    t = p - 1
    while t & 1 == 0:
        s += 1
        t >>= 1
    return s, t


@lru_cache(maxsize=None)
def derive_parameters(p):
    """Derive the FieldParameters of GF(p).

    The modulus is trusted here; callers that want validation run
    check_modulus first. For a composite p the nonresidue search may not
    terminate.
    """
    bit_length = p.bit_length()
    nonresidue = find_nonresidue(p)
    s, t = two_adic_decomposition(p)
    params = FieldParameters(
        p=p,
        bit_length=bit_length,
        mask=(1 << bit_length) - 1,
        half=p >> 1,
        nonresidue=nonresidue,
        s=s,
        t=t,
        nonresidue_to_t=pow(nonresidue, t, p),
    )
    logger.debug(
        "derived parameters for %d-bit modulus: nonresidue=%d s=%d",
        bit_length, nonresidue, s,
    )
    return params
