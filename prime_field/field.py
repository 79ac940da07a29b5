"""
Arithmetic in GF(p) on plain integers.

``ZqField`` works on raw ``int`` representatives so it can be driven directly
by code that keeps its own integer state (circuit witnesses, serialized
proofs). ``PrimeFieldElement`` in ``element.py`` wraps the same operations in
Python operators.

Most operators expect and return canonical values in ``[0, p)``. The bitwise
operators accept arbitrary non-negative bit patterns, mask them to the bit
length of ``p`` and only then reduce.
"""

import logging

from .element import PrimeFieldElement
from .errors import DivisionByZero
from .exp import exp
from .params import check_modulus, derive_parameters
from .random_source import default_random_source

logger = logging.getLogger(__name__)

_FORMAT_CODES = {2: "b", 8: "o", 10: "d", 16: "x"}


# Negative counts shift the other way.
def _shift_left(a, n):
    return a << n if n >= 0 else a >> -n


def _shift_right(a, n):
    return a >> n if n >= 0 else a << -n


def _parse_literal(text, base):
    if base is None:
        digits = text.strip().lstrip("+-")
        base = 16 if digits[:2].lower() == "0x" else 10
    return int(text, base)


class ZqField:
    """The prime field GF(p) with integer representatives."""

    def __init__(self, p, random_source=None, validate=True):
        if isinstance(p, str):
            p = _parse_literal(p, None)
        if validate:
            check_modulus(p)
        self.params = derive_parameters(p)
        if random_source is None:
            random_source = default_random_source()
        self.random_source = random_source

        self.p = p
        self.zero = 0
        self.one = 1
        self.two = 2
        self.minus_one = p - 1
        self.half = self.params.half
        self.bit_length = self.params.bit_length
        self.mask = self.params.mask

        self.n64 = (self.bit_length - 1) // 64 + 1
        self.R = self.e(1 << (self.n64 * 64))

        self.nqr = self.params.nonresidue
        self.s = self.params.s
        self.t = self.params.t
        self.nqr_to_t = self.params.nonresidue_to_t

        logger.debug("constructed GF(p) with %d-bit modulus", self.bit_length)

    # Construction

    def e(self, a, base=None):
        """Canonical representative of an int or an integer literal."""
        if isinstance(a, str):
            a = _parse_literal(a, base)
        else:
            a = int(a)
        if a < 0:
            na = -a
            if na >= self.p:
                na %= self.p
            return self.p - na if na else 0
        return a % self.p if a >= self.p else a

    literal = e

    def normalize(self, a, base=None):
        """Same as ``e``; kept for callers that parse textual values."""
        return self.e(a, base)

    def __call__(self, value, base=None):
        """Create a field element bound to this field."""
        if isinstance(value, PrimeFieldElement):
            if value.field != self:
                raise ValueError("element belongs to a different field")
            return PrimeFieldElement(value.value, self)
        return PrimeFieldElement(self.e(value, base), self)

    # Canonical arithmetic

    def add(self, a, b):
        res = a + b
        return res - self.p if res >= self.p else res

    def sub(self, a, b):
        return a - b if a >= b else self.p - b + a

    def neg(self, a):
        return self.p - a if a else a

    def mul(self, a, b):
        return (a * b) % self.p

    def mul_scalar(self, base, s):
        """Multiply by an arbitrary integer, normalising it first."""
        return (base * self.e(s)) % self.p

    def square(self, a):
        return (a * a) % self.p

    def eq(self, a, b):
        return a == b

    def neq(self, a, b):
        return a != b

    def is_zero(self, a):
        return a == 0

    def inv(self, a):
        """Multiplicative inverse by the extended Euclidean algorithm."""
        if not a:
            raise DivisionByZero("Division by zero")

        t, new_t = 0, 1
        r, new_r = self.p, a % self.p
        while new_r:
            q = r // new_r
            t, new_t = new_t, t - q * new_t
            r, new_r = new_r, r - q * new_r
        if t < 0:
            t += self.p
        return t

    inverse = inv

    def div(self, a, b):
        return self.mul(a, self.inv(b))

    def idiv(self, a, b):
        """Integer quotient of the representatives."""
        if not b:
            raise DivisionByZero("Division by zero")
        return a // b

    def mod(self, a, b):
        return a % b

    def pow(self, base, exponent):
        """base^exponent; the exponent is a plain integer, not reduced."""
        exponent = int(exponent)
        if exponent < 0:
            return exp(self, self.inv(base), -exponent)
        return exp(self, base, exponent)

    def is_square(self, a):
        """Euler's criterion. Zero counts as a square."""
        if a == 0:
            return True
        return self.pow(a, self.minus_one >> 1) == 1

    # Signed ordering: values above p/2 stand for negative integers

    def signed(self, a):
        return a - self.p if a > self.half else a

    def lt(self, a, b):
        return self.signed(a) < self.signed(b)

    def gt(self, a, b):
        return self.signed(a) > self.signed(b)

    def leq(self, a, b):
        return self.signed(a) <= self.signed(b)

    def geq(self, a, b):
        return self.signed(a) >= self.signed(b)

    # Bitwise operators, masked to the bit length then reduced

    def _reduce_masked(self, res):
        return res - self.p if res >= self.p else res

    def band(self, a, b):
        return self._reduce_masked(a & b & self.mask)

    def bor(self, a, b):
        return self._reduce_masked((a | b) & self.mask)

    def bxor(self, a, b):
        return self._reduce_masked((a ^ b) & self.mask)

    def bnot(self, a):
        return self._reduce_masked(a ^ self.mask)

    def shl(self, a, b):
        """Shift left by b; b in the top of the field means a right shift by p - b."""
        if b < self.bit_length:
            return self._reduce_masked(_shift_left(a, b) & self.mask)
        nb = self.p - b
        if nb < self.bit_length:
            return _shift_right(a, nb)
        return 0

    def shr(self, a, b):
        """Shift right by b; b in the top of the field means a left shift by p - b."""
        if b < self.bit_length:
            return _shift_right(a, b)
        nb = self.p - b
        if nb < self.bit_length:
            return self._reduce_masked(_shift_left(a, nb) & self.mask)
        return 0

    # Boolean operators

    def land(self, a, b):
        return 1 if a and b else 0

    def lor(self, a, b):
        return 1 if a or b else 0

    def lnot(self, a):
        return 0 if a else 1

    # Square root

    def sqrt(self, n):
        """Tonelli-Shanks square root.

        Returns the root in the lower half of the field (``r <= p >> 1``),
        or ``None`` if ``n`` is not a quadratic residue.
        """
        if n == 0:
            return self.zero

        # Euler's criterion
        if self.pow(n, self.minus_one >> 1) != 1:
            return None

        m = self.s
        c = self.nqr_to_t
        t = self.pow(n, self.t)
        r = self.pow(n, self.add(self.t, self.one) >> 1)

        while t != 1:
            sq = self.square(t)
            i = 1
            while sq != 1:
                i += 1
                sq = self.square(sq)

            # b = c^(2^(m-i-1))
            b = c
            for _ in range(m - i - 1):
                b = self.square(b)

            m = i
            c = self.square(b)
            t = self.mul(t, c)
            r = self.mul(r, b)

        if r > self.half:
            r = self.neg(r)
        return r

    # Sampling

    def random(self, rng=None):
        """Sample an element from 2 * bit_length bits of randomness.

        ``rng`` overrides the field's random source for this call; it needs
        a ``randbytes(n)`` method.
        """
        source = rng or self.random_source
        n_bytes = (self.bit_length * 2 + 7) // 8
        return int.from_bytes(source.randbytes(n_bytes), "big") % self.p

    # Text

    def to_string(self, a, base=10):
        """Signed rendering: values above p/2 print with a minus sign."""
        code = _FORMAT_CODES.get(base)
        if code is None:
            raise ValueError(f"unsupported base {base}")
        if a > self.half:
            return "-" + format(self.p - a, code)
        return format(a, code)

    # Identity

    def __eq__(self, other):
        if not isinstance(other, ZqField):
            return NotImplemented
        return self.p == other.p

    def __hash__(self):
        return hash(("ZqField", self.p))

    def __repr__(self):
        return f"GF({self.p})"


def new_field(p, random_source=None, validate=True):
    """Build GF(p) for an odd prime p."""
    return ZqField(p, random_source=random_source, validate=validate)


GF = new_field
