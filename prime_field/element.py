"""
Field elements bound to their field.
"""


class PrimeFieldElement:
    """Element of GF(p), carrying the ZqField it belongs to.

    The value is reduced into [0, p) on construction. Equal elements hash
    like their int value, so they can be looked up by plain ints.

    Plain ints on either side of an operator are read as field literals.
    Mixing elements of two different fields raises ValueError.
    """

    __slots__ = ("value", "field")

    def __init__(self, value, field):
        self.field = field
        self.value = field.e(value)

    def _coerce(self, other):
        if isinstance(other, PrimeFieldElement):
            if other.field != self.field:
                raise ValueError(f"cannot mix elements of {self.field} and {other.field}")
            return other.value
        if isinstance(other, int):
            return self.field.e(other)
        return None

    def _new(self, value):
        return PrimeFieldElement(value, self.field)

    def __add__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self._new(self.field.add(self.value, b))

    __radd__ = __add__

    def __sub__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self._new(self.field.sub(self.value, b))

    def __rsub__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self._new(self.field.sub(b, self.value))

    def __mul__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self._new(self.field.mul(self.value, b))

    __rmul__ = __mul__

    def __truediv__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self._new(self.field.div(self.value, b))

    def __rtruediv__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self._new(self.field.div(b, self.value))

    def __pow__(self, exponent):
        if isinstance(exponent, PrimeFieldElement):
            exponent = exponent.value
        return self._new(self.field.pow(self.value, exponent))

    def __neg__(self):
        return self._new(self.field.neg(self.value))

    def inverse(self):
        return self._new(self.field.inv(self.value))

    def square(self):
        return self._new(self.field.square(self.value))

    # Signed ordering

    def __lt__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self.field.lt(self.value, b)

    def __gt__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self.field.gt(self.value, b)

    def __le__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self.field.leq(self.value, b)

    def __ge__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self.field.geq(self.value, b)

    # Bitwise and shifts

    def __and__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self._new(self.field.band(self.value, b))

    __rand__ = __and__

    def __or__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self._new(self.field.bor(self.value, b))

    __ror__ = __or__

    def __xor__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self._new(self.field.bxor(self.value, b))

    __rxor__ = __xor__

    def __invert__(self):
        return self._new(self.field.bnot(self.value))

    def __lshift__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self._new(self.field.shl(self.value, b))

    def __rshift__(self, other):
        b = self._coerce(other)
        if b is None:
            return NotImplemented
        return self._new(self.field.shr(self.value, b))

    def __bool__(self):
        return self.value != 0

    def __eq__(self, other):
        if isinstance(other, int):
            return self.value == self.field.e(other)
        if isinstance(other, PrimeFieldElement):
            return self.field == other.field and self.value == other.value
        return NotImplemented

    def __hash__(self):
        return hash(self.value)

    def __int__(self):
        return self.value

    def __repr__(self):
        return f"PrimeFieldElement({self.value}, {self.field!r})"

    def __str__(self):
        return self.field.to_string(self.value)

    def sqrt(self):
        """Square root in the lower half of the field, or None."""
        r = self.field.sqrt(self.value)
        if r is None:
            return None
        return self._new(r)

    def is_square(self):
        """Check if element is a quadratic residue."""
        return self.field.is_square(self.value)
