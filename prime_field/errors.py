"""
Exceptions raised by the prime field and its codecs.
"""


class FieldError(Exception):
    """Base class for prime field errors."""


class DivisionByZero(FieldError, ZeroDivisionError):
    """Inverse or division by the zero element."""


class EncodingOverflow(FieldError, ValueError):
    """Integer does not fit in the requested number of bytes."""


class InvalidModulus(FieldError, ValueError):
    """Modulus is not an odd prime greater than 2."""
