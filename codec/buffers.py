"""
Fixed-width byte encodings of non-negative integers.
"""

from prime_field.errors import EncodingOverflow


def _check_fits(n, length):
    if n < 0 or n >> (8 * length):
        raise EncodingOverflow(f"Integer too large for length {length}")


def be_int_to_buff(n, length):
    """Encode n as exactly `length` big-endian bytes."""
    n = int(n)
    _check_fits(n, length)
    return n.to_bytes(length, "big")


def be_buff_to_int(buff):
    """Decode a big-endian byte string. Any length is accepted."""
    return int.from_bytes(buff, "big")


def le_int_to_buff(n, length):
    """Encode n as exactly `length` little-endian bytes."""
    n = int(n)
    _check_fits(n, length)
    return n.to_bytes(length, "little")


def le_buff_to_int(buff):
    """Decode a little-endian byte string. Any length is accepted."""
    return int.from_bytes(buff, "little")


def I2OSP(n, length):
    """Convert integer to octet string."""
    return be_int_to_buff(n, length)


def OS2IP(octets):
    """Convert octet string to integer."""
    return be_buff_to_int(octets)
