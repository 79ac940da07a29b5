"""
Square-and-multiply exponentiation over a field.
"""


def exp(field, base, exponent):
    """Compute base^exponent using the field's square and mul.

    Bits of the exponent are consumed from the most significant down, so
    ``exp(F, b, 1)`` returns ``b`` untouched.
    """
    if exponent == 0:
        return field.one

    result = base
    for i in range(exponent.bit_length() - 2, -1, -1):
        result = field.square(result)
        if (exponent >> i) & 1:
            result = field.mul(result, base)
    return result
