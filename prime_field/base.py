"""
Base class for named prime fields.
"""

from .element import PrimeFieldElement
from .field import GF


class ScalarField:
    """Prime field configured by subclassing with ``order=p``.

        class BN128ScalarField(ScalarField, order=0x30644e...):
            pass
    """

    name = None
    order = None
    field = None
    field_bytes_length = None

    def __init_subclass__(cls, order=None, **kwargs):
        """Initialize subclass with a specific field order."""
        super().__init_subclass__(**kwargs)
        if order is not None:
            cls.order = order
            cls.field = GF(order)
            cls.field_bytes_length = (order.bit_length() + 7) // 8

    @classmethod
    def scalar_byte_length(cls):
        return cls.field_bytes_length

    @classmethod
    def element(cls, value):
        return cls.field(value)

    @classmethod
    def zero(cls):
        return cls.field(0)

    @classmethod
    def one(cls):
        return cls.field(1)

    @classmethod
    def random(cls, rng=None):
        """Generate random scalar."""
        return PrimeFieldElement(cls.field.random(rng), cls.field)

    @classmethod
    def serialize(cls, scalars):
        """Serialize list of scalars to little-endian bytes."""
        result = b""
        for scalar in scalars:
            if isinstance(scalar, PrimeFieldElement):
                value = scalar.value
            else:
                value = cls.field.e(scalar)
            result += value.to_bytes(cls.field_bytes_length, 'little')
        return result

    @classmethod
    def deserialize(cls, data):
        """Deserialize bytes to list of scalars.

        Encodings of values >= order are rejected so every scalar has exactly
        one byte representation.
        """
        scalar_len = cls.field_bytes_length
        if len(data) % scalar_len != 0:
            raise ValueError("Invalid data length")

        scalars = []
        for i in range(0, len(data), scalar_len):
            value = int.from_bytes(data[i:i+scalar_len], 'little')
            if value >= cls.order:
                raise ValueError("Non-canonical scalar encoding")
            scalars.append(cls.field(value))
        return scalars
