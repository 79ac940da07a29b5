"""
Prime field subpackage: arithmetic over GF(p) and named fields.
"""

from .errors import FieldError, DivisionByZero, EncodingOverflow, InvalidModulus
from .params import FieldParameters, derive_parameters, is_probable_prime
from .element import PrimeFieldElement
from .exp import exp
from .field import ZqField, GF, new_field
from .random_source import SystemRandomSource, default_random_source
from .base import ScalarField
from .instances import (
    BN128ScalarField, BN128BaseField, BLS12381ScalarField,
    Secp256k1BaseField, P256ScalarField, FIELDS, get_field
)

__all__ = [
    'FieldError', 'DivisionByZero', 'EncodingOverflow', 'InvalidModulus',
    'FieldParameters', 'derive_parameters', 'is_probable_prime',
    'PrimeFieldElement', 'exp',
    'ZqField', 'GF', 'new_field',
    'SystemRandomSource', 'default_random_source',
    'ScalarField',
    'BN128ScalarField', 'BN128BaseField', 'BLS12381ScalarField',
    'Secp256k1BaseField', 'P256ScalarField', 'FIELDS', 'get_field'
]
