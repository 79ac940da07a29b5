"""
Byte and JSON encodings for field elements.
"""

from .buffers import (
    be_int_to_buff, be_buff_to_int, le_int_to_buff, le_buff_to_int,
    I2OSP, OS2IP
)
from .bigints import Kind, classify, stringify_bigints, unstringify_bigints, dumps, loads

__all__ = [
    'be_int_to_buff', 'be_buff_to_int', 'le_int_to_buff', 'le_buff_to_int',
    'I2OSP', 'OS2IP',
    'Kind', 'classify', 'stringify_bigints', 'unstringify_bigints',
    'dumps', 'loads'
]
