"""
JSON-safe conversion of nested structures holding big integers.

``stringify_bigints`` turns every integer (and field element) into its
base-10 string; ``unstringify_bigints`` turns every string of decimal digits
back into an int. Strings of digits that were never integers come back as
ints too: the round trip only holds for structures whose digit strings are
all big integers.
"""

import enum
import json
import re
from collections.abc import Mapping

from prime_field.element import PrimeFieldElement

_DIGITS = re.compile(r"[0-9]+")


class Kind(enum.Enum):
    SCALAR = "scalar"
    SEQUENCE = "sequence"
    MAPPING = "mapping"
    OTHER = "other"


def classify(o):
    """Kind of a value as far as stringification is concerned.

    Booleans are OTHER even though they are ints, so ``True`` survives the
    round trip as JSON ``true``.
    """
    if isinstance(o, PrimeFieldElement):
        return Kind.SCALAR
    if isinstance(o, int) and not isinstance(o, bool):
        return Kind.SCALAR
    if isinstance(o, (list, tuple)):
        return Kind.SEQUENCE
    if isinstance(o, Mapping):
        return Kind.MAPPING
    return Kind.OTHER


def stringify_bigints(o):
    kind = classify(o)
    if kind is Kind.SCALAR:
        return str(int(o))
    if kind is Kind.SEQUENCE:
        return [stringify_bigints(x) for x in o]
    if kind is Kind.MAPPING:
        return {k: stringify_bigints(v) for k, v in o.items()}
    return o


def unstringify_bigints(o):
    if isinstance(o, str):
        return int(o) if _DIGITS.fullmatch(o) else o
    kind = classify(o)
    if kind is Kind.SEQUENCE:
        return [unstringify_bigints(x) for x in o]
    if kind is Kind.MAPPING:
        return {k: unstringify_bigints(v) for k, v in o.items()}
    return o


def dumps(o, **kwargs):
    """Serialize a structure with big integers to JSON text."""
    return json.dumps(stringify_bigints(o), **kwargs)


def loads(text):
    """Parse JSON text produced by dumps, restoring big integers."""
    return unstringify_bigints(json.loads(text))
