"""
Well-known prime fields.
"""

from .base import ScalarField


class BN128ScalarField(ScalarField, order=21888242871839275222246405745257275088548364400416034343698204186575808495617):
    """Scalar field of BN254 (alt_bn128), the default field of circom circuits."""
    name = "bn128"


class BN128BaseField(ScalarField, order=21888242871839275222246405745257275088696311157297823662689037894645226208583):
    """Base field of BN254."""
    name = "bn128_base"


class BLS12381ScalarField(ScalarField, order=0x73eda753299d7d483339d80809a1d80553bda402fffe5bfeffffffff00000001):
    """Scalar field of BLS12-381."""
    name = "bls12_381"


class Secp256k1BaseField(ScalarField, order=0xfffffffffffffffffffffffffffffffffffffffffffffffffffffffefffffc2f):
    """Base field of secp256k1."""
    name = "secp256k1"


class P256ScalarField(ScalarField, order=0xffffffff00000000ffffffffffffffffbce6faada7179e84f3b9cac2fc632551):
    """Scalar field for P-256 group."""
    name = "p256"


FIELDS = {
    cls.name: cls
    for cls in (
        BN128ScalarField,
        BN128BaseField,
        BLS12381ScalarField,
        Secp256k1BaseField,
        P256ScalarField,
    )
}


def get_field(name):
    """Look up a named field class."""
    try:
        return FIELDS[name]
    except KeyError:
        raise KeyError(f"unknown field {name!r}; expected one of {sorted(FIELDS)}") from None
