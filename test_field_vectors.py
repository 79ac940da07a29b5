#!/usr/bin/env python3
"""
Test vectors for field operations.

Run as a script to write vectors/fieldVectors.json; under pytest every
generated vector is checked against the identities it should satisfy.
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from codec import dumps, loads
from prime_field import FIELDS
from test_drng import TestDRNG


def field_vector(vector_function):
    """Decorator for test vector generation."""
    def inner(vectors, field_name):
        field_cls = FIELDS[field_name]
        rng = TestDRNG(f"{vector_function.__name__}_{field_name}")

        vector_name = f"{vector_function.__name__}_{field_name}"
        vectors[vector_name] = {
            "Field": field_name,
            "Modulus": field_cls.order,
            **vector_function(rng, field_cls.field),
        }
        print(f"{vector_name} test vector generated")
    return inner


@field_vector
def arithmetic(rng, field):
    a = field.random(rng)
    b = field.random(rng)
    return {
        "a": a,
        "b": b,
        "add": field.add(a, b),
        "sub": field.sub(a, b),
        "mul": field.mul(a, b),
        "div": field.div(a, b),
        "inv": field.inv(a),
        "square": field.square(a),
    }


@field_vector
def ordering(rng, field):
    a = field.random(rng)
    b = field.neg(field.random(rng))
    return {
        "a": a,
        "b": b,
        "lt": field.lt(a, b),
        "geq": field.geq(a, b),
        "a_string": field.to_string(a),
        "b_string": field.to_string(b),
    }


@field_vector
def bitwise(rng, field):
    a = field.random(rng)
    b = field.random(rng)
    shift = rng.randint(0, field.bit_length - 1)
    return {
        "a": a,
        "b": b,
        "shift": shift,
        "band": field.band(a, b),
        "bor": field.bor(a, b),
        "bxor": field.bxor(a, b),
        "bnot": field.bnot(a),
        "shl": field.shl(a, shift),
        "shr": field.shr(a, shift),
        "shl_negative": field.shl(a, field.e(-shift)),
    }


@field_vector
def square_root(rng, field):
    x = field.random(rng)
    n = field.square(x)
    return {
        "n": n,
        "sqrt": field.sqrt(n),
        "nonresidue": field.nqr,
        "sqrt_nonresidue": field.sqrt(field.nqr),
    }


GENERATORS = [arithmetic, ordering, bitwise, square_root]


def generate_test_vectors():
    vectors = {}
    for field_name in sorted(FIELDS):
        for generator in GENERATORS:
            generator(vectors, field_name)
    return vectors


def test_generated_vectors():
    vectors = loads(dumps(generate_test_vectors()))
    assert len(vectors) == len(FIELDS) * len(GENERATORS)

    for name, v in vectors.items():
        field = FIELDS[v["Field"]].field
        assert v["Modulus"] == field.p
        if name.startswith("arithmetic"):
            assert field.sub(v["add"], v["b"]) == v["a"]
            assert field.mul(v["div"], v["b"]) == v["a"]
            assert field.mul(v["inv"], v["a"]) == 1
            assert v["square"] == field.mul(v["a"], v["a"])
        elif name.startswith("ordering"):
            assert v["lt"] != v["geq"]
            # positive renderings come back from JSON as ints
            assert str(v["b_string"]).startswith("-") == (v["b"] > field.half)
        elif name.startswith("bitwise"):
            assert v["band"] == (v["a"] & v["b"]) % field.p
            assert v["bor"] == (v["a"] | v["b"]) % field.p
            assert v["bxor"] == (v["a"] ^ v["b"]) % field.p
            assert v["shr"] == v["a"] >> v["shift"]
            assert v["shl"] == ((v["a"] << v["shift"]) & field.mask) % field.p
            if v["shift"]:
                assert v["shl_negative"] == v["a"] >> v["shift"]
        elif name.startswith("square_root"):
            assert field.mul(v["sqrt"], v["sqrt"]) == v["n"]
            assert v["sqrt"] <= field.half
            assert v["sqrt_nonresidue"] is None


def main():
    """Generate field test vectors."""
    print("Generating field test vectors...")

    vectors = generate_test_vectors()

    os.makedirs("vectors", exist_ok=True)
    with open("vectors/fieldVectors.json", "w") as f:
        f.write(dumps(vectors, indent=2))

    print("Field test vectors written to vectors/fieldVectors.json")


if __name__ == "__main__":
    main()
