#!/usr/bin/env python3
"""
Tests for random sampling and random sources.
"""

import sys
import os
import logging
import random
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from prime_field import GF, BN128ScalarField, SystemRandomSource, default_random_source
from prime_field import random_source as random_source_module
from test_drng import TestDRNG


class FixedSource:
    """Returns a fixed byte and records the requested lengths."""

    def __init__(self, byte):
        self.byte = byte
        self.requests = []

    def randbytes(self, n):
        self.requests.append(n)
        return bytes([self.byte]) * n


def test_byte_count_is_twice_the_bit_length():
    source = FixedSource(0xff)
    assert GF(13, random_source=source).random() == 255 % 13
    assert BN128ScalarField.field.random(source) == (2 ** 512 - 1) % BN128ScalarField.order
    assert source.requests == [1, 64]


def test_bytes_are_read_big_endian():
    class Counting:
        def randbytes(self, n):
            return bytes(range(1, n + 1))

    field = GF(2**127 - 1)
    expected = int.from_bytes(bytes(range(1, 33)), "big") % field.p
    assert field.random(Counting()) == expected


def test_deterministic_source_is_reproducible():
    field = BN128ScalarField.field
    a = [field.random(TestDRNG(b"seed")) for _ in range(3)]
    b = [field.random(TestDRNG(b"seed")) for _ in range(3)]
    assert a == b
    rng = TestDRNG(b"seed")
    values = [field.random(rng) for _ in range(20)]
    assert len(set(values)) == 20
    assert all(0 <= v < field.p for v in values)


def test_samples_cover_small_field():
    field = GF(13, random_source=random.Random(1234))
    seen = {field.random() for _ in range(500)}
    assert seen == set(range(13))


def test_default_source_is_system_csprng():
    field = GF(13)
    source = field.random_source
    assert isinstance(source, SystemRandomSource)
    value = field.random()
    assert 0 <= value < 13
    assert field.random_source is source
    assert 0 <= field.random(TestDRNG(b"override")) < 13
    assert field.random_source is source
    assert len(SystemRandomSource().randbytes(32)) == 32


def test_fallback_without_os_randomness(monkeypatch, caplog):
    def no_urandom(n):
        raise NotImplementedError

    monkeypatch.setattr(random_source_module.os, "urandom", no_urandom)
    with caplog.at_level(logging.WARNING, logger="prime_field.random_source"):
        source = default_random_source()
    assert isinstance(source, random.Random)
    assert "NOT suitable for cryptographic use" in caplog.text


def test_scalar_field_random_element():
    x = BN128ScalarField.random(TestDRNG(b"scalar"))
    assert x.field == BN128ScalarField.field
    assert 0 <= int(x) < BN128ScalarField.order
