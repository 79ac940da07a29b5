"""Setup script for prime-field-py package."""

from setuptools import setup, find_packages

setup(
    name="prime-field-py",
    version="0.1.0",
    description="Arithmetic over prime fields GF(p) with byte and JSON encodings",
    packages=find_packages(include=["prime_field", "codec"]),
    extras_require={"test": ["pytest"]},
    python_requires=">=3.9",
    include_package_data=True,
)
