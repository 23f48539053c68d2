"""Parsing of Kubernetes resource quantities such as ``250m`` or ``128Mi``."""

from __future__ import annotations

import math
import re
from fractions import Fraction

_NUMBER = re.compile(r"^([+-]?)(\d+(?:\.\d*)?|\.\d+)(.*)$")
_EXPONENT = re.compile(r"^[eE]([+-]?\d+)$")

_SUFFIXES: dict[str, Fraction] = {
    "": Fraction(1),
    "n": Fraction(1, 10**9),
    "u": Fraction(1, 10**6),
    "m": Fraction(1, 10**3),
    "k": Fraction(10**3),
    "M": Fraction(10**6),
    "G": Fraction(10**9),
    "T": Fraction(10**12),
    "P": Fraction(10**15),
    "E": Fraction(10**18),
    "Ki": Fraction(2**10),
    "Mi": Fraction(2**20),
    "Gi": Fraction(2**30),
    "Ti": Fraction(2**40),
    "Pi": Fraction(2**50),
    "Ei": Fraction(2**60),
}


class QuantityError(ValueError):
    """Raised for text that is not a valid resource quantity."""


def parse_quantity(text: str) -> Fraction:
    """Return the exact value of a quantity string."""
    stripped = text.strip()
    match = _NUMBER.match(stripped)
    if match is None:
        raise QuantityError(f"invalid quantity: {text!r}")
    sign, number, suffix = match.groups()
    if suffix in _SUFFIXES:
        scale = _SUFFIXES[suffix]
    else:
        exp_match = _EXPONENT.match(suffix)
        if exp_match is None:
            raise QuantityError(f"invalid quantity suffix in {text!r}")
        scale = Fraction(10) ** int(exp_match.group(1))
    value = Fraction(number) * scale
    return -value if sign == "-" else value


def cpu_millis(text: str) -> int:
    """Return a CPU quantity in millicores, rounded up."""
    return math.ceil(parse_quantity(text) * 1000)


def memory_bytes(text: str) -> int:
    """Return a memory quantity in bytes, rounded up."""
    return math.ceil(parse_quantity(text))