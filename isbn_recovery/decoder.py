"""Turn the solver's bit‑vector back into a digit and complete the identifier."""
from __future__ import annotations

from typing import Sequence

from . import constants as C
from .encoder import locate_marker
from .errors import BitWidthMismatchError, OutOfRangeDigitError
from .solver import bit_width

__all__ = ["bits_to_int", "decode"]


def bits_to_int(bits: Sequence[bool]) -> int:
    """Inverse of the little‑endian rule: ``x = sum(bits[i] * 2**i)``."""
    value = 0
    for bit in reversed(bits):
        value = value * 2 + (1 if bit else 0)
    return value


def decode(
    identifier: str, bits: Sequence[bool], domain_size: int = C.DOMAIN_SIZE
) -> str:
    """Substitute the digit encoded by *bits* for the placeholder in *identifier*.

    The bit count must match ``bit_width(domain_size)`` and the decoded value
    must lie in ``[0, domain_size)``; either mismatch points at a solver bug
    rather than bad user input.
    """
    expected = bit_width(domain_size)
    if len(bits) != expected:
        raise BitWidthMismatchError(len(bits), expected, domain_size)
    value = bits_to_int(bits)
    # one decimal character per placeholder
    limit = min(domain_size, C.DOMAIN_SIZE)
    if not 0 <= value < limit:
        raise OutOfRangeDigitError(value, limit)

    missing = locate_marker(identifier)
    return identifier[:missing] + str(value) + identifier[missing + 1:]
