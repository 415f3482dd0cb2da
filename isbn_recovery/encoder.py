"""Reduce an ISBN‑10 with one missing digit to a modular linear equation."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from . import constants as C
from .errors import AmbiguousMarkerError, FormatError, MissingMarkerError

__all__ = ["Equation", "encode", "locate_marker", "weighted_sum", "is_valid"]

# ASCII only; str.isdigit() also accepts digits from other scripts
_DIGITS = "0123456789"


@dataclass(frozen=True)
class Equation:
    """``a*x + b ≡ 0 (mod c)`` with the unknown bounded to ``[0, domain_size)``."""

    a: int
    b: int
    c: int
    domain_size: int = C.DOMAIN_SIZE

    def __post_init__(self) -> None:
        if self.c <= 0:
            raise ValueError(f"modulus must be positive, got {self.c}")
        if self.domain_size <= 0:
            raise ValueError(f"domain size must be positive, got {self.domain_size}")

    def residual(self, x: int) -> int:
        return (self.a * x + self.b) % self.c

    def satisfied_by(self, x: int) -> bool:
        return self.residual(x) == 0

    def as_sympy(self) -> Any:
        """Return the congruence as a SymPy relation ``Eq(Mod(a*x + b, c), 0)``."""
        import sympy as sp

        x = sp.Symbol("x", integer=True, nonnegative=True)
        return sp.Eq(sp.Mod(self.a * x + self.b, self.c), 0, evaluate=False)

    def __str__(self) -> str:
        return f"{self.a}*x + {self.b} = 0 (mod {self.c})"


def _weight(position: int) -> int:
    return C.ISBN_LENGTH - position


def locate_marker(identifier: str) -> int:
    """Validate *identifier* and return the index of its single placeholder.

    Length is checked first, then the alphabet, then the placeholder count.
    """
    if len(identifier) != C.ISBN_LENGTH:
        raise FormatError(
            identifier, f"expected {C.ISBN_LENGTH} characters, got {len(identifier)}"
        )
    for idx, ch in enumerate(identifier):
        if ch != C.PLACEHOLDER and ch not in _DIGITS:
            raise FormatError(
                identifier, f"unexpected character {ch!r} at position {idx}"
            )
    positions = [i for i, ch in enumerate(identifier) if ch == C.PLACEHOLDER]
    if not positions:
        raise MissingMarkerError(identifier)
    if len(positions) > 1:
        raise AmbiguousMarkerError(identifier, positions)
    return positions[0]


def encode(identifier: str) -> Equation:
    """Encode *identifier* as ``a*x + b ≡ 0 (mod 11)``.

    ``a`` is the weight of the placeholder position and ``b`` the weighted sum
    of the known digits reduced into ``[0, 11)``. Placeholder positions run
    ``0..9`` so ``a`` is always in ``[1, 10]`` and never ``≡ 0 (mod 11)``.
    """
    missing = locate_marker(identifier)
    b = sum(
        _weight(i) * int(ch)
        for i, ch in enumerate(identifier)
        if i != missing
    ) % C.MODULUS
    return Equation(a=_weight(missing), b=b, c=C.MODULUS, domain_size=C.DOMAIN_SIZE)


def weighted_sum(identifier: str) -> int:
    """Checksum sum of a complete 10‑digit identifier."""
    if len(identifier) != C.ISBN_LENGTH:
        raise FormatError(
            identifier, f"expected {C.ISBN_LENGTH} characters, got {len(identifier)}"
        )
    total = 0
    for idx, ch in enumerate(identifier):
        if ch not in _DIGITS:
            raise FormatError(identifier, f"unexpected character {ch!r} at position {idx}")
        total += _weight(idx) * int(ch)
    return total


def is_valid(identifier: str) -> bool:
    try:
        return weighted_sum(identifier) % C.MODULUS == 0
    except FormatError:
        return False
