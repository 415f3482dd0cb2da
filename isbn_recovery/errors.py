"""Error taxonomy for the recovery pipeline.

Every error is raised by the stage that first observes the broken invariant
and carries the offending value so a failure can be diagnosed without
re‑running. ``exit_code`` is what the CLI returns for each kind.
"""
from __future__ import annotations

from typing import Sequence

__all__ = [
    "RecoveryError",
    "FormatError",
    "MissingMarkerError",
    "AmbiguousMarkerError",
    "SolverError",
    "NoSolutionError",
    "MultipleSolutionsError",
    "OutOfRangeDigitError",
    "BitWidthMismatchError",
    "VerificationError",
]


class RecoveryError(ValueError):
    """Base class for every failure surfaced by the pipeline."""

    exit_code = 1


class FormatError(RecoveryError):
    """Identifier has the wrong length or a character outside ``0-9`` / ``?``."""

    exit_code = 2

    def __init__(self, identifier: str, reason: str) -> None:
        self.identifier = identifier
        self.reason = reason
        super().__init__(f"invalid identifier {identifier!r}: {reason}")


class MissingMarkerError(FormatError):
    exit_code = 3

    def __init__(self, identifier: str) -> None:
        super().__init__(identifier, "expected exactly one '?' placeholder, found none")


class AmbiguousMarkerError(FormatError):
    exit_code = 4

    def __init__(self, identifier: str, positions: Sequence[int]) -> None:
        self.positions = list(positions)
        super().__init__(
            identifier,
            f"expected exactly one '?' placeholder, found {len(self.positions)} "
            f"at positions {self.positions}",
        )


class SolverError(RecoveryError):
    """The congruence does not have exactly one solution in the domain."""

    def __init__(self, a: int, b: int, c: int, domain_size: int, detail: str) -> None:
        self.a = a
        self.b = b
        self.c = c
        self.domain_size = domain_size
        super().__init__(
            f"{a}*x + {b} = 0 (mod {c}) over [0, {domain_size}): {detail}"
        )


class NoSolutionError(SolverError):
    exit_code = 5

    def __init__(self, a: int, b: int, c: int, domain_size: int) -> None:
        super().__init__(a, b, c, domain_size, "no solution")


class MultipleSolutionsError(SolverError):
    exit_code = 6

    def __init__(
        self, a: int, b: int, c: int, domain_size: int, candidates: Sequence[int]
    ) -> None:
        self.candidates = list(candidates)
        super().__init__(
            a, b, c, domain_size, f"{len(self.candidates)} solutions {self.candidates}"
        )


class OutOfRangeDigitError(RecoveryError):
    """Decoded value does not fit the digit domain."""

    exit_code = 7

    def __init__(self, value: int | None, domain_size: int, detail: str | None = None) -> None:
        self.value = value
        self.domain_size = domain_size
        super().__init__(
            detail or f"decoded value {value} is outside [0, {domain_size})"
        )


class BitWidthMismatchError(OutOfRangeDigitError):
    def __init__(self, width: int, expected: int, domain_size: int) -> None:
        self.width = width
        self.expected = expected
        super().__init__(
            None,
            domain_size,
            f"got {width} solution bits, expected {expected} for a domain of size {domain_size}",
        )


class VerificationError(RecoveryError):
    """Recovered identifier fails the checksum it was solved against."""

    exit_code = 8

    def __init__(self, identifier: str, remainder: int) -> None:
        self.identifier = identifier
        self.remainder = remainder
        super().__init__(
            f"recovered identifier {identifier!r} has checksum remainder {remainder}, expected 0"
        )
