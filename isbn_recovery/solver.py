"""Classical solver for ``a*x + b ≡ 0 (mod c)`` over a bounded domain.

The solver returns the *unique* value in ``[0, domain_size)`` satisfying the
congruence. Zero or several satisfying values mean the identifier upstream is
corrupted; both are surfaced as errors instead of picking a match.

Two strategies are available and must agree on every input:

``enumerate``
    Test every candidate in the domain.
``inverse``
    Reduce by ``g = gcd(a, c)`` and use SymPy's modular inverse to list the
    residue class ``x0 + k*(c/g)`` that falls inside the domain.

The result is also exposed as a little‑endian bit‑vector of width
``ceil(log2(domain_size))`` so any strategy can feed :mod:`isbn_recovery.decoder`.
"""
from __future__ import annotations

import logging
from typing import Callable

from .errors import MultipleSolutionsError, NoSolutionError

__all__ = [
    "SolutionBits",
    "STRATEGIES",
    "bit_width",
    "to_bits",
    "solve",
    "solve_bits",
]

logger = logging.getLogger(__name__)

SolutionBits = tuple[bool, ...]


def _enumerate_candidates(a: int, b: int, c: int, domain_size: int) -> list[int]:
    return [x for x in range(domain_size) if (a * x + b) % c == 0]


def _inverse_candidates(a: int, b: int, c: int, domain_size: int) -> list[int]:
    import sympy as sp

    a, b = a % c, b % c
    g = sp.igcd(a, c)
    if b % g:
        return []
    step = c // g
    if step == 1:
        x0 = 0
    else:
        x0 = int(sp.mod_inverse(a // g, step)) * (-b // g) % step
    return list(range(x0, domain_size, step))


STRATEGIES: dict[str, Callable[[int, int, int, int], list[int]]] = {
    "enumerate": _enumerate_candidates,
    "inverse": _inverse_candidates,
}


def _check_params(c: int, domain_size: int) -> None:
    if c <= 0:
        raise ValueError(f"modulus must be positive, got {c}")
    if domain_size <= 0:
        raise ValueError(f"domain size must be positive, got {domain_size}")


def bit_width(domain_size: int) -> int:
    """Return ``ceil(log2(domain_size))``: 4 for the decimal digit domain."""
    if domain_size <= 0:
        raise ValueError(f"domain size must be positive, got {domain_size}")
    return (domain_size - 1).bit_length()


def to_bits(x: int, width: int) -> SolutionBits:
    """Encode *x* little‑endian: bit ``i`` is ``(x >> i) & 1``."""
    if x < 0 or x >> width:
        raise ValueError(f"{x} does not fit in {width} bits")
    return tuple(bool((x >> i) & 1) for i in range(width))


def solve(
    a: int,
    b: int,
    c: int,
    domain_size: int,
    *,
    strategy: str = "enumerate",
) -> int:
    """Return the unique ``x`` in ``[0, domain_size)`` with ``(a*x + b) % c == 0``.

    Raises
    ------
    NoSolutionError
        No candidate in the domain satisfies the congruence.
    MultipleSolutionsError
        More than one candidate does.
    ValueError
        Non‑positive modulus or domain size, or unknown *strategy*.
    """
    _check_params(c, domain_size)
    try:
        find = STRATEGIES[strategy]
    except KeyError:
        raise ValueError(
            f"unknown strategy {strategy!r}; choose from {sorted(STRATEGIES)}"
        ) from None

    candidates = find(a, b, c, domain_size)
    logger.debug(
        "%s*x + %s = 0 (mod %s) over [0, %s) via %s: candidates %s",
        a, b, c, domain_size, strategy, candidates,
    )
    if not candidates:
        raise NoSolutionError(a, b, c, domain_size)
    if len(candidates) > 1:
        raise MultipleSolutionsError(a, b, c, domain_size, candidates)
    return candidates[0]


def solve_bits(
    a: int,
    b: int,
    c: int,
    domain_size: int,
    *,
    strategy: str = "enumerate",
) -> SolutionBits:
    """Same as :func:`solve` but returns the fixed‑width little‑endian bits."""
    x = solve(a, b, c, domain_size, strategy=strategy)
    return to_bits(x, bit_width(domain_size))
