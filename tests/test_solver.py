from __future__ import annotations

import itertools
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from isbn_recovery.errors import MultipleSolutionsError, NoSolutionError  # noqa: E402
from isbn_recovery.solver import (  # noqa: E402
    STRATEGIES,
    bit_width,
    solve,
    solve_bits,
    to_bits,
)


@pytest.mark.parametrize("strategy", sorted(STRATEGIES))
def test_solve_demo_equation(strategy: str) -> None:
    assert solve(4, 6, 11, 10, strategy=strategy) == 4


@pytest.mark.parametrize("strategy", sorted(STRATEGIES))
def test_solve_no_solution_when_residue_is_ten(strategy: str) -> None:
    # 030640611? needs an X check digit: x ≡ 10 (mod 11)
    with pytest.raises(NoSolutionError) as info:
        solve(1, 1, 11, 10, strategy=strategy)
    assert (info.value.a, info.value.b, info.value.c) == (1, 1, 11)
    assert info.value.domain_size == 10


@pytest.mark.parametrize("strategy", sorted(STRATEGIES))
def test_solve_no_solution_when_gcd_does_not_divide(strategy: str) -> None:
    with pytest.raises(NoSolutionError):
        solve(2, 1, 4, 10, strategy=strategy)


@pytest.mark.parametrize("strategy", sorted(STRATEGIES))
def test_solve_rejects_two_solutions(strategy: str) -> None:
    with pytest.raises(MultipleSolutionsError) as info:
        solve(1, 0, 5, 10, strategy=strategy)
    assert info.value.candidates == [0, 5]


@pytest.mark.parametrize("strategy", sorted(STRATEGIES))
def test_solve_rejects_degenerate_equation(strategy: str) -> None:
    with pytest.raises(MultipleSolutionsError) as info:
        solve(0, 0, 11, 10, strategy=strategy)
    assert info.value.candidates == list(range(10))


def test_strategies_agree() -> None:
    for a, b, c in itertools.product(range(-3, 13), range(-2, 12), range(1, 13)):
        outcomes = []
        for strategy in sorted(STRATEGIES):
            try:
                outcomes.append(solve(a, b, c, 10, strategy=strategy))
            except NoSolutionError:
                outcomes.append("none")
            except MultipleSolutionsError as exc:
                outcomes.append(tuple(exc.candidates))
        assert len(set(outcomes)) == 1, (a, b, c, outcomes)


def test_solve_validates_parameters() -> None:
    with pytest.raises(ValueError):
        solve(1, 0, 0, 10)
    with pytest.raises(ValueError):
        solve(1, 0, 11, 0)
    with pytest.raises(ValueError, match="unknown strategy"):
        solve(1, 0, 11, 10, strategy="grover")


def test_bit_width() -> None:
    assert bit_width(10) == 4
    assert bit_width(16) == 4
    assert bit_width(17) == 5
    assert bit_width(2) == 1
    assert bit_width(1) == 0


def test_to_bits_is_little_endian() -> None:
    assert to_bits(1, 4) == (True, False, False, False)
    assert to_bits(4, 4) == (False, False, True, False)
    assert to_bits(0, 4) == (False, False, False, False)
    assert to_bits(9, 4) == (True, False, False, True)


def test_to_bits_rejects_values_that_do_not_fit() -> None:
    with pytest.raises(ValueError):
        to_bits(16, 4)
    with pytest.raises(ValueError):
        to_bits(-1, 4)


def test_solve_bits_width_follows_domain() -> None:
    bits = solve_bits(4, 6, 11, 10)
    assert bits == (False, False, True, False)
    assert len(bits) == bit_width(10)
