from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from isbn_recovery.encoder import Equation, encode, is_valid, locate_marker, weighted_sum  # noqa: E402
from isbn_recovery.errors import (  # noqa: E402
    AmbiguousMarkerError,
    FormatError,
    MissingMarkerError,
)


def test_encode_demo_isbn() -> None:
    eq = encode("051199?001")
    # known digits: 9*5 + 8*1 + 7*1 + 6*9 + 5*9 + 1*1 = 160 ≡ 6 (mod 11)
    assert (eq.a, eq.b, eq.c) == (4, 6, 11)
    assert eq.domain_size == 10


def test_encode_weight_follows_position() -> None:
    assert encode("?306406152").a == 10
    assert encode("030640615?").a == 1


def test_encode_weight_is_never_zero_mod_modulus() -> None:
    for pos in range(10):
        ident = "0" * pos + "?" + "0" * (9 - pos)
        eq = encode(ident)
        assert 1 <= eq.a <= 10
        assert eq.b == 0


def test_encode_reduces_b_into_modulus_range() -> None:
    eq = encode("99999999?9")
    assert 0 <= eq.b < 11


@pytest.mark.parametrize("ident", ["12345", "", "0511994?001", "051199?00"])
def test_encode_rejects_wrong_length(ident: str) -> None:
    with pytest.raises(FormatError) as info:
        encode(ident)
    assert type(info.value) is FormatError
    assert info.value.identifier == ident
    assert "10 characters" in str(info.value)


@pytest.mark.parametrize("ident", ["05119A?001", "051199?00X", "0511 9?001", "05119٣?001"])
def test_encode_rejects_foreign_characters(ident: str) -> None:
    with pytest.raises(FormatError) as info:
        encode(ident)
    assert type(info.value) is FormatError
    assert "unexpected character" in info.value.reason


def test_encode_missing_marker() -> None:
    with pytest.raises(MissingMarkerError):
        encode("0511994001")


def test_encode_ambiguous_marker() -> None:
    with pytest.raises(AmbiguousMarkerError) as info:
        encode("05119??001")
    assert info.value.positions == [5, 6]


def test_marker_errors_are_format_errors() -> None:
    with pytest.raises(FormatError):
        locate_marker("0511994001")
    with pytest.raises(FormatError):
        locate_marker("??????????")


def test_length_is_checked_before_marker_count() -> None:
    with pytest.raises(FormatError) as info:
        locate_marker("??")
    assert type(info.value) is FormatError


def test_locate_marker_returns_position() -> None:
    assert locate_marker("051199?001") == 6
    assert locate_marker("?511994001") == 0


def test_equation_helpers() -> None:
    eq = Equation(4, 6, 11)
    assert eq.satisfied_by(4)
    assert eq.residual(0) == 6
    assert str(eq) == "4*x + 6 = 0 (mod 11)"
    rel = eq.as_sympy()
    (x,) = rel.free_symbols
    assert rel.lhs.subs(x, 4) == 0
    assert rel.lhs.subs(x, 3) != 0


def test_equation_rejects_non_positive_modulus() -> None:
    with pytest.raises(ValueError):
        Equation(1, 0, 0)


def test_weighted_sum_and_validity() -> None:
    assert weighted_sum("0306406152") == 132
    assert is_valid("0306406152")
    assert is_valid("0511994001")
    assert not is_valid("0306406153")
    assert not is_valid("051199?001")
