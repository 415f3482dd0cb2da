"""Public package interface for ISBN‑10 missing‑digit recovery.

An ISBN‑10 with one unknown digit reduces to a modular linear equation
``a*x + b ≡ 0 (mod 11)``. The pipeline encodes the identifier, solves the
equation over the digit domain ``[0, 10)``, and decodes the solver's
little‑endian bit‑vector back into the completed identifier.

Typical usage
-------------
>>> from isbn_recovery import recover_isbn
>>> recover_isbn("051199?001")
'0511994001'
"""
from importlib.metadata import version as _version  # type: ignore

from .decoder import bits_to_int, decode
from .encoder import Equation, encode, is_valid, locate_marker, weighted_sum
from .errors import (
    AmbiguousMarkerError,
    BitWidthMismatchError,
    FormatError,
    MissingMarkerError,
    MultipleSolutionsError,
    NoSolutionError,
    OutOfRangeDigitError,
    RecoveryError,
    SolverError,
    VerificationError,
)
from .pipeline import RecoveryState, recover_isbn, run_pipeline
from .solver import STRATEGIES, SolutionBits, bit_width, solve, solve_bits, to_bits

__all__ = [
    "Equation",
    "SolutionBits",
    "RecoveryState",
    "STRATEGIES",
    "encode",
    "locate_marker",
    "weighted_sum",
    "is_valid",
    "solve",
    "solve_bits",
    "bit_width",
    "to_bits",
    "bits_to_int",
    "decode",
    "run_pipeline",
    "recover_isbn",
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
    "__version__",
]

try:
    __version__ = _version("isbn_recovery")
except Exception:  # pragma: no cover – package not installed yet
    __version__ = "0.0.0"
