from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from . import constants as C
from .encoder import Equation


@dataclass
class RecoveryState:
    """Typed container for data flowing through the pipeline."""

    # Inputs
    identifier: str = ""
    strategy: str = C.DEFAULT_STRATEGY

    # Intermediate results
    position: int | None = None
    equation: Equation | None = None
    value: int | None = None
    bits: tuple[bool, ...] | None = None

    # Final output
    recovered: str | None = None

    # Error handling
    error: str | None = None
    error_type: str | None = None
    exit_code: int = 0
    extras: dict[str, Any] = field(default_factory=dict)
