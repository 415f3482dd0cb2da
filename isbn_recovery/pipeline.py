"""Linear encode → solve → decode → verify pipeline."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable

from . import constants as C
from .decoder import decode
from .encoder import encode, weighted_sum
from .errors import RecoveryError, VerificationError
from .pipeline_state import RecoveryState
from .solver import bit_width, solve, to_bits

__all__ = ["RecoveryState", "run_pipeline", "recover_isbn"]

logger = logging.getLogger(__name__)

Step = Callable[[RecoveryState], RecoveryState]


# ---------------------------------------------------------------------------
# Simple sequential graph executor
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class _Graph:
    steps: list[Step]


class _Runner:
    """Sequential executor that stops at the first :class:`RecoveryError`.

    Failures are recorded on the state (message, class name, exit code) and no
    later step runs, so a failed state never carries a ``recovered`` value.
    With ``raise_errors`` the error propagates to the caller instead.
    """

    def __init__(self, graph: _Graph, *, verbose: bool = False) -> None:
        self.graph = graph
        self.verbose = verbose
        self.logger = logger
        self.logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    def run(self, state: RecoveryState, *, raise_errors: bool = False) -> RecoveryState:
        steps = list(self.graph.steps)
        for idx, step in enumerate(steps):
            name = step.__name__.replace("_step_", "").lstrip("_")
            self.logger.debug(
                "[isbn-recovery] step %d/%d: %s", idx + 1, len(steps), name
            )
            try:
                state = step(state)
            except RecoveryError as exc:
                self.logger.warning(
                    "[isbn-recovery] %s failed: %s: %s", name, type(exc).__name__, exc
                )
                if raise_errors:
                    raise
                state.error = str(exc)
                state.error_type = type(exc).__name__
                state.exit_code = exc.exit_code
                state.recovered = None
                return state
        return state


# ---------------------------------------------------------------------------
# Pipeline steps – each mutates and returns the state.
# ---------------------------------------------------------------------------


def _step_encode(state: RecoveryState) -> RecoveryState:
    state.equation = encode(state.identifier)
    state.position = C.ISBN_LENGTH - state.equation.a
    state.extras["sympy"] = str(state.equation.as_sympy())
    logger.info(
        "%s -> %s (unknown at position %d)",
        state.identifier,
        state.equation,
        state.position,
    )
    return state


def _step_solve(state: RecoveryState) -> RecoveryState:
    eq = state.equation
    if eq is None:
        raise RuntimeError("solve step needs an encoded equation")
    state.value = solve(eq.a, eq.b, eq.c, eq.domain_size, strategy=state.strategy)
    state.bits = to_bits(state.value, bit_width(eq.domain_size))
    return state


def _step_decode(state: RecoveryState) -> RecoveryState:
    eq = state.equation
    if eq is None or state.bits is None:
        raise RuntimeError("decode step needs an equation and solution bits")
    state.recovered = decode(state.identifier, state.bits, eq.domain_size)
    return state


def _step_verify(state: RecoveryState) -> RecoveryState:
    if state.recovered is None:
        raise RuntimeError("verify step needs a recovered identifier")
    remainder = weighted_sum(state.recovered) % C.MODULUS
    if remainder:
        raise VerificationError(state.recovered, remainder)
    logger.info("recovered %s", state.recovered)
    return state


_PIPELINE = _Graph(
    steps=[
        _step_encode,
        _step_solve,
        _step_decode,
        _step_verify,
    ]
)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def run_pipeline(
    identifier: str,
    *,
    strategy: str = C.DEFAULT_STRATEGY,
    verbose: bool = False,
) -> RecoveryState:
    """Run the full pipeline, recording any failure on the returned state."""
    runner = _Runner(_PIPELINE, verbose=verbose)
    return runner.run(RecoveryState(identifier=identifier, strategy=strategy))


def recover_isbn(identifier: str, *, strategy: str = C.DEFAULT_STRATEGY) -> str:
    """Return *identifier* with its missing digit filled in.

    Raises the first :class:`~isbn_recovery.errors.RecoveryError` observed.
    """
    runner = _Runner(_PIPELINE)
    state = runner.run(
        RecoveryState(identifier=identifier, strategy=strategy), raise_errors=True
    )
    if state.recovered is None:
        raise RuntimeError("pipeline finished without a recovered identifier")
    return state.recovered
