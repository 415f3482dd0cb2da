"""Command‑line interface wrapper around :pyfunc:`isbn_recovery.run_pipeline`."""
from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from dataclasses import asdict
from pathlib import Path

from . import constants as C
from .pipeline import RecoveryState, run_pipeline
from .solver import STRATEGIES

__all__ = ["main"]


def _default_strategy() -> str:
    return os.environ.get(C.STRATEGY_ENV_VAR, C.DEFAULT_STRATEGY)


def _parse_cli(argv: list[str] | None = None) -> argparse.Namespace:  # noqa: D401 – imperative mood
    parser = argparse.ArgumentParser(
        description="Recover the missing digit of an ISBN‑10 written with one '?'"
    )
    parser.add_argument(
        "identifier",
        nargs="?",
        help=f"10‑character ISBN with a single '?' (defaults to the demo {C._DEMO_ISBN})",
    )
    parser.add_argument("--demo", action="store_true", help="Recover the demo ISBN")
    parser.add_argument(
        "--strategy",
        choices=sorted(STRATEGIES),
        default=None,
        help=f"Solver strategy (default: ${C.STRATEGY_ENV_VAR} or {C.DEFAULT_STRATEGY})",
    )
    parser.add_argument(
        "--show-equation",
        action="store_true",
        help="Also print the congruence the identifier reduces to",
    )
    parser.add_argument("--out", help="Write the full pipeline state as JSON to file")
    parser.add_argument(
        "--log-level",
        choices=["WARNING", "INFO", "DEBUG"],
        default="WARNING",
        help="Logging level for isbn_recovery",
    )
    return parser.parse_args(argv)


def _configure_logging(level_name: str) -> None:
    logging.basicConfig(level=logging.WARNING)
    level = getattr(logging, level_name)
    pkg_logger = logging.getLogger("isbn_recovery")
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logging.BASIC_FORMAT))
    handler.setLevel(level)
    pkg_logger.addHandler(handler)
    pkg_logger.propagate = False
    pkg_logger.setLevel(level)


def main(argv: list[str] | None = None) -> int:  # noqa: D401 – imperative mood
    ns = _parse_cli(argv)
    _configure_logging(ns.log_level)

    if ns.identifier is not None and ns.demo:
        print("error: 'identifier' cannot be combined with --demo.", file=sys.stderr)
        return 1

    strategy = ns.strategy or _default_strategy()
    if strategy not in STRATEGIES:
        print(
            f"error: {C.STRATEGY_ENV_VAR}={strategy!r} is not one of {sorted(STRATEGIES)}",
            file=sys.stderr,
        )
        return 1

    identifier = C._DEMO_ISBN if ns.identifier is None else ns.identifier
    out: RecoveryState = run_pipeline(
        identifier,
        strategy=strategy,
        verbose=ns.log_level in {"INFO", "DEBUG"},
    )

    if ns.out:
        json_out = json.dumps(asdict(out), ensure_ascii=False, separators=(",", ":"))
        Path(ns.out).write_text(json_out, "utf-8")

    if out.error:
        print(f"error: {out.error_type}: {out.error}", file=sys.stderr)
        return out.exit_code

    if ns.show_equation:
        print(f"Equation: {out.equation} [{out.extras['sympy']}]")
    print(f"The recovered ISBN is {out.recovered}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
