"""Package‑wide constants and demo assets."""

ISBN_LENGTH = 10
PLACEHOLDER = "?"

# ISBN‑10 checksum: sum((10 - i) * digit[i]) ≡ 0 (mod 11)
MODULUS = 11

# Legal values for the unknown digit: [0, DOMAIN_SIZE)
DOMAIN_SIZE = 10

DEFAULT_STRATEGY = "enumerate"
STRATEGY_ENV_VAR = "ISBN_RECOVERY_STRATEGY"

_DEMO_ISBN = "051199?001"

__all__ = [
    "ISBN_LENGTH",
    "PLACEHOLDER",
    "MODULUS",
    "DOMAIN_SIZE",
    "DEFAULT_STRATEGY",
    "STRATEGY_ENV_VAR",
    "_DEMO_ISBN",
]
