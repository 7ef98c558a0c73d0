"""Short numeric codes that people can read out and type in."""

import random

_LOWEST_CODE = 100_000
_HIGHEST_CODE_EXCLUSIVE = 999_999


def generate_verification_code() -> str:
    """Return a random six-digit code as a string."""
    return str(random.randrange(_LOWEST_CODE, _HIGHEST_CODE_EXCLUSIVE))