"""
Blind code generation for sample anonymization.

A blind code is letter-digit-letter-digit (``A1B2``), drawn uniformly from
A–Z / 0–9, giving 26 × 10 × 26 × 10 = 67,600 codes.  A code is guaranteed
unique against the supplied set at the moment it is returned.

Samples registered by farmers carry the ``PENDING`` sentinel until an
organizer assigns a code; this module never assigns codes on its own.
"""

from __future__ import annotations

import itertools
import random
import re
from typing import Iterable, Optional

from config.cupping_params import (
    BLIND_CODE_DIGITS,
    BLIND_CODE_LETTERS,
    BLIND_CODE_SPACE,
    PENDING_BLIND_CODE,
)

from ..models.errors import BlindCodeExhaustedError

BLIND_CODE_PATTERN = re.compile(r"^[A-Z][0-9][A-Z][0-9]$")

# Random re-rolls before falling back to drawing from the unused codes.
MAX_RANDOM_ATTEMPTS: int = 1_000


def is_valid_blind_code(code: str) -> bool:
    return bool(BLIND_CODE_PATTERN.match(code or ""))


def _assigned_codes(existing: Iterable[str]) -> set[str]:
    # PENDING and malformed entries never occupy a slot in the keyspace
    return {code for code in existing if code != PENDING_BLIND_CODE and is_valid_blind_code(code)}


def _all_codes() -> Iterable[str]:
    for a, b, c, d in itertools.product(
        BLIND_CODE_LETTERS, BLIND_CODE_DIGITS, BLIND_CODE_LETTERS, BLIND_CODE_DIGITS
    ):
        yield f"{a}{b}{c}{d}"


def _random_code(rng: random.Random) -> str:
    return (
        rng.choice(BLIND_CODE_LETTERS)
        + rng.choice(BLIND_CODE_DIGITS)
        + rng.choice(BLIND_CODE_LETTERS)
        + rng.choice(BLIND_CODE_DIGITS)
    )


def generate_blind_code(
    existing: Iterable[str],
    rng: Optional[random.Random] = None,
) -> str:
    """
    Generate a blind code not present in ``existing``.

    Re-rolls on collision.  After ``MAX_RANDOM_ATTEMPTS`` misses (only
    plausible when the keyspace is nearly full) the code is drawn uniformly
    from the unused remainder instead, so the call always terminates.

    Args:
        existing: Codes already assigned to samples.  ``PENDING`` entries
            are ignored.
        rng: Random source; defaults to the module-level generator.  Pass a
            seeded ``random.Random`` for reproducible codes.

    Returns:
        A new code matching ``[A-Z][0-9][A-Z][0-9]``.

    Raises:
        BlindCodeExhaustedError: All 67,600 codes are taken.
    """
    rng = rng or random.Random()
    taken = _assigned_codes(existing)

    if len(taken) >= BLIND_CODE_SPACE:
        raise BlindCodeExhaustedError(
            f"All {BLIND_CODE_SPACE:,} blind codes are assigned; no codes available."
        )

    for _ in range(MAX_RANDOM_ATTEMPTS):
        code = _random_code(rng)
        if code not in taken:
            return code

    remaining = [code for code in _all_codes() if code not in taken]
    return rng.choice(remaining)


def generate_blind_codes(
    count: int,
    existing: Iterable[str],
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Generate ``count`` codes unique against ``existing`` and each other."""
    rng = rng or random.Random()
    taken = _assigned_codes(existing)
    codes: list[str] = []
    for _ in range(count):
        code = generate_blind_code(taken, rng)
        taken.add(code)
        codes.append(code)
    return codes
