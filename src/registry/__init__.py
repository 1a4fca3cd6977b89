"""
src/registry: Sample identity assignment.

Public interface
----------------
    generate_blind_code(existing, rng=None)
    generate_blind_codes(count, existing, rng=None)
    is_valid_blind_code(code)
"""

from .blind_codes import (
    BLIND_CODE_PATTERN,
    generate_blind_code,
    generate_blind_codes,
    is_valid_blind_code,
)

__all__ = [
    "BLIND_CODE_PATTERN",
    "generate_blind_code",
    "generate_blind_codes",
    "is_valid_blind_code",
]
