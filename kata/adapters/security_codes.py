"""
Security code generator.

Cryptographically random numeric login codes with a fixed number of
digits (no leading zero, so str(code) always has `digits` characters).
"""

from __future__ import annotations

import secrets
from dataclasses import dataclass


@dataclass(frozen=True)
class SecureCodeGenerator:
    digits: int = 6

    def __post_init__(self) -> None:
        if self.digits < 1:
            raise ValueError("digits must be at least 1")

    def generate_code(self) -> int:
        low = 10 ** (self.digits - 1)
        high = 10**self.digits
        return low + secrets.randbelow(high - low)
