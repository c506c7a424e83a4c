"""
Security code port interface.

One-time numeric codes for passwordless login. Codes are generated fresh
per attempt and never stored by callers.
"""

from __future__ import annotations

from typing import Protocol


class SecurityCodePort(Protocol):
    def generate_code(self) -> int:
        """Generate a new unpredictable numeric code."""
        ...
