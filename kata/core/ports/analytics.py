"""
Analytics port interface.
"""

from __future__ import annotations

from typing import Protocol


class AnalyticsPort(Protocol):
    """Records page views."""

    def track_page_view(self, page_path: str) -> None:
        """Record one view of `page_path` (e.g. "/home")."""
        ...
