"""
In-memory analytics adapter.

Counts page views per path. Used for local development and testing.
"""

from __future__ import annotations

import logging
from collections import Counter
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


@dataclass
class InMemoryAnalyticsAdapter:
    """AnalyticsPort that keeps page views in memory."""

    page_views: list[str] = field(default_factory=list)

    def track_page_view(self, page_path: str) -> None:
        self.page_views.append(page_path)
        logger.debug(f"Page view: path={page_path}")

    def count(self, page_path: str) -> int:
        return self.totals()[page_path]

    def totals(self) -> Counter[str]:
        return Counter(self.page_views)

    def clear(self) -> None:
        """Clear recorded views (for test isolation)."""
        self.page_views.clear()
