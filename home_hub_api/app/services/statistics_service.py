"""
Service layer for statistics and health reporting.

``overview`` feeds the admin dashboard: totals per entity kind plus
the number of users registered within the recent window (seven days
by default, cutoff inclusive).  ``health`` reports record counts and
whether the site's HTML pages are present in the static root.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from pathlib import Path
from typing import Any, Dict, Optional

from ..core.store import RecordStore
from ..schemas.stats import PageFiles, RecordCounts, StatsRead

logger = logging.getLogger(__name__)

# Route name -> HTML file inside the static root.
PAGES: Dict[str, str] = {
    "cg": "cg.html",
    "admin": "admin.html",
    "adminUsers": "admin-users.html",
}


class StatisticsService:
    """Aggregated metrics over the record store."""

    @classmethod
    async def overview(
        cls,
        store: RecordStore,
        recent_days: int = 7,
        now: Optional[datetime] = None,
    ) -> StatsRead:
        """Return totals per kind and the count of recently created users.

        A user counts as recent when ``created_at >= now - recent_days``.
        ``now`` defaults to the store clock.
        """
        now = now or store.clock()
        cutoff = now - timedelta(days=recent_days)
        users = store.users.list()
        counts = store.counts()
        recent = sum(1 for u in users if u["created_at"] >= cutoff)
        return StatsRead(
            total_users=len(users),
            total_contacts=counts["contacts"],
            total_newsletters=counts["newsletters"],
            total_estimates=counts["estimates"],
            recent_users=recent,
        )

    @classmethod
    async def health(cls, store: RecordStore, static_root: Path) -> Dict[str, Any]:
        """Return current record counts and page file availability."""
        counts = store.counts()
        files = {key: (static_root / filename).is_file() for key, filename in PAGES.items()}
        return {
            "timestamp": store.clock(),
            "data": RecordCounts(**counts),
            "files": PageFiles.model_validate(files),
        }
