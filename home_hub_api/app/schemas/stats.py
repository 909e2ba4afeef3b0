"""
Schemas for the admin dashboard statistics and the health check.
"""

from pydantic import Field

from .common import CamelModel


class StatsRead(CamelModel):
    """Aggregate counters shown on the admin dashboard."""

    total_users: int = Field(..., alias="totalUsers")
    total_contacts: int = Field(..., alias="totalContacts")
    total_newsletters: int = Field(..., alias="totalNewsletters")
    total_estimates: int = Field(..., alias="totalEstimates")
    recent_users: int = Field(..., alias="recentUsers")


class RecordCounts(CamelModel):
    users: int
    contacts: int
    newsletters: int
    estimates: int


class PageFiles(CamelModel):
    """Existence flags for the three HTML pages served by the site."""

    cg: bool
    admin: bool
    admin_users: bool = Field(..., alias="adminUsers")
