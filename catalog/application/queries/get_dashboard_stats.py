"""
GetDashboardStatsQuery.
"""
from dataclasses import dataclass


@dataclass
class GetDashboardStatsQuery:
    """Query for the admin dashboard counters."""
