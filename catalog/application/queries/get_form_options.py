"""
GetFormOptionsQuery.
"""
from dataclasses import dataclass


@dataclass
class GetFormOptionsQuery:
    """Query for the choices offered by the admin product form."""
