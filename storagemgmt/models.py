"""
Value types shared by the blob container providers.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Optional


class AccessLevel(str, Enum):
    """Public read access for the data in a blob container.

    Values match the service's ``publicAccess`` property, so members compare
    equal to ``azure.mgmt.storage.models.PublicAccess``.
    """
    PUBLIC_ACCESS_CONTAINER = "Container"
    PUBLIC_ACCESS_BLOB = "Blob"
    PUBLIC_ACCESS_NONE = "None"


@dataclass(frozen=True)
class SyntheticResponse:
    """Locally built response reported when no request could be sent."""
    status_code: int = 500
    reason: Optional[str] = "Internal Server Error"
    headers: Dict[str, str] = field(default_factory=dict)
