"""Model exports.

Import from here: `from src.events_api.models import User, RefreshToken`
"""

from src.events_api.models.auth import RefreshToken
from src.events_api.models.enums import Role
from src.events_api.models.event import Event, Participant
from src.events_api.models.user import User

__all__ = [
    # Enums
    "Role",
    # Models
    "Event",
    "Participant",
    "RefreshToken",
    "User",
]
