from src.events_api.services.event_service import EventService
from src.events_api.services.participant_service import ParticipantService
from src.events_api.services.refresh_token_service import RefreshTokenService
from src.events_api.services.user_service import UserService

__all__ = ["EventService", "ParticipantService", "RefreshTokenService", "UserService"]
