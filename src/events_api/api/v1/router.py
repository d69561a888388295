from fastapi import APIRouter

from src.events_api.api.v1 import auth, events, participants, users

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(auth.router)
api_router.include_router(users.router)
api_router.include_router(events.router)
api_router.include_router(participants.router)
