"""Event and participant factories."""

from datetime import date, timedelta
from uuid import uuid4

from polyfactory import Use

from src.events_api.models import Event, Participant
from tests.factories.base import BaseFactory, utc_now


class EventFactory(BaseFactory):
    """Factory for generating Event test data."""

    __model__ = Event

    id = Use(uuid4)
    name = Use(lambda: f"Event {uuid4().hex[-6:]}")
    description = "Test event"
    starts_at = Use(lambda: utc_now() + timedelta(days=30))
    location = "Minsk"
    category = "conference"
    max_participants = 10
    image_url = None
    created_at = Use(utc_now)


class ParticipantFactory(BaseFactory):
    """Factory for Participant rows. event_id and user_id must be set explicitly."""

    __model__ = Participant

    id = Use(uuid4)
    event_id = None
    user_id = None
    first_name = "Test"
    last_name = "Participant"
    birth_date = date(1990, 1, 1)
    email = Use(lambda: f"p_{uuid4().hex[-8:]}@example.com")
    registered_at = Use(utc_now)
