from typing import List, Optional, Tuple
from sqlalchemy import func, select
from eventhub.extensions import db
from eventhub.models import Event, Registration


def _attendee_count():
    return (
        select(func.count(Registration.id))
        .where(Registration.event_id == Event.id)
        .correlate(Event)
        .scalar_subquery()
    )


class EventRepository:
    @staticmethod
    def get_events_with_counts() -> List[Tuple[Event, int]]:
        """All events paired with their live registration count, newest date first."""
        return (
            db.session.query(Event, _attendee_count().label("current_attendees"))
            .order_by(Event.date.desc(), Event.id.desc())
            .all()
        )

    @staticmethod
    def get_event_with_count(event_id: int) -> Optional[Tuple[Event, int]]:
        return (
            db.session.query(Event, _attendee_count().label("current_attendees"))
            .filter(Event.id == event_id)
            .first()
        )

    @staticmethod
    def get_event(event_id: int) -> Optional[Event]:
        return Event.query.filter_by(id=event_id).first()

    @staticmethod
    def get_event_for_update(event_id: int) -> Optional[Event]:
        """Load an event and lock its row until the current transaction ends."""
        return Event.query.filter_by(id=event_id).with_for_update().first()

    @staticmethod
    def create_event(attrs) -> Event:
        event = Event(**attrs)
        db.session.add(event)
        db.session.commit()
        return event

    @staticmethod
    def update_event(event: Event, attrs: dict) -> Event:
        for key, value in attrs.items():
            if hasattr(event, key):
                setattr(event, key, value)
        db.session.commit()
        return event
