from datetime import date
from typing import List, Optional, Tuple
from sqlalchemy import func, insert, literal, select
from eventhub.extensions import db
from eventhub.models import Attendee, Event, Registration, User


class RegistrationRepository:
    @staticmethod
    def find_by_attendee_and_event(attendee_id: int, event_id: int) -> Optional[Registration]:
        return Registration.query.filter_by(attendee_id=attendee_id, event_id=event_id).first()

    @staticmethod
    def count_by_event_id(event_id: int) -> int:
        return Registration.query.filter_by(event_id=event_id).count()

    @staticmethod
    def insert_if_capacity(attendee_id: int, event_id: int, register_date: date) -> Optional[Registration]:
        """Insert a registration only while the event still has a free seat.

        The seat count and the insert happen in a single statement, so the
        capacity ceiling holds even if the caller's own count was stale.
        Returns None when the event was already full. Does not commit.
        """
        current = (
            select(func.count(Registration.id))
            .where(Registration.event_id == event_id)
            .correlate(None)
            .scalar_subquery()
        )
        capacity = (
            select(Event.max_attendees)
            .where(Event.id == event_id)
            .correlate(None)
            .scalar_subquery()
        )
        stmt = insert(Registration.__table__).from_select(
            ["attendee_id", "event_id", "register_date"],
            select(
                literal(attendee_id),
                literal(event_id),
                literal(register_date, db.Date),
            ).where(current < capacity),
        )
        result = db.session.execute(stmt)
        if result.rowcount == 0:
            return None
        return RegistrationRepository.find_by_attendee_and_event(attendee_id, event_id)

    @staticmethod
    def list_for_attendee(attendee_id: int) -> List[Tuple[Registration, Event]]:
        return (
            db.session.query(Registration, Event)
            .join(Event, Registration.event_id == Event.id)
            .filter(Registration.attendee_id == attendee_id)
            .order_by(Event.date.desc())
            .all()
        )

    @staticmethod
    def list_for_event(event_id: int) -> List[Tuple[Registration, User]]:
        return (
            db.session.query(Registration, User)
            .join(Attendee, Registration.attendee_id == Attendee.id)
            .join(User, Attendee.user_id == User.id)
            .filter(Registration.event_id == event_id)
            .order_by(Registration.register_date.desc(), Registration.id.desc())
            .all()
        )

    @staticmethod
    def list_user_ids_for_event(event_id: int) -> List[int]:
        rows = (
            db.session.query(Attendee.user_id)
            .join(Registration, Registration.attendee_id == Attendee.id)
            .filter(Registration.event_id == event_id)
            .all()
        )
        return [row.user_id for row in rows]
