from datetime import date
from flask import current_app
from sqlalchemy.exc import IntegrityError
from eventhub.extensions import db
from eventhub.exceptions import (
    CapacityError,
    ConflictError,
    NotFoundError,
    StateError,
)
from eventhub.models.enums import EventStatus
from eventhub.repositories import (
    EventRepository,
    NotificationRepository,
    RegistrationRepository,
    UserRepository,
)
from eventhub.utils.email import send_registration_confirmation

ALREADY_REGISTERED = "You are already registered for this event"
FULLY_BOOKED = "Event is fully booked"


class RegistrationService:
    @staticmethod
    def register_for_event(user_id: int, event_id: int) -> int:
        """Register a user for an event and return the new registration id.

        Every check and both inserts share one transaction. The event row is
        locked while its seats are counted and the insert is conditional on a
        free seat, so concurrent requests cannot overbook the event.
        """
        current_app.logger.info(f"Registration attempt: User {user_id} for event {event_id}")
        try:
            attendee = UserRepository.find_attendee(user_id)
            if not attendee:
                raise StateError("User is not registered as an attendee")

            if RegistrationRepository.find_by_attendee_and_event(attendee.id, event_id):
                current_app.logger.warning(f"User {user_id} already registered for event {event_id}")
                raise ConflictError(ALREADY_REGISTERED)

            event = EventRepository.get_event_for_update(event_id)
            if not event:
                raise NotFoundError("Event not found")

            attendee_count = RegistrationRepository.count_by_event_id(event_id)
            current_app.logger.info(
                f"Capacity check for user {user_id}, event {event_id}: attendees={attendee_count}/{event.max_attendees}"
            )
            if attendee_count >= event.max_attendees:
                raise CapacityError(FULLY_BOOKED)

            if event.event_status in EventStatus.closed():
                raise StateError("Cannot register for a completed or cancelled event")

            registration = RegistrationRepository.insert_if_capacity(
                attendee.id, event_id, date.today()
            )
            if registration is None:
                current_app.logger.warning(
                    f"User {user_id} lost the last seat for event {event_id} to a concurrent registration"
                )
                raise CapacityError(FULLY_BOOKED)

            NotificationRepository.add(
                user_id, f"You have successfully registered for {event.title}", event_id
            )
            db.session.commit()
        except IntegrityError:
            db.session.rollback()
            current_app.logger.warning(
                f"Duplicate registration rejected by the database for user {user_id}, event {event_id}"
            )
            raise ConflictError(ALREADY_REGISTERED)
        except Exception:
            db.session.rollback()
            raise

        current_app.logger.info(f"Successfully registered user {user_id} for event {event_id}")

        try:
            send_registration_confirmation(attendee.user, event)
        except Exception as e:
            current_app.logger.error(
                f"Failed to send registration e-mail to user {user_id}: {str(e)}"
            )

        return registration.id

    @staticmethod
    def get_registrations_for_user(user_id: int):
        attendee = UserRepository.find_attendee(user_id)
        if not attendee:
            return []

        results = []
        for registration, event in RegistrationRepository.list_for_attendee(attendee.id):
            data = registration.to_dict()
            data["event"] = event.to_dict()
            results.append(data)
        return results

    @staticmethod
    def get_registrations_for_event(event_id: int):
        if not EventRepository.get_event(event_id):
            raise NotFoundError("Event not found")

        results = []
        for registration, user in RegistrationRepository.list_for_event(event_id):
            data = registration.to_dict()
            data["userId"] = user.id
            data["name"] = user.name
            data["email"] = user.email
            results.append(data)
        return results
