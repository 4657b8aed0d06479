from datetime import datetime, timezone
from flask import current_app
from eventhub.extensions import db
from eventhub.exceptions import MissingFieldsError, NotFoundError, StateError, ValidationError
from eventhub.models.enums import EventStatus
from eventhub.repositories import (
    EventRepository,
    NotificationRepository,
    RegistrationRepository,
    UserRepository,
)
from eventhub.utils.validation import MAX_INT, parse_int, parse_optional_text, parse_text


def parse_event_date(value):
    if not isinstance(value, str):
        raise ValidationError("Date must be an ISO-8601 date or datetime")
    try:
        parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    except ValueError:
        raise ValidationError("Date must be an ISO-8601 date or datetime")
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


def parse_max_attendees(value):
    max_attendees = parse_int(value, "maxAttendees must be a positive integer")
    if not 1 <= max_attendees <= MAX_INT:
        raise ValidationError("maxAttendees must be a positive integer")
    return max_attendees


def parse_status(value):
    if value not in EventStatus.values():
        raise ValidationError(
            f"eventStatus must be one of: {', '.join(EventStatus.values())}"
        )
    return value


class EventService:
    @staticmethod
    def get_events():
        return [
            event.to_dict(current_attendees=count)
            for event, count in EventRepository.get_events_with_counts()
        ]

    @staticmethod
    def get_event(event_id: int):
        row = EventRepository.get_event_with_count(event_id)
        if not row:
            raise NotFoundError("Event not found")
        event, count = row
        return event.to_dict(current_attendees=count)

    @staticmethod
    def create_event(data, user_id):
        required_fields = ["title", "date", "location", "maxAttendees"]
        missing = [f for f in required_fields if data.get(f) in (None, "")]
        if missing:
            raise MissingFieldsError(missing)

        attrs = {
            "title": parse_text(data["title"], "title"),
            "date": parse_event_date(data["date"]),
            "location": parse_text(data["location"], "location"),
            "description": parse_optional_text(data.get("description"), "description"),
            "max_attendees": parse_max_attendees(data["maxAttendees"]),
            "event_status": parse_status(data.get("eventStatus") or EventStatus.UPCOMING.value),
            "image": parse_optional_text(data.get("image"), "image"),
        }

        organizer = UserRepository.find_or_create_organizer(user_id)
        attrs["organizer_id"] = organizer.id
        event = EventRepository.create_event(attrs)

        current_app.logger.info(
            f"Event {event.id} '{event.title}' created by user {user_id} (organizer {organizer.id})"
        )
        return event.id

    @staticmethod
    def update_event(event_id: int, data):
        event = EventRepository.get_event(event_id)
        if not event:
            raise NotFoundError("Event not found")

        field_parsers = {
            "title": ("title", lambda v: parse_text(v, "title")),
            "date": ("date", parse_event_date),
            "location": ("location", lambda v: parse_text(v, "location")),
            "description": ("description", lambda v: parse_optional_text(v, "description")),
            "maxAttendees": ("max_attendees", parse_max_attendees),
            "image": ("image", lambda v: parse_optional_text(v, "image")),
        }
        attrs = {}
        for key, (column, parse) in field_parsers.items():
            if key in data:
                attrs[column] = parse(data[key])

        if "max_attendees" in attrs:
            current = RegistrationRepository.count_by_event_id(event_id)
            if attrs["max_attendees"] < current:
                raise ValidationError(
                    f"maxAttendees cannot be lower than the {current} current registrations"
                )

        if "eventStatus" in data and data["eventStatus"] != event.event_status:
            EventService._apply_status(event, parse_status(data["eventStatus"]))

        EventRepository.update_event(event, attrs)
        current_app.logger.info(f"Event {event_id} updated: {sorted(attrs)}")
        return EventService.get_event(event_id)

    @staticmethod
    def change_status(event_id: int, new_status):
        event = EventRepository.get_event(event_id)
        if not event:
            raise NotFoundError("Event not found")
        new_status = parse_status(new_status)

        if new_status != event.event_status:
            EventService._apply_status(event, new_status)
            db.session.commit()
            current_app.logger.info(f"Event {event_id} status changed to {new_status}")
        return EventService.get_event(event_id)

    @staticmethod
    def _apply_status(event, new_status):
        """Validate a status transition and stage its side effects (no commit)."""
        if event.event_status in EventStatus.closed():
            raise StateError(
                f"Cannot change the status of a {event.event_status} event"
            )

        event.event_status = new_status

        if new_status == EventStatus.CANCELLED.value:
            user_ids = RegistrationRepository.list_user_ids_for_event(event.id)
            for user_id in user_ids:
                NotificationRepository.add(
                    user_id, f"The event {event.title} has been cancelled", event.id
                )
            current_app.logger.info(
                f"Event {event.id} cancelled; notified {len(user_ids)} attendees"
            )
