from flask import current_app
from sqlalchemy.exc import IntegrityError
from eventhub.extensions import db
from eventhub.exceptions import ConflictError, MissingFieldsError, NotFoundError, ValidationError
from eventhub.repositories import EventRepository, FeedbackRepository
from eventhub.utils.validation import parse_id, parse_int, parse_optional_text

ALREADY_SUBMITTED = "You have already submitted feedback for this event"


def _parse_rating(value):
    rating = parse_int(value, "Rating must be between 1 and 5")
    if not 1 <= rating <= 5:
        raise ValidationError("Rating must be between 1 and 5")
    return rating


class FeedbackService:
    @staticmethod
    def submit_feedback(user_id: int, data) -> int:
        if data.get("eventId") in (None, "") or data.get("rating") in (None, ""):
            raise MissingFieldsError(
                [f for f in ("eventId", "rating") if data.get(f) in (None, "")],
                "Please provide eventId and rating",
            )

        event_id = parse_id(data["eventId"], "eventId")
        rating = _parse_rating(data["rating"])

        # Attendance is not checked; any user may rate any existing event
        if not EventRepository.get_event(event_id):
            raise NotFoundError("Event not found")

        if FeedbackRepository.find_by_user_and_event(user_id, event_id):
            raise ConflictError(ALREADY_SUBMITTED)

        try:
            feedback = FeedbackRepository.create_feedback(
                {
                    "user_id": user_id,
                    "event_id": event_id,
                    "rating": rating,
                    "comment": parse_optional_text(data.get("comment"), "comment"),
                }
            )
        except IntegrityError:
            db.session.rollback()
            raise ConflictError(ALREADY_SUBMITTED)

        current_app.logger.info(
            f"Feedback {feedback.id} submitted by user {user_id} for event {event_id} (rating {rating})"
        )
        return feedback.id

    @staticmethod
    def get_feedback_for_event(event_id: int):
        results = []
        for feedback, name in FeedbackRepository.list_for_event(event_id):
            data = feedback.to_dict()
            data["name"] = name
            results.append(data)
        return results
