from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required
from eventhub.auth import admin_required, current_user_id
from eventhub.exceptions import AuthorizationError, MissingFieldsError
from eventhub.repositories import UserRepository
from eventhub.services import (
    EmployeeService,
    EventService,
    FeedbackService,
    RegistrationService,
)
from eventhub.utils.validation import json_body, parse_id

event_bp = Blueprint("event", __name__)


@event_bp.route("/events", methods=["GET"])
def get_all_events():
    return jsonify(EventService.get_events()), 200


@event_bp.route("/events/<int:event_id>", methods=["GET"])
def get_event(event_id):
    return jsonify(EventService.get_event(event_id)), 200


@event_bp.route("/createEvent", methods=["POST"])
@admin_required
def create_event():
    data = json_body()
    event_id = EventService.create_event(data, current_user_id())
    return jsonify({"message": "Event created successfully", "eventId": event_id}), 201


@event_bp.route("/events/<int:event_id>", methods=["PUT"])
@admin_required
def update_event(event_id):
    data = json_body()
    return jsonify(EventService.update_event(event_id, data)), 200


@event_bp.route("/events/<int:event_id>/status", methods=["PATCH"])
@admin_required
def change_event_status(event_id):
    data = json_body()
    if not data.get("eventStatus"):
        raise MissingFieldsError(["eventStatus"])
    return jsonify(EventService.change_status(event_id, data["eventStatus"])), 200


@event_bp.route("/registerEvent", methods=["POST"])
@jwt_required()
def register_for_event():
    data = json_body()
    if data.get("eventId") in (None, ""):
        raise MissingFieldsError(["eventId"])
    event_id = parse_id(data["eventId"], "eventId")

    registration_id = RegistrationService.register_for_event(current_user_id(), event_id)
    return (
        jsonify(
            {
                "message": "Successfully registered for the event",
                "registrationId": registration_id,
            }
        ),
        201,
    )


@event_bp.route("/users/<int:user_id>/registrations", methods=["GET"])
@jwt_required()
def get_user_registrations(user_id):
    caller_id = current_user_id()
    # Users may only see their own registrations unless they are admins
    if caller_id != user_id and not UserRepository.is_admin(caller_id):
        raise AuthorizationError("Access denied")
    return jsonify(RegistrationService.get_registrations_for_user(user_id)), 200


@event_bp.route("/events/<int:event_id>/registrations", methods=["GET"])
@admin_required
def get_event_registrations(event_id):
    return jsonify(RegistrationService.get_registrations_for_event(event_id)), 200


@event_bp.route("/events/<int:event_id>/assignments", methods=["GET"])
@admin_required
def get_event_assignments(event_id):
    return jsonify(EmployeeService.get_assignments_for_event(event_id)), 200


@event_bp.route("/feedback", methods=["POST"])
@jwt_required()
def submit_feedback():
    data = json_body()
    feedback_id = FeedbackService.submit_feedback(current_user_id(), data)
    return (
        jsonify({"message": "Feedback submitted successfully", "feedbackId": feedback_id}),
        201,
    )


@event_bp.route("/events/<int:event_id>/feedback", methods=["GET"])
def get_event_feedback(event_id):
    return jsonify(FeedbackService.get_feedback_for_event(event_id)), 200
