from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required
from eventhub.auth import current_user_id
from eventhub.services import NotificationService

notification_bp = Blueprint("notification", __name__)


@notification_bp.route("/notifications", methods=["GET"])
@jwt_required()
def get_notifications():
    return jsonify(NotificationService.get_notifications(current_user_id())), 200


@notification_bp.route("/notifications/<int:notification_id>/read", methods=["PUT"])
@jwt_required()
def mark_notification_read(notification_id):
    NotificationService.mark_read(notification_id, current_user_id())
    return jsonify({"message": "Notification marked as read"}), 200


@notification_bp.route("/notifications/read-all", methods=["PUT"])
@jwt_required()
def mark_all_notifications_read():
    updated = NotificationService.mark_all_read(current_user_id())
    return jsonify({"message": "Notifications marked as read", "updated": updated}), 200
