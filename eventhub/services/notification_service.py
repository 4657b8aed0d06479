from flask import current_app
from eventhub.exceptions import NotFoundError
from eventhub.repositories import NotificationRepository


class NotificationService:
    @staticmethod
    def get_notifications(user_id: int):
        return [
            notification.to_dict(event_title=title)
            for notification, title in NotificationRepository.list_for_user(user_id)
        ]

    @staticmethod
    def mark_read(notification_id: int, user_id: int):
        # Someone else's notification is reported the same as a missing one
        notification = NotificationRepository.find_for_user(notification_id, user_id)
        if not notification:
            raise NotFoundError("Notification not found")
        NotificationRepository.mark_read(notification)

    @staticmethod
    def mark_all_read(user_id: int) -> int:
        updated = NotificationRepository.mark_all_read(user_id)
        current_app.logger.info(f"Marked {updated} notifications read for user {user_id}")
        return updated
