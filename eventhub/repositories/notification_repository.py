from typing import List, Optional, Tuple
from eventhub.extensions import db
from eventhub.models import Event, Notification


class NotificationRepository:
    @staticmethod
    def add(user_id: int, message: str, event_id: Optional[int] = None) -> Notification:
        """Stage a notification in the current transaction without committing."""
        notification = Notification(user_id=user_id, event_id=event_id, message=message)
        db.session.add(notification)
        return notification

    @staticmethod
    def list_for_user(user_id: int) -> List[Tuple[Notification, Optional[str]]]:
        return (
            db.session.query(Notification, Event.title)
            .outerjoin(Event, Notification.event_id == Event.id)
            .filter(Notification.user_id == user_id)
            .order_by(Notification.created_at.desc(), Notification.id.desc())
            .all()
        )

    @staticmethod
    def find_for_user(notification_id: int, user_id: int) -> Optional[Notification]:
        return Notification.query.filter_by(id=notification_id, user_id=user_id).first()

    @staticmethod
    def mark_read(notification: Notification) -> Notification:
        notification.is_read = True
        db.session.commit()
        return notification

    @staticmethod
    def mark_all_read(user_id: int) -> int:
        updated = Notification.query.filter_by(user_id=user_id, is_read=False).update(
            {Notification.is_read: True}, synchronize_session=False
        )
        db.session.commit()
        return updated
