from typing import List, Optional, Tuple
from eventhub.extensions import db
from eventhub.models import Feedback, User


class FeedbackRepository:
    @staticmethod
    def find_by_user_and_event(user_id: int, event_id: int) -> Optional[Feedback]:
        return Feedback.query.filter_by(user_id=user_id, event_id=event_id).first()

    @staticmethod
    def create_feedback(attrs) -> Feedback:
        feedback = Feedback(**attrs)
        db.session.add(feedback)
        db.session.commit()
        return feedback

    @staticmethod
    def list_for_event(event_id: int) -> List[Tuple[Feedback, str]]:
        return (
            db.session.query(Feedback, User.name)
            .join(User, Feedback.user_id == User.id)
            .filter(Feedback.event_id == event_id)
            .order_by(Feedback.submitted_at.desc(), Feedback.id.desc())
            .all()
        )
