from eventhub.extensions import db
from sqlalchemy.sql import func


class Feedback(db.Model):
    __tablename__ = "feedback"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False)
    event_id = db.Column(db.Integer, db.ForeignKey("events.id"), nullable=False)
    rating = db.Column(db.Integer, nullable=False)
    comment = db.Column(db.Text, nullable=True)
    submitted_at = db.Column(
        db.TIMESTAMP(timezone=True), nullable=False, server_default=func.now()
    )

    user = db.relationship("User")

    # One rating per user per event
    __table_args__ = (
        db.UniqueConstraint("user_id", "event_id", name="uq_feedback_user_event"),
        db.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_feedback_rating_range"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "eventId": self.event_id,
            "rating": self.rating,
            "comment": self.comment,
            "submittedAt": self.submitted_at.isoformat() if self.submitted_at else None,
        }
