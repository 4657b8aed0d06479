from eventhub.extensions import db


class Registration(db.Model):
    __tablename__ = "registrations"

    id = db.Column(db.Integer, primary_key=True)
    attendee_id = db.Column(db.Integer, db.ForeignKey("attendees.id"), nullable=False)
    event_id = db.Column(db.Integer, db.ForeignKey("events.id"), nullable=False)
    register_date = db.Column(db.Date, nullable=False)

    attendee = db.relationship("Attendee")
    event = db.relationship("Event")

    # An attendee can only hold one registration per event
    __table_args__ = (
        db.UniqueConstraint("attendee_id", "event_id", name="uq_registration_attendee_event"),
    )

    def to_dict(self):
        return {
            "id": self.id,
            "attendeeId": self.attendee_id,
            "eventId": self.event_id,
            "registerDate": self.register_date.isoformat() if self.register_date else None,
        }

    def __repr__(self):
        return (
            f"Registration("
            f"id={self.id}, "
            f"attendee_id={self.attendee_id}, "
            f"event_id={self.event_id}, "
            f"register_date={self.register_date}"
            f")"
        )
