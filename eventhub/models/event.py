from eventhub.extensions import db
from .enums import EventStatus


class Event(db.Model):
    __tablename__ = "events"

    id = db.Column(db.Integer, primary_key=True)
    organizer_id = db.Column(
        db.Integer, db.ForeignKey("organizers.id"), nullable=False
    )
    title = db.Column(db.String(255), nullable=False)
    date = db.Column(db.DateTime, nullable=False)
    location = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=True)
    max_attendees = db.Column(db.Integer, nullable=False)
    event_status = db.Column(
        db.String(20), nullable=False, default=EventStatus.UPCOMING.value
    )
    image = db.Column(db.String(500), nullable=True)
    created_at = db.Column(
        db.TIMESTAMP(timezone=True), nullable=False, server_default=db.func.now()
    )
    updated_at = db.Column(
        db.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=db.func.now(),
        onupdate=db.func.now(),
    )

    organizer = db.relationship("Organizer")

    __table_args__ = (
        db.CheckConstraint("max_attendees > 0", name="ck_event_max_attendees_positive"),
        db.CheckConstraint(
            "event_status IN ('upcoming', 'ongoing', 'completed', 'cancelled')",
            name="ck_event_status",
        ),
        db.Index("ix_events_date", "date"),
    )

    def to_dict(self, current_attendees=None):
        """Serialize the event.

        ``current_attendees`` is always derived from the registrations table;
        pass it in when the caller already selected the count alongside the row.
        """
        if current_attendees is None:
            from .registration import Registration

            current_attendees = Registration.query.filter_by(event_id=self.id).count()

        return {
            "id": self.id,
            "organizerId": self.organizer_id,
            "organizerUserId": self.organizer.user_id if self.organizer else None,
            "title": self.title,
            "date": self.date.isoformat() if self.date else None,
            "location": self.location,
            "description": self.description,
            "maxAttendees": self.max_attendees,
            "currentAttendees": current_attendees,
            "eventStatus": self.event_status,
            "image": self.image,
        }

    def __repr__(self):
        return (
            f"Event("
            f"id={self.id}, "
            f"title='{self.title}', "
            f"date={self.date}, "
            f"max_attendees={self.max_attendees}, "
            f"event_status={self.event_status}"
            f")"
        )
