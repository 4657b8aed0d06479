from eventhub.extensions import db


class LoginRecord(db.Model):
    """Audit trail of sessions; ``logout_time`` stays NULL while a session is open."""

    __tablename__ = "login_records"

    id = db.Column(db.Integer, primary_key=True)
    user_id = db.Column(db.Integer, db.ForeignKey("users.id"), nullable=False, index=True)
    login_time = db.Column(db.TIMESTAMP(timezone=True), nullable=False)
    logout_time = db.Column(db.TIMESTAMP(timezone=True), nullable=True)

    def __repr__(self):
        return (
            f"LoginRecord("
            f"id={self.id}, "
            f"user_id={self.user_id}, "
            f"login_time={self.login_time}, "
            f"logout_time={self.logout_time}"
            f")"
        )
