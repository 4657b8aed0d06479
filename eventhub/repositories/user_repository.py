from typing import Optional
from eventhub.extensions import db
from eventhub.models import User, Admin, Attendee, Organizer


class UserRepository:
    @staticmethod
    def sign_up(user: User) -> User:
        """Persist a user together with its attendee row in one transaction."""
        db.session.add(user)
        db.session.flush()
        db.session.add(Attendee(user_id=user.id))
        db.session.commit()
        return user

    @staticmethod
    def find_by_email(email: str) -> Optional[User]:
        return User.query.filter_by(email=email).first()

    @staticmethod
    def find_by_id(user_id: int) -> Optional[User]:
        return User.query.filter_by(id=user_id).first()

    @staticmethod
    def is_admin(user_id: int) -> bool:
        return Admin.query.filter_by(user_id=user_id).first() is not None

    @staticmethod
    def make_admin(user: User) -> Admin:
        admin = Admin.query.filter_by(user_id=user.id).first()
        if not admin:
            admin = Admin(user_id=user.id)
            db.session.add(admin)
            db.session.commit()
        return admin

    @staticmethod
    def find_attendee(user_id: int) -> Optional[Attendee]:
        return Attendee.query.filter_by(user_id=user_id).first()

    @staticmethod
    def find_or_create_organizer(user_id: int) -> Organizer:
        """Return the user's organizer row, adding one to the session if needed.

        The new row is only flushed; the caller commits it together with the
        event it is creating.
        """
        organizer = Organizer.query.filter_by(user_id=user_id).first()
        if not organizer:
            organizer = Organizer(user_id=user_id, contact_info="")
            db.session.add(organizer)
            db.session.flush()
        return organizer
