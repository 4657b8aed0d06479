import argparse
import sys
from eventhub import create_app
from eventhub.extensions import db
from eventhub.models import Attendee, User
from eventhub.repositories import UserRepository
from werkzeug.security import generate_password_hash


def create_admin_user(email, password, name="Admin", update=False):
    app = create_app()
    with app.app_context():
        db.create_all()
        admin = User.query.filter_by(email=email.lower()).first()
        if not admin:
            admin = User(
                name=name,
                email=email.lower(),
                password=generate_password_hash(password),
            )
            db.session.add(admin)
            db.session.flush()
            db.session.add(Attendee(user_id=admin.id))
            db.session.commit()
            print(f"User {admin.email} created")
        elif update:
            admin.password = generate_password_hash(password)
            db.session.commit()
            print(f"Password for {admin.email} updated")

        was_admin = UserRepository.is_admin(admin.id)
        UserRepository.make_admin(admin)
        print(f"{admin.email} {'is already' if was_admin else 'is now'} an admin")
        return admin.id


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Create a user and grant admin rights")
    parser.add_argument("email")
    parser.add_argument("password")
    parser.add_argument("--name", default="Admin")
    parser.add_argument("--update", action="store_true", help="reset the password of an existing user")
    args = parser.parse_args()
    sys.exit(0 if create_admin_user(args.email, args.password, args.name, args.update) else 1)
