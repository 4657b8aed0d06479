from eventhub.models import User
from eventhub.exceptions import (
    AuthError,
    ConflictError,
    MissingFieldsError,
    NotFoundError,
    ValidationError,
)
from eventhub.repositories import UserRepository, LoginRepository
from werkzeug.security import generate_password_hash, check_password_hash
from flask_jwt_extended import create_access_token
from sqlalchemy.exc import IntegrityError
from eventhub.extensions import db
import logging

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


def _clean(value, field):
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return value.strip() or None


def _password(value):
    if value is not None and not isinstance(value, str):
        raise ValidationError("password must be a string")
    return value or None


class UserService:
    @staticmethod
    def sign_up(user_data):
        name = _clean(user_data.get("name"), "name")
        email = _clean(user_data.get("email"), "email")
        password = _password(user_data.get("password"))

        missing = [
            field
            for field, value in (("name", name), ("email", email), ("password", password))
            if not value
        ]
        if missing:
            raise MissingFieldsError(missing, "Please provide name, email, and password")

        email = email.lower()
        if UserRepository.find_by_email(email):
            logger.warning(f"Signup attempt with existing email: {email}")
            raise ConflictError("User with this email already exists")

        user = User(
            name=name,
            email=email,
            password=generate_password_hash(password),
            phone=_clean(user_data.get("phone") or user_data.get("phoneNumber"), "phone"),
            address=_clean(user_data.get("address"), "address"),
        )

        try:
            created_user = UserRepository.sign_up(user)
        except IntegrityError:
            # Lost a race against a concurrent signup with the same email
            db.session.rollback()
            logger.warning(f"Signup conflict on insert for email: {email}")
            raise ConflictError("User with this email already exists")

        logger.info(f"User created successfully: {created_user.email}")
        return created_user.id

    @staticmethod
    def sign_in(email, password):
        email = _clean(email, "email")
        password = _password(password)

        if not email or not password:
            raise MissingFieldsError(
                [f for f, v in (("email", email), ("password", password)) if not v],
                "Please provide email and password",
            )

        user = UserRepository.find_by_email(email.lower())
        if not user:
            logger.warning(f"Login attempt with non-existent email: {email}")
            raise AuthError(INVALID_CREDENTIALS)

        if not check_password_hash(user.password, password):
            logger.warning(f"Failed login attempt for user: {email}")
            raise AuthError(INVALID_CREDENTIALS)

        is_admin = UserRepository.is_admin(user.id)

        access_token = create_access_token(
            identity=str(user.id),
            additional_claims={
                "id": user.id,
                "name": user.name,
                "email": user.email,
                "isAdmin": is_admin,
            },
        )

        LoginRepository.open_session(user.id)
        logger.info(f"User logged in successfully: {user.email}")

        return {
            "token": access_token,
            "user": {
                "id": user.id,
                "name": user.name,
                "email": user.email,
                "isAdmin": is_admin,
            },
        }

    @staticmethod
    def sign_out(user_id):
        """Close the caller's most recent open session, if there is one."""
        record = LoginRepository.find_latest_open(user_id)
        if record:
            LoginRepository.close_session(record)
            logger.info(f"User {user_id} logged out (login record {record.id})")
        else:
            logger.info(f"Logout for user {user_id} with no open login record")

    @staticmethod
    def get_profile(user_id):
        user = UserRepository.find_by_id(user_id)
        if not user:
            raise NotFoundError("User not found")
        profile = user.to_dict()
        profile["isAdmin"] = UserRepository.is_admin(user.id)
        return profile
