"""Access control: JWT error responses and the admin guard."""
from functools import wraps
from flask import current_app, jsonify
from flask_jwt_extended import get_jwt_identity, jwt_required
from eventhub.exceptions import AuthorizationError
from eventhub.extensions import jwt
from eventhub.repositories import UserRepository


def current_user_id() -> int:
    return int(get_jwt_identity())


def admin_required(fn):
    """Require a valid token whose user has a row in the admins table.

    The token's ``isAdmin`` claim is only a hint for the client; this check
    always goes to the database.
    """

    @wraps(fn)
    @jwt_required()
    def wrapper(*args, **kwargs):
        user_id = current_user_id()
        if not UserRepository.is_admin(user_id):
            current_app.logger.warning(f"Non-admin user {user_id} denied admin route")
            raise AuthorizationError("Access denied. Admin privileges required.")
        return fn(*args, **kwargs)

    return wrapper


@jwt.unauthorized_loader
def missing_token_callback(reason):
    return jsonify({"message": "Access denied. No token provided."}), 401


@jwt.invalid_token_loader
def invalid_token_callback(reason):
    current_app.logger.warning(f"Rejected invalid token: {reason}")
    return jsonify({"message": "Invalid token"}), 400


@jwt.expired_token_loader
def expired_token_callback(jwt_header, jwt_payload):
    current_app.logger.info(f"Rejected expired token for user {jwt_payload.get('sub')}")
    return jsonify({"message": "Invalid token"}), 400
