from flask import Blueprint, jsonify, make_response
from flask_jwt_extended import jwt_required
from eventhub.auth import current_user_id
from eventhub.extensions import limiter
from eventhub.services import UserService
from eventhub.utils.validation import json_body

user_bp = Blueprint("user", __name__)


@user_bp.route("/registerUser", methods=["POST"])
@limiter.limit("20 per hour")
def register_user():
    user_data = json_body()
    user_id = UserService.sign_up(user_data)
    return make_response(
        jsonify({"message": "User registered successfully", "userId": user_id}), 201
    )


@user_bp.route("/login", methods=["POST"])
@limiter.limit("10 per minute")
def login():
    user_data = json_body()
    result = UserService.sign_in(user_data.get("email"), user_data.get("password"))
    return make_response(jsonify(result), 200)


@user_bp.route("/logout", methods=["POST"])
@jwt_required()
def logout():
    UserService.sign_out(current_user_id())
    return jsonify({"message": "Logged out successfully"}), 200


@user_bp.route("/me", methods=["GET"])
@jwt_required()
def me():
    return jsonify(UserService.get_profile(current_user_id())), 200
