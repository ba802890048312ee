from flask import Blueprint, jsonify
from flask_jwt_extended import jwt_required

from postboard.pagination import pagination_args
from postboard.schemas.user_schema import RegisterSchema
from postboard.services import auth_service, user_service
from postboard.validation import validate_body


user_bp = Blueprint("users", __name__)


@user_bp.route("/users", methods=["POST"])
@validate_body(RegisterSchema)
def register(payload):
    auth_service.register(
        payload["name"],
        payload["email"],
        payload["password"],
    )
    return "", 201


@user_bp.route("/users", methods=["GET"])
@jwt_required()
def list_users():
    page, limit = pagination_args()
    return jsonify(user_service.get_users(page, limit)), 200


@user_bp.route("/users/<int:user_id>", methods=["GET"])
def get_user(user_id):
    return jsonify(user_service.get_user_with_posts(user_id)), 200
