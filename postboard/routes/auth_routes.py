from flask import Blueprint, jsonify

from postboard.schemas.user_schema import LoginSchema
from postboard.services import auth_service
from postboard.validation import validate_body


auth_bp = Blueprint("auth", __name__)


@auth_bp.route("/login", methods=["POST"])
@validate_body(LoginSchema)
def login(payload):
    result = auth_service.login(payload["email"], payload["password"])
    return jsonify(result), 200
