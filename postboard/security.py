"""
Password hashing and bearer-token helpers.
"""

import logging

from flask import current_app, jsonify
from flask_jwt_extended import create_access_token, get_jwt_identity
from werkzeug.security import check_password_hash, generate_password_hash

from postboard.errors import Unauthorized


logger = logging.getLogger(__name__)


def _peppered(password: str) -> str:
    return current_app.config["PASSWORD_PEPPER"] + password


def hash_password(password: str) -> str:
    return generate_password_hash(_peppered(password))


def verify_password(password: str, password_hash: str) -> bool:
    if not password or not password_hash:
        return False
    return check_password_hash(password_hash, _peppered(password))


def issue_access_token(user) -> str:
    # Only the user id goes into the claims; expiry comes from JWT_ACCESS_TOKEN_EXPIRES.
    return create_access_token(identity=str(user.id))


def current_user_id() -> int:
    try:
        return int(get_jwt_identity())
    except (TypeError, ValueError) as e:
        raise Unauthorized("Invalid token subject") from e


def _unauthorized(reason: str):
    return jsonify({"error": reason}), 401


def register_jwt_callbacks(jwt):
    """Render every token rejection as 401 with a JSON error body."""

    @jwt.unauthorized_loader
    def missing_token(reason):
        logger.info("auth_rejected reason=missing_token")
        return _unauthorized(reason)

    @jwt.invalid_token_loader
    def invalid_token(reason):
        logger.info("auth_rejected reason=invalid_token")
        return _unauthorized(reason)

    @jwt.expired_token_loader
    def expired_token(jwt_header, jwt_payload):
        logger.info("auth_rejected reason=expired_token")
        return _unauthorized("Token has expired")

    @jwt.token_verification_failed_loader
    def verification_failed(jwt_header, jwt_payload):
        logger.info("auth_rejected reason=verification_failed")
        return _unauthorized("Token verification failed")
