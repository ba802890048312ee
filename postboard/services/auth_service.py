import logging

from sqlalchemy.exc import IntegrityError

from postboard.db import db
from postboard.errors import BadRequest, Conflict, NotFound
from postboard.repositories import user_repository
from postboard.schemas.user_schema import UserResponseSchema
from postboard.security import hash_password, issue_access_token, verify_password


logger = logging.getLogger(__name__)


def register(name, email, password):
    if user_repository.get_by_email(email):
        raise Conflict("User with this email already exists")

    try:
        user = user_repository.create_user(
            name=name,
            email=email,
            password_hash=hash_password(password),
        )
    except IntegrityError as e:
        # Lost a race with a concurrent registration for the same email.
        db.session.rollback()
        raise Conflict("User with this email already exists") from e

    logger.info("user_registered user_id=%s", user.id)
    return user


def login(email, password):
    user = user_repository.get_by_email(email)
    if not user:
        raise NotFound("User not found")

    if not verify_password(password, user.password_hash):
        logger.info("login_failed user_id=%s", user.id)
        raise BadRequest("Invalid credentials")

    logger.info("login_succeeded user_id=%s", user.id)
    return {
        "user": UserResponseSchema().dump(user),
        "jwt": issue_access_token(user),
    }
