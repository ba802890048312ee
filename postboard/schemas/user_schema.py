from marshmallow import EXCLUDE, validate

from postboard.extensions.extensions import ma
from postboard.models.user_model import User


def _string_errors(label):
    return {
        "required": f"{label} is required",
        "null": f"{label} is required",
        "invalid": f"{label} must be a string",
    }


class RegisterSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    name = ma.Str(
        required=True,
        validate=validate.Length(min=2, error="Name must be at least 2 characters"),
        error_messages=_string_errors("Name"),
    )
    email = ma.Email(
        required=True,
        error_messages={
            "required": "Email is required",
            "null": "Email is required",
            "invalid": "Invalid email format",
        },
    )
    password = ma.Str(
        required=True,
        validate=validate.Length(min=6, error="Password must be at least 6 characters"),
        error_messages=_string_errors("Password"),
    )


class LoginSchema(ma.Schema):
    class Meta:
        unknown = EXCLUDE

    email = ma.Email(
        required=True,
        error_messages={
            "required": "Email is required",
            "null": "Email is required",
            "invalid": "Invalid email format",
        },
    )
    password = ma.Str(
        required=True,
        validate=validate.Length(min=1, error="Password is required"),
        error_messages=_string_errors("Password"),
    )


class UserSummarySchema(ma.SQLAlchemySchema):
    class Meta:
        model = User

    name = ma.auto_field()
    email = ma.auto_field()


class UserResponseSchema(UserSummarySchema):
    id = ma.auto_field()

