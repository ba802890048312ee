from functools import wraps

from flask import request
from marshmallow import ValidationError as SchemaValidationError

from postboard.errors import BadRequest, ValidationError


def _flatten_messages(messages):
    if isinstance(messages, str):
        return [messages]
    if isinstance(messages, dict):
        flattened = []
        for value in messages.values():
            flattened.extend(_flatten_messages(value))
        return flattened
    flattened = []
    for value in messages:
        flattened.extend(_flatten_messages(value))
    return flattened


def request_payload():
    """Return the request body as a dict, from JSON or a submitted form."""
    data = request.get_json(silent=True)
    if data is None and request.form:
        data = request.form.to_dict()
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise BadRequest("Invalid JSON body")
    return data


def load_or_raise(schema, data):
    """Load ``data`` with ``schema``, reporting every violated field at once."""
    try:
        return schema.load(data)
    except SchemaValidationError as err:
        raise ValidationError(
            details=_flatten_messages(err.messages),
            fields=err.messages,
        ) from err


def validate_body(schema_cls):
    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            kwargs["payload"] = load_or_raise(schema_cls(), request_payload())
            return view(*args, **kwargs)
        return wrapper
    return decorator
