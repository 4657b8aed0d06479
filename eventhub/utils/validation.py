from flask import request
from eventhub.exceptions import ValidationError

# Upper bound of an INTEGER column
MAX_INT = 2**31 - 1


def parse_int(value, message):
    """Coerce a JSON number or numeric string to an int without losing data.

    Booleans, fractional numbers, infinities and NaN are rejected with
    ``ValidationError(message)`` rather than truncated.
    """
    if isinstance(value, bool):
        raise ValidationError(message)
    try:
        parsed = int(value)
        integral = parsed == float(value)
    except (TypeError, ValueError, OverflowError):
        raise ValidationError(message)
    if not integral:
        raise ValidationError(message)
    return parsed


def parse_id(value, field):
    """Coerce a JSON id (int or numeric string) to a positive int."""
    message = f"{field} must be a positive integer"
    parsed = parse_int(value, message)
    if not 1 <= parsed <= MAX_INT:
        raise ValidationError(message)
    return parsed


def parse_text(value, field):
    """Return ``value`` stripped; it must be a non-blank string."""
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    value = value.strip()
    if not value:
        raise ValidationError(f"{field} cannot be empty")
    return value


def parse_optional_text(value, field):
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValidationError(f"{field} must be a string")
    return value


def json_body():
    """The request's JSON object, or {} when the body is missing or not JSON."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data
