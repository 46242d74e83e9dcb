"""Input parsing shared by the content operations.

Payloads arrive as decoded JSON (or form) dicts keyed in camelCase. Every
helper raises BadRequestError naming the offending field.
"""

from services.errors import BadRequestError


def require_payload(payload):
    if not isinstance(payload, dict):
        raise BadRequestError("Request body must be a JSON object")
    return payload


def require_text(payload, key, label):
    value = payload.get(key)
    if not isinstance(value, str):
        raise BadRequestError(f"{key} is required and must be a string")
    if not value.strip():
        raise BadRequestError(f"{label} cannot be empty")
    return value


def require_choice(payload, key, enum_cls, default=None):
    value = payload.get(key)
    if value is None:
        if default is not None:
            return default
        raise BadRequestError(f"{key} is required")

    try:
        return enum_cls(value)
    except ValueError:
        valid = [member.value for member in enum_cls]
        raise BadRequestError(f"Invalid {key}: {value!r}. Valid options: {valid}")


# Largest value a signed 64-bit INTEGER column can hold
MAX_ID = 2**63 - 1


def optional_int(payload, key, minimum=0, maximum=MAX_ID):
    value = payload.get(key)
    if value is None:
        return None
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadRequestError(f"{key} must be an integer")
    if not minimum <= value <= maximum:
        raise BadRequestError(f"{key} must be between {minimum} and {maximum}")
    return value


def optional_bool(payload, key, default):
    value = payload.get(key)
    if value is None:
        return default
    if not isinstance(value, bool):
        raise BadRequestError(f"{key} must be a boolean")
    return value
