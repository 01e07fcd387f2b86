from __future__ import annotations

import logging
from functools import wraps

from flask import jsonify, session

from ..common.datetime_utils import parse_iso_date
from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    ClockActionRejected,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

ADMIN_SESSION_KEY = "is_admin"

_STATUS_BY_ERROR = (
    (ValidationError, 400),
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotFoundError, 404),
    (ClockActionRejected, 409),
)


def error_response(message: str, status: int):
    return jsonify({"success": False, "message": message}), status


def json_endpoint(view):
    """Turn domain errors into JSON responses; log anything unexpected."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except DomainError as e:
            for error_type, status in _STATUS_BY_ERROR:
                if isinstance(e, error_type):
                    return error_response(str(e), status)
            return error_response(str(e), 400)
        except Exception:
            logger.exception("Unhandled error in %s", view.__name__)
            return error_response("Internal error, please try again", 500)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not session.get(ADMIN_SESSION_KEY):
            return error_response("Admin access required", 403)
        return view(*args, **kwargs)

    return wrapper


def parse_date_arg(value, field_name: str):
    if not value:
        raise ValidationError(f"{field_name} is required")
    try:
        return parse_iso_date(str(value))
    except ValueError:
        raise ValidationError(f"{field_name} must be YYYY-MM-DD") from None
