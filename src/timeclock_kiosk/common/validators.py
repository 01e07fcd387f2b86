from __future__ import annotations

import math
from typing import Any, Optional

from ..core.constants import RATE_DECIMALS, RATE_MAX
from ..core.exceptions import ValidationError


def require_non_empty(value: Any, field_name: str, *, max_length: Optional[int] = None) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    text = str(value).strip()
    if max_length is not None and len(text) > max_length:
        raise ValidationError(f"{field_name} must be at most {max_length} characters")
    return text


def parse_rate(value: Any, field_name: str = "Rate") -> float:
    """Parse an hourly rate from form/JSON/spreadsheet input.

    Empty, non-numeric, non-finite and negative values are rejected, as are
    values the employees table cannot store exactly (too large, or more than
    two decimal places).
    """
    if value is None or isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    if isinstance(value, str):
        value = value.strip().replace(",", ".")
        if not value:
            raise ValidationError(f"{field_name} is required")
    try:
        rate = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number") from None
    if not math.isfinite(rate):
        raise ValidationError(f"{field_name} must be a number")
    if rate < 0:
        raise ValidationError(f"{field_name} must not be negative")
    if rate >= RATE_MAX:
        raise ValidationError(f"{field_name} is too large")
    if round(rate, RATE_DECIMALS) != rate:
        raise ValidationError(f"{field_name} must have at most {RATE_DECIMALS} decimal places")
    return rate


def require_photo(value: Any) -> str:
    """Photos are opaque data URIs captured by the kiosk webcam."""
    photo = require_non_empty(value, "Photo")
    if not photo.startswith("data:image/"):
        raise ValidationError("Photo must be an image data URI")
    return photo
