"""Record identifiers and numeric coercion for collection payloads."""

import math
import uuid
from typing import Any


def generate_id(prefix: str) -> str:
    """Return a new identifier of the form ``<prefix>_<uuid4>``.

    Uniqueness comes from the random UUID; existing records are not checked.
    """
    return f"{prefix}_{uuid.uuid4()}"


def ensure_number(value: Any, fallback: float = 0) -> float:
    """Coerce *value* to a finite number, or return *fallback*.

    Accepts numbers and numeric strings. Blank strings count as ``0`` and
    booleans as ``1``/``0``. ``None`` is how a missing payload field shows
    up, so it yields *fallback*, as do non-numeric strings, ``nan``,
    infinities, and ints too large for a float.
    """
    if value is None:
        return fallback
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return 0
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return fallback
    if not math.isfinite(number):
        return fallback
    if number.is_integer() and not isinstance(value, float):
        return int(number)
    return number
