import os
import re
import uuid
from collections import namedtuple


STANDING_LABELS = ["DISTRUSTED", "WARY", "NEUTRAL", "RESPECTED", "TRUSTED"]
VALID_COLOR_SCHEMES = ["grey", "orange", "green", "blue"]
DATE_PATTERN = re.compile(r"^\d{2}/\d{2}/\d{4}$")
SAFE_EMBLEM_PATTERN = re.compile(r"^[A-Za-z0-9_-]+\.svg$")
RESERVED_NAME_PATTERN = re.compile(r"^(con|prn|aux|nul|com[1-9]|lpt[1-9])$", re.IGNORECASE)

DAYS_IN_MONTH = [31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31]


ValidationResult = namedtuple("ValidationResult", ["valid", "message", "value"])
ValidationResult.__new__.__defaults__ = (None, None)


def get_standing_label(standing):
    """Faction standing (0-4) as a label"""
    if isinstance(standing, int) and 0 <= standing < len(STANDING_LABELS):
        return STANDING_LABELS[standing]
    return "UNKNOWN"


def generate_id():
    return str(uuid.uuid4())


def sanitize_emblem_base_name(original_name):
    """Turn an uploaded file name into a safe emblem base name.

    Returns None when nothing usable is left.
    """
    normalized = str(original_name or "").replace("\\", "/")
    base = os.path.splitext(normalized.rsplit("/", 1)[-1])[0]

    safe = re.sub(r"[^a-z0-9_-]", "_", base, flags=re.IGNORECASE)
    safe = re.sub(r"_+", "_", safe).strip("_")

    if not safe:
        return None

    # Windows device names
    if RESERVED_NAME_PATTERN.match(safe):
        return "_" + safe
    return safe


def is_safe_emblem_filename(filename):
    if not isinstance(filename, str):
        return False
    if filename != os.path.basename(filename):
        return False
    return bool(SAFE_EMBLEM_PATTERN.match(filename))


def format_emblem_title(filename):
    return filename.replace(".svg", "", 1).replace("_", " ")


def is_leap_year(year):
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def validate_date(date_str):
    """Validate a DD/MM/YYYY date; empty is allowed."""
    if not date_str:
        return ValidationResult(True)

    if not DATE_PATTERN.match(date_str):
        return ValidationResult(False, "Invalid date format. Use DD/MM/YYYY")

    day, month, year = (int(part) for part in date_str.split("/"))

    if month < 1 or month > 12 or day < 1:
        return ValidationResult(
            False, "Invalid date values. Day must be at least 1, month must be 1-12"
        )

    max_day = DAYS_IN_MONTH[month - 1]
    if month == 2 and is_leap_year(year):
        max_day = 29

    if day > max_day:
        return ValidationResult(
            False,
            "Invalid day for month {}. Maximum is {} days.".format(month, max_day)
        )

    return ValidationResult(True)


def is_valid_color_scheme(color_scheme):
    return color_scheme in VALID_COLOR_SCHEMES


def validate_emblem(emblem, upload_dir):
    """An emblem must be a safe .svg name that exists in ``upload_dir``."""
    if not emblem:
        return ValidationResult(True)

    if not is_safe_emblem_filename(emblem):
        return ValidationResult(False, "Invalid emblem filename")

    if not os.path.exists(os.path.join(upload_dir, emblem)):
        return ValidationResult(False, "Invalid emblem selection")

    return ValidationResult(True)


def validate_required_string(value, field_name, max_length=None):
    trimmed = (value if isinstance(value, str) else "").strip()

    if not trimmed:
        return ValidationResult(False, "{} cannot be empty".format(field_name))

    if max_length and len(trimmed) > max_length:
        return ValidationResult(
            False, "{} must be {} characters or less".format(field_name, max_length)
        )

    return ValidationResult(True, value=trimmed)


def validate_integer(value, field_name, minimum=None, maximum=None):
    try:
        parsed = int(value)
    except (TypeError, ValueError):
        return ValidationResult(False, "{} must be a valid number".format(field_name))

    if minimum is not None and parsed < minimum:
        return ValidationResult(
            False, "{} must be at least {}".format(field_name, minimum)
        )

    if maximum is not None and parsed > maximum:
        return ValidationResult(
            False, "{} must be at most {}".format(field_name, maximum)
        )

    return ValidationResult(True, value=parsed)
