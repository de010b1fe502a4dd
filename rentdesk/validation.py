"""Request payload parsing.

Each entity has an explicit field map (name -> coercer). Only fields named in
the map are ever read from a payload or written onto a model, so an update can
never touch ids, ownership or timestamps.
"""
import re
from datetime import date, datetime

from .errors import ValidationError
from .models.lease import LEASE_STATUSES
from .models.maintenance import MAINTENANCE_PRIORITIES, MAINTENANCE_STATUSES
from .models.property import PROPERTY_STATUSES, PROPERTY_TYPES
from .models.tenant import PAYMENT_METHODS, TENANT_STATUSES
from .utils import to_decimal

PHONE_RE = re.compile(r"^\+?[1-9]\d{1,14}$")
EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
ID_NUMBER_RE = re.compile(r"^\d{16}$")
PASSWORD_MIN_LENGTH = 6

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


# --- coercers ----------------------------------------------------------------
def text(max_length=None):
    def coerce(value):
        if not isinstance(value, str):
            raise ValueError("must be a string")
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        if max_length and len(value) > max_length:
            raise ValueError(f"must be at most {max_length} characters")
        return value
    return coerce


def one_of(choices):
    def coerce(value):
        if value not in choices:
            raise ValueError(f"must be one of {', '.join(choices)}")
        return value
    return coerce


def matches(pattern, message):
    def coerce(value):
        value = text()(value)
        if not pattern.match(value):
            raise ValueError(message)
        return value
    return coerce


def parse_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime(str(value), "%Y-%m-%d").date()
    except ValueError:
        raise ValueError("invalid date format, use YYYY-MM-DD")


def amount(value):
    if isinstance(value, bool):
        raise ValueError("must be a number")
    value = to_decimal(value)
    if not value.is_finite() or value < 0:
        raise ValueError("must be a non-negative amount")
    return value


def integer(minimum=None):
    def coerce(value):
        if isinstance(value, bool):
            raise ValueError("must be an integer")
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ValueError("must be an integer")
        if minimum is not None and number < minimum:
            raise ValueError(f"must be at least {minimum}")
        return number
    return coerce


def optional(coerce):
    """Allow null / empty-string, which clears the column."""
    def wrapper(value):
        if value is None or value == "":
            return None
        return coerce(value)
    return wrapper


# --- per-entity field maps ----------------------------------------------------
PROPERTY_FIELDS = {
    "name": text(200),
    "address": text(),
    "property_type": one_of(PROPERTY_TYPES),
    "status": one_of(PROPERTY_STATUSES),
    "monthly_rent": optional(amount),
}
PROPERTY_REQUIRED = ("name", "address", "property_type")

TENANT_FIELDS = {
    "name": text(100),
    "phone": matches(PHONE_RE, "must be a valid phone number"),
    "email": optional(matches(EMAIL_RE, "must be a valid email address")),
    "address": optional(text()),
    "id_number": optional(matches(ID_NUMBER_RE, "ID Number must be exactly 16 digits")),
    "status": one_of(TENANT_STATUSES),
    "payment": optional(amount),
    "payment_date": optional(parse_date),
    "payment_method": optional(one_of(PAYMENT_METHODS)),
    "months_paid": integer(minimum=0),
    "stay_start_date": optional(parse_date),
    "stay_end_date": optional(parse_date),
    "total_amount": optional(amount),
    "property_id": integer(minimum=1),
}
TENANT_REQUIRED = ("name", "phone", "property_id")

LEASE_FIELDS = {
    "property_id": integer(minimum=1),
    "tenant_id": integer(minimum=1),
    "start_date": parse_date,
    "end_date": parse_date,
    "monthly_rent": amount,
    "status": one_of(LEASE_STATUSES),
    "notes": optional(text()),
}
LEASE_REQUIRED = ("property_id", "tenant_id", "start_date", "end_date", "monthly_rent")

MAINTENANCE_FIELDS = {
    "title": text(200),
    "description": text(),
    "status": one_of(MAINTENANCE_STATUSES),
    "priority": one_of(MAINTENANCE_PRIORITIES),
    "property_id": integer(minimum=1),
    "cost": optional(amount),
    "scheduled_date": optional(parse_date),
    "completed_date": optional(parse_date),
    "notes": optional(text()),
}
MAINTENANCE_REQUIRED = ("title", "description", "property_id")

OWNER_FIELDS = {
    "name": text(100),
    "phone": matches(PHONE_RE, "must be a valid phone number"),
    "password": text(),
}
OWNER_REQUIRED = ("name", "phone", "password")


def parse_payload(data, fields, required=()):
    """Return the whitelisted, coerced subset of ``data``.

    Unknown keys are dropped. Raises ValidationError on the first missing
    required field or bad value.
    """
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")

    for name in required:
        if data.get(name) in (None, ""):
            raise ValidationError(f"{name} is required")

    patch = {}
    for name, coerce in fields.items():
        if name not in data:
            continue
        try:
            patch[name] = coerce(data[name])
        except (TypeError, ValueError) as e:
            raise ValidationError(f"{name} {e}")
    return patch


def apply_patch(obj, patch):
    for field, value in patch.items():
        setattr(obj, field, value)
    return obj


def parse_pagination(args, sortable, default_sort="created_at"):
    """limit/offset/sort from a query-string mapping.

    Returns (limit, offset, sort_by, descending). ``sort_by`` is always a key of
    ``sortable``.
    """
    try:
        limit = max(1, min(int(args.get("limit", DEFAULT_LIMIT)), MAX_LIMIT))
        offset = max(0, int(args.get("offset", 0)))
    except (TypeError, ValueError):
        raise ValidationError("limit and offset must be integers")

    sort_by = args.get("sort_by") or default_sort
    if sort_by not in sortable:
        raise ValidationError(f"sort_by must be one of {', '.join(sorted(sortable))}")

    sort_order = (args.get("sort_order") or "desc").lower()
    if sort_order not in ("asc", "desc"):
        raise ValidationError("sort_order must be asc or desc")
    return limit, offset, sort_by, sort_order == "desc"
