from datetime import date, datetime


def today():
    return date.today()


def as_day(value):
    """Truncate a datetime to its calendar day; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value
