from datetime import UTC, datetime


def utc_now() -> datetime:
    """Naive UTC timestamp, the form DateTime columns store and return"""
    return datetime.now(UTC).replace(tzinfo=None)


def enum_value(value):
    """Plain value of an enum member; other values pass through"""
    return getattr(value, "value", value)
