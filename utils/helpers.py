import re
from datetime import datetime

EMAIL_PATTERN = re.compile(r'^[^\s@]+@[^\s@]+\.[^\s@]+$')


def parse_timestamp(value):
    """Parse a backend ISO-8601 timestamp, tolerating the trailing 'Z'"""
    if not value:
        return None
    if isinstance(value, datetime):
        return value
    try:
        return datetime.fromisoformat(str(value).replace('Z', '+00:00'))
    except ValueError:
        return None


def rating_stars(rating):
    """Render a 1-5 rating as filled and empty stars"""
    try:
        filled = max(0, min(5, int(rating)))
    except (TypeError, ValueError):
        filled = 0
    return '★' * filled + '☆' * (5 - filled)


def is_valid_email(email):
    return bool(email) and EMAIL_PATTERN.match(email) is not None


def format_date(value, fmt='%d %b %Y'):
    if not value:
        return ''
    return value.strftime(fmt)
