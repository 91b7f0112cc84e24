from .helpers import parse_timestamp, rating_stars, is_valid_email, format_date
from .i18n import get_language, t

__all__ = ['parse_timestamp', 'rating_stars', 'is_valid_email', 'format_date', 'get_language', 't']
