"""
One-time tokens for create forms.

Creating a record is not idempotent, so every rendered create form carries a
signed token. A token is accepted once per session; a replayed or expired
token is rejected before the backend is ever called.
"""
import uuid
from flask import current_app, session
from itsdangerous import URLSafeTimedSerializer, BadSignature, SignatureExpired

SALT = 'form-submission'
USED_TOKENS_KEY = 'used_form_tokens'
MAX_REMEMBERED = 50


def get_serializer():
    """Get the token serializer"""
    return URLSafeTimedSerializer(current_app.config['SECRET_KEY'])


def issue_form_token(purpose):
    """Generate a token bound to one form (e.g. 'feedback')"""
    return get_serializer().dumps({'purpose': purpose, 'nonce': uuid.uuid4().hex}, salt=SALT)


def consume_form_token(token, purpose):
    """Accept a token once. Returns False for bad, expired or replayed tokens."""
    if not token:
        return False

    max_age = current_app.config.get('FORM_TOKEN_MAX_AGE', 3600)
    try:
        data = get_serializer().loads(token, salt=SALT, max_age=max_age)
    except SignatureExpired:
        print(f"[Forms] Expired {purpose} form token")
        return False
    except BadSignature:
        print(f"[Forms] Invalid {purpose} form token")
        return False

    if data.get('purpose') != purpose:
        return False

    used = session.get(USED_TOKENS_KEY, [])
    if data['nonce'] in used:
        print(f"[Forms] Replayed {purpose} form token rejected")
        return False

    session[USED_TOKENS_KEY] = (used + [data['nonce']])[-MAX_REMEMBERED:]
    return True
