from functools import wraps
from flask import session, redirect, request, abort, current_app


def login_required(f):
    """Decorator to require a signed-in customer.

    Signing in happens elsewhere; the portal only checks that the session
    carries a backend token and otherwise hands over to the login page.
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        if 'auth_token' not in session:
            login_url = current_app.config.get('LOGIN_URL', '/login')
            return redirect(f"{login_url}?next={request.path}")
        return f(*args, **kwargs)
    return decorated_function


def admin_required(f):
    """Decorator to require an administrator session"""
    @wraps(f)
    @login_required
    def decorated_function(*args, **kwargs):
        if session.get('role') != 'admin':
            abort(403)
        return f(*args, **kwargs)
    return decorated_function


def current_user():
    """Name and email of the signed-in customer, as stored at login"""
    return {
        'name': session.get('user_name'),
        'email': session.get('user_email'),
    }
