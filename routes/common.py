from flask import current_app, session, request
from services import BackendClient


def default_client_factory(token):
    """Build a backend client for the current request's session token"""
    return BackendClient(current_app.config['BACKEND_URL'], token=token,
                         timeout=current_app.config.get('BACKEND_TIMEOUT', 15))


def get_backend_client():
    factory = current_app.extensions.get('backend_client_factory', default_client_factory)
    return factory(session.get('auth_token'))


def apply_form(form, source, touch=True):
    """Copy submitted values into a FormController, marking them touched"""
    values = form.kind.coerce(source)
    form.set_fields(values)
    if touch:
        for name in values:
            form.mark_touched(name)
    return values


def validation_response(form, data):
    """Live validation for a form: apply the draft and report visible errors"""
    apply_form(form, data.get('values') or {}, touch=False)
    for name in data.get('touched') or []:
        if name in form.values:
            form.mark_touched(name)
    return {'valid': form.is_valid, 'errors': form.visible_errors}


def list_arguments(kind):
    """Page, search text and filters for a list, from the query string"""
    filters = {name: request.args.get(name, '') for name in kind.filters}
    return {
        'page': request.args.get('page', 1, type=int),
        'search': request.args.get('q', ''),
        **filters,
    }
