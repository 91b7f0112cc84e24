from flask import Blueprint, render_template, request, redirect, url_for, flash, jsonify
from models import SUPPORT_TICKET, TICKET_CATEGORIES, TICKET_PRIORITIES, TICKET_STATUSES
from controllers import FormController, ListController
from services import FlashNotifier, login_required, current_user, send_ticket_confirmation
from utils import t
from utils.content import page_content
from utils.form_tokens import issue_form_token, consume_form_token
from .common import get_backend_client, apply_form, validation_response, list_arguments

support_bp = Blueprint('support', __name__, url_prefix='/support')


def confirm_ticket_by_email(payload):
    """Success callback: email the customer what the backend created"""
    def on_success(result):
        created = result.data.get('ticket') or result.data.get('supportTicket') or {}
        ticket = SUPPORT_TICKET.record_from_api({**payload, **created})
        user = current_user()
        send_ticket_confirmation(ticket, user['name'], user['email'])
    return on_success


@support_bp.route('', methods=['GET', 'POST'])
@login_required
def index():
    """Support request form plus the user's own tickets"""
    client = get_backend_client()
    notifier = FlashNotifier()
    form = FormController(SUPPORT_TICKET, client, notifier)
    status = 200

    if request.method == 'POST':
        if not consume_form_token(request.form.get('form_token'), 'support_ticket'):
            flash(t('error_duplicate_submission'), 'error')
            return redirect(url_for('support.index'))

        apply_form(form, request.form)
        form.on_success = confirm_ticket_by_email(form.payload())
        result = form.submit()
        if result is not None and result.ok:
            print("[Support] New support ticket created")
            return redirect(url_for('support.index'))
        status = 400 if result is None else 502

    listing = ListController(SUPPORT_TICKET, client, notifier)
    listing.open(**list_arguments(SUPPORT_TICKET))
    return render_template('support.html',
                           form=form,
                           listing=listing,
                           form_token=issue_form_token('support_ticket'),
                           categories=TICKET_CATEGORIES,
                           priorities=TICKET_PRIORITIES,
                           statuses=TICKET_STATUSES,
                           content=page_content('support_page')), status


@support_bp.route('/validate', methods=['POST'])
@login_required
def validate():
    form = FormController(SUPPORT_TICKET, client=None, notifier=None)
    return jsonify(validation_response(form, request.get_json(silent=True) or {}))
