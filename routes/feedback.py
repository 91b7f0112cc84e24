from flask import Blueprint, render_template, request, redirect, url_for, flash, abort, jsonify
from models import FEEDBACK, FEEDBACK_CATEGORIES, RATING_TEXT
from controllers import FormController, ListController
from services import FlashNotifier, login_required
from utils import t
from utils.content import page_content
from utils.form_tokens import issue_form_token, consume_form_token
from .common import get_backend_client, apply_form, validation_response, list_arguments

feedback_bp = Blueprint('feedback', __name__, url_prefix='/feedback')


def render_feedback_page(form, listing, status=200):
    return render_template('feedback.html',
                           form=form,
                           listing=listing,
                           form_token=issue_form_token('feedback'),
                           categories=FEEDBACK_CATEGORIES,
                           rating_text=RATING_TEXT,
                           content=page_content('feedback_page')), status


def load_own_record(listing, record_id):
    """Find one of the user's records on the page named in the query string"""
    listing.open(**list_arguments(FEEDBACK))
    record = listing.find(record_id)
    if record is None:
        abort(404)
    return record


@feedback_bp.route('', methods=['GET', 'POST'])
@login_required
def index():
    """Feedback form plus the user's own feedback"""
    client = get_backend_client()
    notifier = FlashNotifier()
    form = FormController(FEEDBACK, client, notifier)
    status = 200

    if request.method == 'POST':
        if not consume_form_token(request.form.get('form_token'), 'feedback'):
            flash(t('error_duplicate_submission'), 'error')
            return redirect(url_for('feedback.index'))

        apply_form(form, request.form)
        result = form.submit()
        if result is not None and result.ok:
            print("[Feedback] New feedback submitted")
            return redirect(url_for('feedback.index'))
        status = 400 if result is None else 502

    listing = ListController(FEEDBACK, client, notifier)
    listing.open(**list_arguments(FEEDBACK))
    return render_feedback_page(form, listing, status)


@feedback_bp.route('/validate', methods=['POST'])
@login_required
def validate():
    """Live validation while the customer types"""
    form = FormController(FEEDBACK, client=None, notifier=None)
    return jsonify(validation_response(form, request.get_json(silent=True) or {}))


@feedback_bp.route('/<record_id>')
@login_required
def detail(record_id):
    listing = ListController(FEEDBACK, get_backend_client(), FlashNotifier())
    record = load_own_record(listing, record_id)
    return render_template('feedback_detail.html', record=record, listing=listing,
                           author=listing.author_label(record),
                           back_url=url_for('feedback.index', **listing.query_args))


@feedback_bp.route('/<record_id>/edit', methods=['GET', 'POST'])
@login_required
def edit(record_id):
    """Edit one of the user's own feedback entries"""
    listing = ListController(FEEDBACK, get_backend_client(), FlashNotifier())
    record = load_own_record(listing, record_id)
    form = listing.edit(record)
    status = 200

    if request.method == 'POST':
        apply_form(form, request.form)
        result = form.submit()
        if result is not None and result.ok:
            print(f"[Feedback] Feedback {record_id} updated")
            return redirect(url_for('feedback.index', **listing.query_args))
        status = 400 if result is None else 502

    return render_template('feedback_edit.html',
                           form=form,
                           record=record,
                           back_url=url_for('feedback.index', **listing.query_args),
                           categories=FEEDBACK_CATEGORIES,
                           rating_text=RATING_TEXT), status


@feedback_bp.route('/<record_id>/delete', methods=['GET', 'POST'])
@login_required
def delete(record_id):
    """Ask for confirmation, then delete one of the user's own entries"""
    listing = ListController(FEEDBACK, get_backend_client(), FlashNotifier())

    if request.method == 'POST':
        listing.restore(**list_arguments(FEEDBACK))
        confirmed = listing.delete(record_id, confirm=lambda: request.form.get('confirm') == 'yes')
        if confirmed:
            print(f"[Feedback] Feedback {record_id} deleted")
        return redirect(url_for('feedback.index', **listing.query_args))

    record = load_own_record(listing, record_id)
    return render_template('feedback_confirm_delete.html', record=record,
                           action_url=url_for('feedback.delete', record_id=record_id, **listing.query_args),
                           cancel_url=url_for('feedback.index', **listing.query_args))
