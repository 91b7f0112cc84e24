from flask import Blueprint, render_template, request, redirect, url_for, abort
from models import FEEDBACK, FEEDBACK_CATEGORIES
from controllers import ListController
from services import FlashNotifier, admin_required
from .common import get_backend_client, list_arguments

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')


def admin_listing():
    return ListController(FEEDBACK, get_backend_client(), FlashNotifier(), admin=True)


@admin_bp.route('/feedback')
@admin_required
def feedback_list():
    """All customers' feedback, with author identity"""
    listing = admin_listing()
    listing.open(**list_arguments(FEEDBACK))
    return render_template('admin_feedback.html', listing=listing, categories=FEEDBACK_CATEGORIES)


@admin_bp.route('/feedback/<record_id>')
@admin_required
def feedback_detail(record_id):
    listing = admin_listing()
    listing.open(**list_arguments(FEEDBACK))
    record = listing.find(record_id)
    if record is None:
        abort(404)
    return render_template('feedback_detail.html', record=record, listing=listing,
                           author=listing.author_label(record),
                           back_url=url_for('admin.feedback_list', **listing.query_args))


@admin_bp.route('/feedback/<record_id>/delete', methods=['GET', 'POST'])
@admin_required
def feedback_delete(record_id):
    """Administrator delete of any customer's feedback"""
    listing = admin_listing()

    if request.method == 'POST':
        listing.restore(**list_arguments(FEEDBACK))
        if listing.delete(record_id, confirm=lambda: request.form.get('confirm') == 'yes'):
            print(f"[Admin] Feedback {record_id} deleted by administrator")
        return redirect(url_for('admin.feedback_list', **listing.query_args))

    listing.open(**list_arguments(FEEDBACK))
    record = listing.find(record_id)
    if record is None:
        abort(404)
    return render_template('feedback_confirm_delete.html', record=record,
                           author=listing.author_label(record),
                           action_url=url_for('admin.feedback_delete', record_id=record_id, **listing.query_args),
                           cancel_url=url_for('admin.feedback_list', **listing.query_args))
