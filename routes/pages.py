from flask import Blueprint, render_template, request, redirect, url_for, flash
from utils import t, is_valid_email
from utils.content import page_content

pages_bp = Blueprint('pages', __name__)


@pages_bp.route('/')
def index():
    return render_template('home.html', content=page_content('home'))


@pages_bp.route('/about')
def about():
    return render_template('about.html', content=page_content('about'))


@pages_bp.route('/newsletter', methods=['POST'])
def newsletter():
    """Footer newsletter sign-up"""
    email = request.form.get('email', '').strip()
    next_url = request.form.get('next') or url_for('pages.index')
    if not next_url.startswith('/') or next_url.startswith('//'):
        next_url = url_for('pages.index')

    if not is_valid_email(email):
        flash(t('newsletter_invalid_email'), 'error')
        return redirect(next_url)

    # No mailing-list provider yet; subscriptions are only logged
    print(f"[Newsletter] Subscribed {email}")
    flash(t('newsletter_subscribed'), 'success')
    return redirect(next_url)
