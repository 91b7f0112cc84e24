from flask import flash
from utils.i18n import t


class FlashNotifier:
    """Surface controller signals as flash messages on the next page.

    Messages are translation keys or backend text; t() returns unknown keys
    unchanged, so backend messages pass through as-is.
    """

    def success(self, message):
        flash(t(message), 'success')

    def error(self, message):
        flash(t(message), 'error')
