from .pages import pages_bp
from .feedback import feedback_bp
from .support import support_bp
from .admin import admin_bp


def register_blueprints(app):
    """Register all blueprints with the Flask app"""
    app.register_blueprint(pages_bp)
    app.register_blueprint(feedback_bp)
    app.register_blueprint(support_bp)
    app.register_blueprint(admin_bp)
