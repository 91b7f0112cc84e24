#!/usr/bin/env python3
"""
IMAX Customer Portal
A Flask front end for customer feedback and support tickets, backed by the shop's REST API.
"""

import os
from dotenv import load_dotenv
from flask import Flask, request
from flask_mail import Mail

# Import our modules
from utils import t, rating_stars, format_date
from utils.banner import print_startup_banner
from utils.content import page_content
from services import current_user
from routes import register_blueprints
from routes.common import default_client_factory

# Load environment variables from .env file
load_dotenv()


def create_app(config=None, client_factory=None):
    """Application factory pattern

    Args:
        config: Optional mapping applied over the environment configuration
        client_factory: Optional callable(token) -> backend client, used by tests
    """
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    app.config['BACKEND_URL'] = os.environ.get('BACKEND_URL', 'http://localhost:5000/api')
    app.config['BACKEND_TIMEOUT'] = float(os.environ.get('BACKEND_TIMEOUT', '15'))
    app.config['LOGIN_URL'] = os.environ.get('LOGIN_URL', '/login')
    app.config['BASE_URL'] = os.environ.get('BASE_URL', 'http://localhost:8000')
    app.config['FORM_TOKEN_MAX_AGE'] = int(os.environ.get('FORM_TOKEN_MAX_AGE', '3600'))
    app.config['DEFAULT_LANGUAGE'] = os.environ.get('DEFAULT_LANGUAGE', 'en')

    # Mail (confirmation emails are simulated when MAIL_SERVER is empty)
    app.config['MAIL_SERVER'] = os.environ.get('MAIL_SERVER', '')
    app.config['MAIL_PORT'] = int(os.environ.get('MAIL_PORT', '587'))
    app.config['MAIL_USE_TLS'] = os.environ.get('MAIL_USE_TLS', 'true').lower() == 'true'
    app.config['MAIL_USERNAME'] = os.environ.get('MAIL_USERNAME')
    app.config['MAIL_PASSWORD'] = os.environ.get('MAIL_PASSWORD')
    app.config['MAIL_DEFAULT_SENDER'] = os.environ.get('MAIL_DEFAULT_SENDER', 'support@imax.lk')

    if config:
        app.config.update(config)

    # Print startup banner (will show in both dev and production)
    if not app.testing:
        print_startup_banner(app.config)

    # Initialize extensions
    Mail(app)
    app.extensions['backend_client_factory'] = client_factory or default_client_factory

    # Register blueprints
    register_blueprints(app)

    app.jinja_env.filters['stars'] = rating_stars
    app.jinja_env.filters['date'] = format_date

    # Context processor for templates
    @app.context_processor
    def inject_template_vars():
        """Make common variables available in all templates"""
        return {
            't': t,
            'footer': page_content('footer'),
            'user': current_user(),
            'current_path': request.path,
        }

    return app


# Create the application
app = create_app()

if __name__ == '__main__':
    app.run(debug=True, host='0.0.0.0', port=int(os.environ.get('PORT', '8000')))
