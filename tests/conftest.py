"""Pytest configuration and shared fixtures."""

from unittest.mock import Mock

import pytest

from app import create_app
from services.api_client import ApiResult


def feedback_item(record_id, subject="Great service", message="Very satisfied with the repair",
                  category="service", rating=5, anonymous=False, author="Nimal Perera"):
    """Feedback JSON the way the backend returns it."""
    return {
        "_id": record_id,
        "subject": subject,
        "category": category,
        "rating": rating,
        "message": message,
        "isAnonymous": anonymous,
        "user": {"_id": f"user-{record_id}", "name": author, "email": "nimal@example.com"} if author else None,
        "createdAt": "2025-03-14T09:30:00.000Z",
    }


def ticket_item(record_id, subject="Laptop will not boot", status="open"):
    return {
        "_id": record_id,
        "subject": subject,
        "category": "technical",
        "priority": "high",
        "description": "The laptop shows a black screen right after the logo appears.",
        "status": status,
        "createdAt": "2025-03-15T11:00:00Z",
    }


class FakeBackendClient:
    """Stands in for BackendClient and records every call."""

    def __init__(self):
        self.calls = []
        self.submit_result = ApiResult.success({"success": True})
        self.delete_result = ApiResult.success({"success": True})
        self.list_results = {
            "feedback": ApiResult.success({"success": True, "feedback": [], "totalPages": 1}),
            "support_ticket": ApiResult.success({"success": True, "tickets": [], "totalPages": 1}),
        }

    def submit(self, kind, payload, record_id=None):
        self.calls.append(("submit", kind.name, dict(payload), record_id))
        return self.submit_result

    def list_records(self, kind, admin=False, page=1, **filters):
        self.calls.append(("list", kind.name, admin, page, filters))
        return self.list_results[kind.name]

    def delete_record(self, kind, record_id, admin=False):
        self.calls.append(("delete", kind.name, record_id, admin))
        return self.delete_result

    def calls_of(self, operation):
        return [call for call in self.calls if call[0] == operation]


class RecordingNotifier:
    def __init__(self):
        self.successes = []
        self.errors = []

    def success(self, message):
        self.successes.append(message)

    def error(self, message):
        self.errors.append(message)


@pytest.fixture
def fake_backend():
    return FakeBackendClient()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def app_config():
    return {
        "TESTING": True,
        "SECRET_KEY": "test-secret",
        "BACKEND_URL": "http://backend.test/api",
        "MAIL_SERVER": "",
        "LOGIN_URL": "/login",
    }


@pytest.fixture
def app(app_config, fake_backend):
    """Portal app wired to the fake backend."""
    return create_app(app_config, client_factory=lambda token: fake_backend)


@pytest.fixture
def client(app):
    """Test client with a signed-in customer."""
    test_client = app.test_client()
    with test_client.session_transaction() as sess:
        sess["auth_token"] = "customer-token"
        sess["user_name"] = "Nimal Perera"
        sess["user_email"] = "nimal@example.com"
    return test_client


@pytest.fixture
def admin_client(app):
    test_client = app.test_client()
    with test_client.session_transaction() as sess:
        sess["auth_token"] = "admin-token"
        sess["role"] = "admin"
    return test_client


@pytest.fixture
def form_token(app):
    """Issue a fresh one-time form token for a purpose."""
    from utils.form_tokens import issue_form_token

    def issue(purpose):
        with app.test_request_context():
            return issue_form_token(purpose)

    return issue


def make_response(status=200, body=None, json_error=False):
    """A requests.Response stand-in."""
    response = Mock()
    response.status_code = status
    response.ok = 200 <= status < 400
    if json_error:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = body
    response.text = "" if body is None else str(body)
    return response
