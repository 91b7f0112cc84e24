"""Tests for FormController draft, validation and submission."""

import pytest

from controllers import FormController
from models import FEEDBACK, SUPPORT_TICKET, FeedbackRecord
from services.api_client import ApiResult

from conftest import feedback_item

SCENARIO = {
    "subject": "Great service",
    "category": "service",
    "rating": 5,
    "message": "Very satisfied with the repair",
}


@pytest.fixture
def form(fake_backend, notifier):
    return FormController(FEEDBACK, fake_backend, notifier)


def fill(form, values):
    for name, value in values.items():
        form.set_field(name, value)
        form.mark_touched(name)


class TestDraft:
    def test_starts_from_defaults(self, form):
        assert form.values == {"subject": "", "category": "", "rating": 5, "message": "", "isAnonymous": False}
        assert not form.is_valid
        assert not form.is_editing

    def test_starts_from_existing_record(self, fake_backend, notifier):
        record = FeedbackRecord.from_api(feedback_item("fb-1", anonymous=True))
        form = FormController(FEEDBACK, fake_backend, notifier, existing=record)
        assert form.is_editing
        assert form.values["subject"] == "Great service"
        assert form.values["isAnonymous"] is True
        assert form.is_valid

    def test_set_field_revalidates(self, form):
        form.set_field("subject", "Hey")
        assert form.errors["subject"] == "Subject must be at least 5 characters"
        form.set_field("subject", "Hey there")
        assert "subject" not in form.errors

    def test_is_valid_tracks_every_field(self, form):
        fill(form, SCENARIO)
        assert form.is_valid
        form.set_field("rating", 0)
        assert not form.is_valid

    def test_unknown_field(self, form):
        with pytest.raises(KeyError):
            form.set_field("email", "someone@example.com")
        with pytest.raises(KeyError):
            form.mark_touched("email")

    def test_only_touched_errors_are_visible(self, form):
        form.set_field("subject", "Hi")
        assert "subject" in form.errors
        assert form.visible_errors == {}
        form.mark_touched("subject")
        assert form.visible_errors == {"subject": "Subject must be at least 5 characters"}


class TestSubmit:
    def test_invalid_draft_makes_no_call(self, form, fake_backend, notifier):
        fill(form, dict(SCENARIO, message="Short"))
        assert form.submit() is None
        assert fake_backend.calls == []
        assert notifier.successes == [] and notifier.errors == []
        assert form.visible_errors["message"] == "Message must be at least 10 characters"

    def test_invalid_submit_touches_every_field(self, form):
        form.submit()
        assert form.touched == set(FEEDBACK.fields)
        assert set(form.visible_errors) == {"subject", "category", "message"}

    def test_create_sends_payload_and_resets(self, form, fake_backend, notifier):
        fill(form, SCENARIO)
        result = form.submit()

        assert result.ok
        assert fake_backend.calls_of("submit") == [
            ("submit", "feedback", dict(SCENARIO, isAnonymous=False), None),
        ]
        assert notifier.successes == ["feedback_submitted"]
        assert form.values == FEEDBACK.initial_values()
        assert form.touched == set()
        assert not form.submitting

    def test_update_keeps_edited_values(self, fake_backend, notifier):
        record = FeedbackRecord.from_api(feedback_item("fb-9"))
        form = FormController(FEEDBACK, fake_backend, notifier, existing=record)
        form.set_field("rating", 3)
        form.submit()

        assert fake_backend.calls_of("submit")[0][3] == "fb-9"
        assert notifier.successes == ["feedback_updated"]
        assert form.values["rating"] == 3
        assert form.values["subject"] == "Great service"

    def test_failure_keeps_draft(self, form, fake_backend, notifier):
        fake_backend.submit_result = ApiResult.failure("You have already reviewed this repair", status_code=409)
        fill(form, SCENARIO)
        result = form.submit()

        assert not result.ok
        assert notifier.errors == ["You have already reviewed this repair"]
        assert notifier.successes == []
        assert form.values["subject"] == "Great service"
        assert not form.submitting

    def test_submit_while_submitting_is_noop(self, notifier):
        nested = []

        class ReentrantClient:
            calls = 0

            def submit(self, kind, payload, record_id=None):
                ReentrantClient.calls += 1
                nested.append(form.submit())
                return ApiResult.success({"success": True})

        form = FormController(FEEDBACK, ReentrantClient(), notifier)
        fill(form, SCENARIO)
        form.submit()

        assert ReentrantClient.calls == 1
        assert nested == [None]

    def test_submitting_flag_cleared_when_client_raises(self, notifier):
        class BrokenClient:
            def submit(self, kind, payload, record_id=None):
                raise RuntimeError("boom")

        form = FormController(FEEDBACK, BrokenClient(), notifier)
        fill(form, SCENARIO)
        with pytest.raises(RuntimeError):
            form.submit()
        assert not form.submitting

    def test_on_success_receives_result(self, fake_backend, notifier):
        received = []
        form = FormController(FEEDBACK, fake_backend, notifier, on_success=received.append)
        fill(form, SCENARIO)
        result = form.submit()
        assert received == [result]

    def test_on_success_not_called_on_failure(self, fake_backend, notifier):
        received = []
        fake_backend.submit_result = ApiResult.failure("error_submit_feedback")
        form = FormController(FEEDBACK, fake_backend, notifier, on_success=received.append)
        fill(form, SCENARIO)
        form.submit()
        assert received == []


class TestSupportTicketForm:
    def test_ticket_payload_carries_default_priority(self, fake_backend, notifier):
        form = FormController(SUPPORT_TICKET, fake_backend, notifier)
        fill(form, {
            "subject": "Laptop will not boot",
            "category": "technical",
            "description": "Black screen right after the manufacturer logo appears.",
        })
        form.submit()

        _, kind_name, payload, record_id = fake_backend.calls_of("submit")[0]
        assert kind_name == "support_ticket"
        assert payload["priority"] == "medium"
        assert set(payload) == {"subject", "category", "priority", "description"}
        assert record_id is None
        assert notifier.successes == ["ticket_created"]

    def test_short_description_blocks_submission(self, fake_backend, notifier):
        form = FormController(SUPPORT_TICKET, fake_backend, notifier)
        fill(form, {"subject": "Laptop will not boot", "category": "technical", "description": "Broken"})
        assert form.submit() is None
        assert fake_backend.calls == []
