# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the core models:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    DemoReport,
    DemoStep,
    MailMessage,
    SamplePayload,
    StepOutcome,
    StepStatus,
    UserStub,
)


class TestUserStub:

    def test_valid(self):
        assert UserStub(id="12345").id == "12345"

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            UserStub(id="")


class TestMailMessage:

    def test_valid_message(self):
        message = MailMessage(
            recipient="example@example.com",
            subject="Test Email",
            body="This is a test email.",
        )

        assert message.recipient == "example@example.com"

    def test_defaults(self):
        message = MailMessage(recipient="a@b.com")

        assert message.subject == ""
        assert message.body == ""

    @pytest.mark.parametrize("recipient", ["", "not-an-address", "two@@signs.com"])
    def test_bad_recipient_rejected(self, recipient):
        with pytest.raises(ValidationError):
            MailMessage(recipient=recipient)


class TestSamplePayload:

    def test_nested_address(self):
        payload = SamplePayload.model_validate({"name": "John", "address": {"city": "New York"}})

        assert payload.address.city == "New York"

    def test_missing_city_rejected(self):
        with pytest.raises(ValidationError):
            SamplePayload.model_validate({"name": "John", "address": {}})


class TestDemoReport:

    def test_step_order_values(self):
        assert [s.value for s in DemoStep] == [
            "hash_password", "issue_token", "send_email", "fetch_api", "deep_copy",
        ]

    def test_failed_steps_and_lookup(self):
        report = DemoReport(outcomes=[
            StepOutcome(step=DemoStep.HASH_PASSWORD, status=StepStatus.SUCCEEDED),
            StepOutcome(step=DemoStep.SEND_EMAIL, status=StepStatus.FAILED, error_code="MAIL_FAILED"),
        ])

        assert report.failed_steps == [DemoStep.SEND_EMAIL]
        assert report.outcome(DemoStep.HASH_PASSWORD).ok
        assert report.outcome(DemoStep.FETCH_API) is None

    def test_serializes(self):
        report = DemoReport(outcomes=[
            StepOutcome(step=DemoStep.DEEP_COPY, status=StepStatus.SUCCEEDED),
        ])

        assert report.model_dump(mode="json") == {
            "outcomes": [
                {"step": "deep_copy", "status": "succeeded", "detail": None, "error_code": None},
            ]
        }
