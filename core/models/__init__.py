# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas for data validation:
# - user.py: UserStub used as a token subject
# - mail.py: MailMessage for the Mailer
# - demo.py: Sample payload and the startup demo report
#
# None of these are persisted.
# =============================================================================

from .demo import (
    Address,
    DemoReport,
    DemoStep,
    SamplePayload,
    StepOutcome,
    StepStatus,
)
from .mail import MailMessage
from .user import UserStub

__all__ = [
    "Address",
    "DemoReport",
    "DemoStep",
    "SamplePayload",
    "StepOutcome",
    "StepStatus",
    "MailMessage",
    "UserStub",
]
