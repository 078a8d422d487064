# =============================================================================
# core/models/mail.py - Mail Message Schema
# =============================================================================
# A single transactional email. Built per send and discarded afterwards.
# =============================================================================

from pydantic import BaseModel, Field


class MailMessage(BaseModel):
    """
    One plain-text email to one recipient.

    The sender is not part of the message: the Mailer always sends from
    the relay account it logged in with.

    Example:
        {
            "recipient": "example@example.com",
            "subject": "Test Email",
            "body": "This is a test email."
        }
    """

    recipient: str = Field(
        ...,
        min_length=3,
        pattern=r"^[^@\s]+@[^@\s]+$",
        description="Recipient address"
    )

    subject: str = Field(
        default="",
        max_length=998,
        description="Subject line"
    )

    body: str = Field(
        default="",
        description="Plain-text body"
    )
