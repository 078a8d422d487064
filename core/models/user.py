# =============================================================================
# core/models/user.py - User Stub
# =============================================================================
# The only user shape the server knows about. It is never stored; the demo
# builds one to have a subject id for token issuance.
# =============================================================================

from pydantic import BaseModel, Field


class UserStub(BaseModel):
    """
    Minimal user reference used as a token subject.

    Example:
        {"id": "12345"}
    """

    id: str = Field(
        ...,
        min_length=1,
        description="Subject id written into issued tokens"
    )
