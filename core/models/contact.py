# =============================================================================
# core/models/contact.py - Contact Form Schema
# =============================================================================
# Validates enquiries submitted through the contact page form.
# =============================================================================

from pydantic import BaseModel, Field, field_validator


class ContactMessage(BaseModel):
    """
    A visitor enquiry.

    Example:
        {
            "name": "Asha Patel",
            "email": "asha@example.com",
            "phone": "+91 98765 43210",
            "subject": "Quote for bathroom fittings",
            "message": "Please share prices for the Jaquar range."
        }
    """

    name: str = Field(..., min_length=1, max_length=100)

    email: str = Field(
        ...,
        max_length=254,
        pattern=r"^[^@\s]+@[^@\s]+\.[^@\s]+$",
        description="Reply address"
    )

    phone: str | None = Field(
        default=None,
        max_length=20,
        pattern=r"^[0-9+()\-\s]*$",
    )

    subject: str | None = Field(default=None, max_length=200)

    message: str = Field(..., min_length=1, max_length=5000)

    @field_validator("name", "message", mode="before")
    @classmethod
    def strip_required(cls, value):
        return value.strip() if isinstance(value, str) else value

    @field_validator("phone", "subject", mode="before")
    @classmethod
    def blank_to_none(cls, value):
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value
