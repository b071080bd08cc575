"""Domain models (Pydantic v2).

Why Pydantic in the domain:
- Strict, self-documenting structures (Field) without coupling the core to
  HTTP or storage libraries.
- Every value here is request-scoped: created for one form submission and
  discarded after it, nothing is persisted.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

# Whitespace as browsers trim it from form input: Unicode space separators,
# tab, line breaks and BOM. Unlike str.isspace(), \x1c-\x1f and NEL are not spaces.
FORM_WHITESPACE = (
    "\t\n\v\f\r \u00a0\u1680"
    + "".join(chr(code) for code in range(0x2000, 0x200B))
    + "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def trim(value: str) -> str:
    return value.strip(FORM_WHITESPACE)


class ContactField(str, Enum):
    """Named fields of the contact form (the honeypot is not one of them)."""

    NAME = "name"
    EMAIL = "email"
    PHONE = "phone"
    SUBJECT = "subject"
    MESSAGE = "message"


class ContactSubject(str, Enum):
    INFO = "info"
    VISIT = "visit"
    PARTNERSHIP = "partnership"
    OTHER = "other"


class ConsentLevel(str, Enum):
    """Cookie preference stored in the browser once the visitor decides."""

    ALL = "all"
    NECESSARY = "necessary"


class SubmissionStatus(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class ValidationResult(BaseModel):
    """Outcome of checking one field against its whitelist rule."""

    model_config = ConfigDict(frozen=True)

    valid: bool = Field(..., description="True when the value matches the allowed shape.")
    error: str = Field(default="", description="Human readable reason; empty when valid.")

    @classmethod
    def ok(cls) -> "ValidationResult":
        return cls(valid=True, error="")

    @classmethod
    def fail(cls, reason: str) -> "ValidationResult":
        return cls(valid=False, error=reason)


class FormValidationResult(BaseModel):
    """Aggregate outcome for a whole contact-form submission.

    `errors` only carries entries for invalid or missing fields, plus the
    synthetic `_bot` key when the honeypot was filled in. `valid` is true if
    and only if `errors` is empty.
    """

    model_config = ConfigDict(frozen=True)

    valid: bool
    errors: dict[str, str] = Field(default_factory=dict)

    @model_validator(mode="after")
    def _check_consistency(self) -> "FormValidationResult":
        if self.valid != (not self.errors):
            raise ValueError("valid must be True exactly when errors is empty")
        return self

    @classmethod
    def from_errors(cls, errors: Mapping[str, str]) -> "FormValidationResult":
        return cls(valid=not errors, errors=dict(errors))


def _text(value: Any) -> str:
    if value is None:
        return ""
    return trim(str(value))


class ContactSubmission(BaseModel):
    """Wire payload posted to the contact endpoint.

    Only built from data that already passed validation; the honeypot is
    never part of it.
    """

    name: str = Field(..., min_length=2, max_length=100)
    email: str = Field(..., min_length=3, max_length=254)
    phone: str = Field(default="", max_length=20)
    subject: ContactSubject
    message: str = Field(..., min_length=10, max_length=2000)

    @classmethod
    def from_form(cls, data: Mapping[str, Any]) -> "ContactSubmission":
        return cls(
            name=_text(data.get("name")),
            email=_text(data.get("email")),
            phone=_text(data.get("phone")),
            subject=_text(data.get("subject")),
            message=_text(data.get("message")),
        )

    def to_payload(self) -> dict[str, str]:
        return self.model_dump(mode="json")


class SubmissionOutcome(BaseModel):
    """What one user-initiated submission attempt ended with."""

    status: SubmissionStatus
    message: str = Field(default="", description="Localized text shown to the visitor.")
    field_errors: list[str] = Field(
        default_factory=list,
        description="Fields marked invalid on the form (empty unless validation failed).",
    )
    sent: bool = Field(default=False, description="Whether a network call was made.")
    status_code: int | None = Field(default=None, description="HTTP status of the endpoint, if any.")
