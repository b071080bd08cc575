"""Whitelist validation for the contact form.

Rules:
- Every value must match an explicitly allowed shape; anything else is
  rejected. Values are never "cleaned", only accepted or rejected.
- Checks run on the trimmed value.
- Output encoding lives in `core.sanitize`; use both (defense in depth).
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping

from core.domain.models import (
    FORM_WHITESPACE,
    ContactField,
    ContactSubject,
    FormValidationResult,
    ValidationResult,
    trim,
)

logger = logging.getLogger(__name__)

_SPACE = re.escape(FORM_WHITESPACE)

ALLOWED_PATTERNS: dict[ContactField, re.Pattern[str]] = {
    ContactField.NAME: re.compile("[a-zA-ZÀ-ÿ" + _SPACE + r"'\-]{2,100}"),
    ContactField.EMAIL: re.compile(r"[a-zA-Z0-9._%+\-]+@[a-zA-Z0-9.\-]+\.[a-zA-Z]{2,}"),
    ContactField.PHONE: re.compile("[0-9" + _SPACE + r"+\-()]{0,20}"),
    ContactField.MESSAGE: re.compile(r"[\s\S]{10,2000}"),
}

ALLOWED_SUBJECTS: tuple[str, ...] = tuple(subject.value for subject in ContactSubject)

MAX_LENGTHS: dict[ContactField, int] = {
    ContactField.NAME: 100,
    ContactField.EMAIL: 254,
    ContactField.PHONE: 20,
    ContactField.SUBJECT: 20,
    ContactField.MESSAGE: 2000,
}

REQUIRED_FIELDS: tuple[ContactField, ...] = (
    ContactField.NAME,
    ContactField.EMAIL,
    ContactField.SUBJECT,
    ContactField.MESSAGE,
)

HONEYPOT_FIELD = "honeypot"
BOT_ERROR_KEY = "_bot"


def _as_field(field: Any) -> ContactField | None:
    try:
        return ContactField(field)
    except ValueError:
        return None


def _field_label(field: Any) -> str:
    return field.value if isinstance(field, ContactField) else str(field)


def validate_field(field: ContactField | str, value: Any) -> ValidationResult:
    """Check one value against the whitelist rule of `field`."""

    label = _field_label(field)
    if not isinstance(value, str):
        return ValidationResult.fail(f"{label}: must be a string")

    trimmed = trim(value)
    known = _as_field(field)

    max_len = MAX_LENGTHS.get(known) if known is not None else None
    if max_len is not None and len(trimmed) > max_len:
        return ValidationResult.fail(f"{label}: exceeds max length {max_len}")

    if known is None:
        return ValidationResult.fail(f"{label}: unknown field")

    if known is ContactField.SUBJECT:
        if trimmed not in ALLOWED_SUBJECTS:
            return ValidationResult.fail(f"{label}: invalid subject value")
        return ValidationResult.ok()

    if ALLOWED_PATTERNS[known].fullmatch(trimmed) is None:
        return ValidationResult.fail(f"{label}: contains invalid characters")
    return ValidationResult.ok()


def _is_blank(value: Any) -> bool:
    if isinstance(value, str):
        return not trim(value)
    return not value


def validate_contact_form(data: Mapping[str, Any]) -> FormValidationResult:
    """Validate a whole submission and collect every error found.

    A required field that is missing only reports "is required", never its
    pattern failure as well. `phone` is optional. A filled honeypot adds a
    `_bot` entry, which alone makes the form invalid.
    """

    errors: dict[str, str] = {}

    for field in REQUIRED_FIELDS:
        value = data.get(field.value)
        if _is_blank(value):
            errors[field.value] = f"{field.value}: is required"
            continue

        result = validate_field(field, value)
        if not result.valid:
            errors[field.value] = result.error

    phone = data.get(ContactField.PHONE.value)
    if not _is_blank(phone):
        result = validate_field(ContactField.PHONE, phone)
        if not result.valid:
            errors[ContactField.PHONE.value] = result.error

    if not _is_blank(data.get(HONEYPOT_FIELD)):
        errors[BOT_ERROR_KEY] = "Bot detected"

    if errors:
        logger.debug("Contact form rejected; failing fields: %s", ", ".join(sorted(errors)))

    return FormValidationResult.from_errors(errors)
