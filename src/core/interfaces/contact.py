"""Contracts for the contact-form flow.

Why Protocol:
- The controller only needs structural duck typing; a browser bridge, a
  server-side form handler or a test double can all play the view.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import ContactSubmission, SubmissionStatus


@runtime_checkable
class ContactFormView(Protocol):
    """What the controller needs from the rendered form."""

    locale: str

    def read_fields(self) -> dict[str, str]:
        """Current value of every field, honeypot included."""

        ...

    def clear_errors(self) -> None: ...

    def mark_invalid(self, field: str, message: str) -> None: ...

    def show_status(self, status: SubmissionStatus, message: str) -> None: ...

    def set_submitting(self, submitting: bool) -> None:
        """Disable/enable the submit control."""

        ...

    def reset(self) -> None: ...


@runtime_checkable
class ContactSender(Protocol):
    """Delivers one submission; raises on any failure (HTTP or network)."""

    async def send(self, submission: ContactSubmission) -> None: ...
