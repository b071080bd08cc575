"""Contact-form submission orchestration.

One call to `ContactFormController.handle_submit` is one user-initiated
attempt: read, reject bots, validate, send once, report. There is no retry;
a failed attempt needs a new submission. A second submission while one is in
flight is only prevented by disabling the submit control on the view.
"""

from __future__ import annotations

import logging

from core.domain.locale import Locale
from core.domain.models import (
    ContactSubmission,
    SubmissionOutcome,
    SubmissionStatus,
    trim,
)
from core.i18n import status_message, t
from core.interfaces.contact import ContactFormView, ContactSender
from core.validation import BOT_ERROR_KEY, HONEYPOT_FIELD, validate_contact_form

logger = logging.getLogger(__name__)


class ContactFormController:
    """Drives a `ContactFormView` and hands valid data to a `ContactSender`."""

    def __init__(self, view: ContactFormView, sender: ContactSender) -> None:
        self._view = view
        self._sender = sender

    @property
    def locale(self) -> Locale:
        return Locale.normalize(getattr(self._view, "locale", None))

    def _read(self) -> dict[str, str]:
        raw = self._view.read_fields()
        return {key: trim("" if value is None else str(value)) for key, value in raw.items()}

    def _fail(self, **extra) -> SubmissionOutcome:
        message = status_message(self.locale, SubmissionStatus.ERROR)
        self._view.show_status(SubmissionStatus.ERROR, message)
        return SubmissionOutcome(status=SubmissionStatus.ERROR, message=message, **extra)

    async def handle_submit(self) -> SubmissionOutcome:
        self._view.clear_errors()
        data = self._read()

        # Same opaque message as a transport failure: the detection stays hidden.
        if data.get(HONEYPOT_FIELD):
            logger.info("Contact form submission dropped (honeypot filled)")
            return self._fail()

        result = validate_contact_form(data)
        if not result.valid:
            fields = [field for field in result.errors if field != BOT_ERROR_KEY]
            for field in fields:
                key = "form_required" if not data.get(field) else "form_invalid"
                self._view.mark_invalid(field, t(self.locale, key))
            return SubmissionOutcome(status=SubmissionStatus.ERROR, field_errors=fields)

        submission = ContactSubmission.from_form(data)

        self._view.set_submitting(True)
        try:
            await self._sender.send(submission)
        except Exception as exc:
            logger.warning("Contact form submission failed: %s", exc, exc_info=True)
            return self._fail(sent=True, status_code=getattr(exc, "status_code", None))
        finally:
            self._view.set_submitting(False)

        message = status_message(self.locale, SubmissionStatus.SUCCESS)
        self._view.show_status(SubmissionStatus.SUCCESS, message)
        self._view.reset()
        return SubmissionOutcome(status=SubmissionStatus.SUCCESS, message=message, sent=True)
