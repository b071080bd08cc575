from __future__ import annotations

import pytest

from core.config import AppSettings


@pytest.fixture
def settings() -> AppSettings:
    # Ignore any developer .env so tests see the same configuration everywhere.
    return AppSettings(_env_file=None, directus_url="http://cms.test")


@pytest.fixture
def valid_form() -> dict[str, str]:
    return {
        "name": "Marco De Luca",
        "email": "marco@example.com",
        "phone": "+39 011 123 4567",
        "subject": "visit",
        "message": "Vorrei visitare la casa comune.",
        "honeypot": "",
    }
