from __future__ import annotations

from core.domain.locale import DEFAULT_LOCALE, SUPPORTED_LOCALES, Locale
from core.domain.models import SubmissionStatus
from core.i18n import (
    ROUTE_SLUGS,
    UI_STRINGS,
    alternate_paths,
    get_locale_from_path,
    localized_path,
    status_message,
    t,
)


def test_locale_set_and_default():
    assert SUPPORTED_LOCALES == ("it", "en", "de", "fr")
    assert DEFAULT_LOCALE is Locale.ITALIAN


def test_normalize_falls_back_silently():
    assert Locale.normalize("de") is Locale.GERMAN
    assert Locale.normalize("xx") is Locale.ITALIAN
    assert Locale.normalize(None) is Locale.ITALIAN
    assert Locale.normalize(7) is Locale.ITALIAN
    assert Locale.normalize("EN") is Locale.ITALIAN
    assert Locale.normalize("xx", fallback=Locale.ENGLISH) is Locale.ENGLISH


def test_every_locale_has_the_same_keys():
    keys = set(UI_STRINGS[Locale.ITALIAN])
    routes = set(ROUTE_SLUGS[Locale.ITALIAN])
    for lang in Locale:
        assert set(UI_STRINGS[lang]) == keys
        assert set(ROUTE_SLUGS[lang]) == routes


def test_t_lookup_and_fallbacks():
    assert t("en", "nav_about") == "About Us"
    assert t("de", "form_send") == "Senden"
    assert t("xx", "nav_about") == "Chi Siamo"
    assert t("fr", "missing_key") == "missing_key"


def test_localized_path():
    assert localized_path("fr", "home") == "/fr/"
    assert localized_path("en", "about") == "/en/about-us/"
    assert localized_path("de", "contact") == "/de/kontakt/"
    assert localized_path("xx", "about") == "/it/chi-siamo/"
    assert localized_path("it", "blog") == "/it/blog/"


def test_get_locale_from_path():
    assert get_locale_from_path("/de/chi-siamo/") == "de"
    assert get_locale_from_path("/xx/") == DEFAULT_LOCALE
    assert get_locale_from_path("//fr//contact") is Locale.FRENCH
    assert get_locale_from_path("/") is Locale.ITALIAN
    assert get_locale_from_path("") is Locale.ITALIAN


def test_alternate_paths():
    paths = alternate_paths("location")
    assert paths == {
        Locale.ITALIAN: "/it/dove-siamo/",
        Locale.ENGLISH: "/en/where-we-are/",
        Locale.GERMAN: "/de/wo-wir-sind/",
        Locale.FRENCH: "/fr/ou-sommes-nous/",
    }


def test_status_message():
    assert status_message("en", SubmissionStatus.SUCCESS) == "Message sent successfully!"
    assert status_message("it", SubmissionStatus.ERROR) == "Errore nell'invio. Riprova."
