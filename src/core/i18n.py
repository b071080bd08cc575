"""Static UI strings and localized route slugs.

Content-heavy text comes from the CMS; this module only covers navigation,
cookie banner and form labels. All lookups normalize the locale first, so
an unknown locale falls back to the default instead of failing.
"""

from __future__ import annotations

from typing import Any

from core.domain.locale import Locale
from core.domain.models import SubmissionStatus

UI_STRINGS: dict[Locale, dict[str, str]] = {
    Locale.ITALIAN: {
        "nav_home": "Home",
        "nav_about": "Chi Siamo",
        "nav_location": "Dove Siamo",
        "nav_gallery": "Gallery",
        "nav_services": "Servizi",
        "nav_contact": "Contatti",
        "nav_privacy": "Privacy Policy",
        "nav_cookies": "Cookie Policy",
        "lang_label": "Lingua",
        "cookie_accept": "Accetta tutti",
        "cookie_reject": "Solo necessari",
        "cookie_customize": "Personalizza",
        "cookie_message": "Utilizziamo cookie per migliorare la tua esperienza.",
        "form_send": "Invia",
        "form_name": "Nome",
        "form_email": "Email",
        "form_phone": "Telefono",
        "form_subject": "Oggetto",
        "form_message": "Messaggio",
        "form_success": "Messaggio inviato con successo!",
        "form_error": "Errore nell'invio. Riprova.",
        "form_required": "Campo obbligatorio",
        "form_invalid": "Valore non valido",
    },
    Locale.ENGLISH: {
        "nav_home": "Home",
        "nav_about": "About Us",
        "nav_location": "Where We Are",
        "nav_gallery": "Gallery",
        "nav_services": "Services",
        "nav_contact": "Contact",
        "nav_privacy": "Privacy Policy",
        "nav_cookies": "Cookie Policy",
        "lang_label": "Language",
        "cookie_accept": "Accept all",
        "cookie_reject": "Necessary only",
        "cookie_customize": "Customize",
        "cookie_message": "We use cookies to improve your experience.",
        "form_send": "Send",
        "form_name": "Name",
        "form_email": "Email",
        "form_phone": "Phone",
        "form_subject": "Subject",
        "form_message": "Message",
        "form_success": "Message sent successfully!",
        "form_error": "Error sending. Please try again.",
        "form_required": "Required field",
        "form_invalid": "Invalid value",
    },
    Locale.GERMAN: {
        "nav_home": "Home",
        "nav_about": "Über Uns",
        "nav_location": "Wo Wir Sind",
        "nav_gallery": "Galerie",
        "nav_services": "Dienstleistungen",
        "nav_contact": "Kontakt",
        "nav_privacy": "Datenschutz",
        "nav_cookies": "Cookie-Richtlinie",
        "lang_label": "Sprache",
        "cookie_accept": "Alle akzeptieren",
        "cookie_reject": "Nur notwendige",
        "cookie_customize": "Anpassen",
        "cookie_message": "Wir verwenden Cookies, um Ihre Erfahrung zu verbessern.",
        "form_send": "Senden",
        "form_name": "Name",
        "form_email": "E-Mail",
        "form_phone": "Telefon",
        "form_subject": "Betreff",
        "form_message": "Nachricht",
        "form_success": "Nachricht erfolgreich gesendet!",
        "form_error": "Fehler beim Senden. Bitte versuchen Sie es erneut.",
        "form_required": "Pflichtfeld",
        "form_invalid": "Ungültiger Wert",
    },
    Locale.FRENCH: {
        "nav_home": "Accueil",
        "nav_about": "Qui Sommes-Nous",
        "nav_location": "Où Sommes-Nous",
        "nav_gallery": "Galerie",
        "nav_services": "Services",
        "nav_contact": "Contact",
        "nav_privacy": "Politique de confidentialité",
        "nav_cookies": "Politique de cookies",
        "lang_label": "Langue",
        "cookie_accept": "Tout accepter",
        "cookie_reject": "Nécessaires uniquement",
        "cookie_customize": "Personnaliser",
        "cookie_message": "Nous utilisons des cookies pour améliorer votre expérience.",
        "form_send": "Envoyer",
        "form_name": "Nom",
        "form_email": "Email",
        "form_phone": "Téléphone",
        "form_subject": "Objet",
        "form_message": "Message",
        "form_success": "Message envoyé avec succès !",
        "form_error": "Erreur lors de l'envoi. Veuillez réessayer.",
        "form_required": "Champ obligatoire",
        "form_invalid": "Valeur invalide",
    },
}

ROUTE_SLUGS: dict[Locale, dict[str, str]] = {
    Locale.ITALIAN: {
        "home": "",
        "about": "chi-siamo",
        "location": "dove-siamo",
        "gallery": "gallery",
        "services": "servizi",
        "contact": "contatti",
        "privacy": "privacy-policy",
        "cookies": "cookie-policy",
    },
    Locale.ENGLISH: {
        "home": "",
        "about": "about-us",
        "location": "where-we-are",
        "gallery": "gallery",
        "services": "services",
        "contact": "contact",
        "privacy": "privacy-policy",
        "cookies": "cookie-policy",
    },
    Locale.GERMAN: {
        "home": "",
        "about": "ueber-uns",
        "location": "wo-wir-sind",
        "gallery": "galerie",
        "services": "dienstleistungen",
        "contact": "kontakt",
        "privacy": "datenschutz",
        "cookies": "cookie-richtlinie",
    },
    Locale.FRENCH: {
        "home": "",
        "about": "qui-sommes-nous",
        "location": "ou-sommes-nous",
        "gallery": "galerie",
        "services": "services",
        "contact": "contact",
        "privacy": "politique-confidentialite",
        "cookies": "politique-cookies",
    },
}

_STATUS_KEYS = {
    SubmissionStatus.SUCCESS: "form_success",
    SubmissionStatus.ERROR: "form_error",
}


def t(locale: Any, key: str) -> str:
    """Translated UI string, or `key` itself when missing (visible in the UI)."""

    lang = Locale.normalize(locale)
    return UI_STRINGS[lang].get(key) or key


def localized_path(locale: Any, route: str) -> str:
    """URL path of a logical route: `/{locale}/` for home, `/{locale}/{slug}/` otherwise.

    Unknown route names pass through as a literal slug.
    """

    lang = Locale.normalize(locale)
    slug = ROUTE_SLUGS[lang].get(route, route)
    if slug == "":
        return f"/{lang.value}/"
    return f"/{lang.value}/{slug}/"


def get_locale_from_path(path: str) -> Locale:
    """Locale of the first non-empty path segment, or the default."""

    segments = [segment for segment in (path or "").split("/") if segment]
    first = segments[0] if segments else ""
    return Locale.normalize(first)


def alternate_paths(route: str) -> dict[Locale, str]:
    """Localized path of `route` in every supported locale (language switcher)."""

    return {lang: localized_path(lang, route) for lang in Locale}


def status_message(locale: Any, status: SubmissionStatus) -> str:
    return t(locale, _STATUS_KEYS[status])
