"""Cliente REST de Directus (contenido traducido).

Por qué está en adapters:
- HTTP/JSON es un detalle de infraestructura; el Core solo ve dicts de
  contenido ya unidos con su traducción.
- Se usa al generar páginas (lecturas) y, si el envío se hace vía servidor,
  para reenviar el formulario de contacto.

Contrato del CMS:
- `GET {base}/items/{collection}?...` devuelve `{"data": ...}`.
- `GET {base}/assets/{file_id}?...` sirve binarios (solo se construye la URL).
- `POST {contact_url}` con el JSON del formulario; 2xx = éxito.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.locale import Locale
from core.domain.models import ContactField, ContactSubmission

logger = logging.getLogger(__name__)

TRANSLATION_FILTER_PARAM = "deep[translations][_filter][languages_code][_eq]"
TRANSLATED_FIELDS = "*,translations.*"
SITE_SETTINGS_COLLECTION = "site_settings"


class ContentClientError(Exception):
    """Base error for failed calls to the CMS or the contact endpoint."""

    def __init__(self, message: str, *, status_code: int | None = None, endpoint: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.endpoint = endpoint


class DirectusError(ContentClientError):
    def __init__(self, status_code: int, endpoint: str, reason: str = "") -> None:
        self.reason = reason
        status = f"{status_code} {reason}" if reason else str(status_code)
        super().__init__(
            f"Directus API error: {status} for {endpoint}",
            status_code=status_code,
            endpoint=endpoint,
        )


class ContactSubmissionError(ContentClientError):
    def __init__(self, status_code: int, payload: dict[str, Any]) -> None:
        self.payload = payload
        message = payload.get("message") or "Contact form submission failed"
        super().__init__(str(message), status_code=status_code, endpoint="contact-form")


def _json_object(response: httpx.Response) -> dict[str, Any]:
    """JSON object body, or {} when missing or malformed (never masks the original failure)."""

    try:
        payload = response.json()
    except ValueError:
        return {}
    return payload if isinstance(payload, dict) else {}


class DirectusClient:
    """Read-only content queries plus the contact-form post.

    Owns the `httpx.AsyncClient` it builds; an injected client is left open.
    """

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or AppSettings()
        self._owns_client = client is None
        self._client = client or build_async_client(self._settings, transport=transport)

    async def __aenter__(self) -> "DirectusClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    @property
    def base_url(self) -> str:
        return self._settings.base_url

    def resolve_locale(self, locale: Any) -> Locale:
        return Locale.normalize(locale, fallback=self._settings.default_locale)

    def _translated_params(self, locale: Any) -> dict[str, Any]:
        return {
            TRANSLATION_FILTER_PARAM: self.resolve_locale(locale).value,
            "fields": TRANSLATED_FIELDS,
        }

    async def _fetch_items(self, collection: str, params: Mapping[str, Any]) -> Any:
        url = f"{self.base_url}/items/{quote(collection, safe='')}"
        query = {key: str(value) for key, value in params.items()}

        response = await self._client.get(url, params=query)
        if not response.is_success:
            logger.warning(
                "Directus request failed: %s %s for %s",
                response.status_code,
                response.reason_phrase,
                collection,
            )
            raise DirectusError(response.status_code, collection, response.reason_phrase)

        try:
            payload = response.json()
        except ValueError as exc:
            logger.warning("Directus returned a non-JSON body for %s", collection)
            raise DirectusError(response.status_code, collection, "invalid JSON body") from exc
        if not isinstance(payload, dict):
            return None
        return payload.get("data")

    async def get_collection(
        self,
        collection: str,
        locale: Any = None,
        extra_params: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Items of `collection`, each with its translation row for `locale`."""

        params = self._translated_params(locale)
        if extra_params:
            params.update(extra_params)
        data = await self._fetch_items(collection, params)
        return data if isinstance(data, list) else []

    async def get_item_by_slug(self, collection: str, slug: str, locale: Any = None) -> dict[str, Any] | None:
        """First item whose slug matches, or None."""

        params = {
            "filter[slug][_eq]": slug,
            **self._translated_params(locale),
            "limit": 1,
        }
        items = await self._fetch_items(collection, params)
        if isinstance(items, list) and items:
            return items[0]
        return None

    async def get_site_settings(self, locale: Any = None) -> dict[str, Any]:
        data = await self._fetch_items(SITE_SETTINGS_COLLECTION, self._translated_params(locale))
        return data if isinstance(data, dict) else {}

    def get_asset_url(self, file_id: str | None, transforms: Mapping[str, Any] | None = None) -> str:
        """URL of a binary asset, with optional image transforms; '' without an id."""

        if not file_id:
            return ""
        url = f"{self.base_url}/assets/{quote(str(file_id), safe='')}"
        if not transforms:
            return url
        params = {key: str(value) for key, value in transforms.items()}
        return str(httpx.URL(url, params=params))

    async def submit_contact_form(self, data: ContactSubmission | Mapping[str, Any]) -> dict[str, Any]:
        """Post one submission to the contact endpoint. No retry."""

        if isinstance(data, ContactSubmission):
            payload = data.to_payload()
        else:
            payload = {field.value: data.get(field.value, "") for field in ContactField}
        response = await self._client.post(
            self._settings.contact_url,
            json=payload,
            headers={"Content-Type": "application/json"},
        )
        if not response.is_success:
            error = _json_object(response)
            logger.warning("Contact form submission rejected: HTTP %s", response.status_code)
            raise ContactSubmissionError(response.status_code, error)

        if not response.content:
            return {}
        return _json_object(response)


class HttpContactSender:
    """`ContactSender` backed by `DirectusClient.submit_contact_form`."""

    def __init__(self, client: DirectusClient) -> None:
        self._client = client

    async def send(self, submission: ContactSubmission) -> None:
        await self._client.submit_contact_form(submission)
