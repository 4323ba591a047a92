"""
Async client for the MetaTube server translate endpoint.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from metatube_translation.config import REQUEST_TIMEOUT
from metatube_translation.core.translation.exceptions import (
    InvalidConfigurationError,
    ProviderError,
)

logger = logging.getLogger(__name__)

TRANSLATE_PATH = "/v1/translate"


@dataclass
class TranslationResult:
    """Translated text returned by the server."""
    translated_text: str


class MetaTubeApiClient:
    """Client for ``GET /v1/translate`` on a MetaTube server.

    The server proxies the request to the chosen engine; credentials travel as
    query parameters next to the text.

    Example:
        >>> async with MetaTubeApiClient("http://127.0.0.1:8080", token="...") as client:
        ...     result = await client.translate("こんにちは", "auto", "en", "GoogleFree", {})
        ...     print(result.translated_text)
    """

    def __init__(self, server: str, token: str = "", timeout: int = REQUEST_TIMEOUT,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Args:
            server: Base URL of the MetaTube server
            token: Optional bearer token
            timeout: Request timeout in seconds
            transport: Custom httpx transport (used by tests)
        """
        if not server:
            raise InvalidConfigurationError("MetaTube server URL is not configured")
        self.server = server.rstrip("/")
        self.token = token
        self.timeout = timeout
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create a persistent HTTP client with connection pooling"""
        if self._client is None:
            headers = {"Accept": "application/json"}
            if self.token:
                headers["Authorization"] = f"Bearer {self.token}"
            self._client = httpx.AsyncClient(
                base_url=self.server,
                limits=httpx.Limits(max_keepalive_connections=5, max_connections=10),
                timeout=httpx.Timeout(self.timeout),
                headers=headers,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        """Close the HTTP client"""
        if self._client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "MetaTubeApiClient":
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()

    async def translate(self, q: str, from_lang: str, to_lang: str, engine: str,
                        parameters: Optional[Dict[str, str]] = None) -> TranslationResult:
        """
        Translate ``q`` with the given engine.

        Args:
            q: Text to translate
            from_lang: Source language code ("auto" to let the engine detect it)
            to_lang: Destination language code
            engine: Engine name as understood by the server (e.g. "DeepL")
            parameters: Engine credential parameters

        Returns:
            TranslationResult with the translated text

        Raises:
            ProviderError: On transport errors, error statuses or malformed responses
        """
        params = {"q": q, "from": from_lang, "to": to_lang, "engine": engine}
        params.update(parameters or {})

        client = await self._get_client()
        try:
            response = await client.get(TRANSLATE_PATH, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise ProviderError(
                _error_message(e.response) or str(e),
                engine=engine,
                status_code=e.response.status_code,
            ) from e
        except httpx.HTTPError as e:
            raise ProviderError(f"{type(e).__name__}: {e}", engine=engine) from e

        try:
            body = response.json()
        except ValueError as e:
            raise ProviderError(f"Invalid JSON in translate response: {e}", engine=engine) from e

        data = body.get("data") if isinstance(body, dict) else None
        translated = data.get("translated_text") if isinstance(data, dict) else None
        if not isinstance(translated, str):
            raise ProviderError("Translate response has no translated_text", engine=engine,
                                status_code=response.status_code)

        logger.debug(f"{engine} translated {len(q)} chars ({from_lang} -> {to_lang})")
        return TranslationResult(translated_text=translated)


def _error_message(response: httpx.Response) -> Optional[str]:
    """Extract ``error.message`` from an error response body, if any."""
    try:
        body = response.json()
    except ValueError:
        text = response.text[:500]
        return text or None
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
    return None
