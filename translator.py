# translator.py - client for the remote text translation service
"""
Client for the Translator v3 REST API.

One POST per call, no retries. The text is sent as HTML so that spans marked
``translate="no"`` come back unchanged. Every way the call can fail collapses
into ``TranslationUnavailable``.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from config import TranslatorSettings
from errors import TranslationUnavailable
from messages import BASE_LANGUAGE

logger = logging.getLogger("insurance-decision.translator")


@dataclass(frozen=True)
class TranslationOutcome:
    text: str
    translated: bool
    error: Optional[str] = None


class TranslatorClient:
    def __init__(self, settings: TranslatorSettings, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.settings = settings
        self._transport = transport

    def _headers(self):
        return {
            "Ocp-Apim-Subscription-Key": self.settings.subscription_key,
            "Ocp-Apim-Subscription-Region": self.settings.location,
        }

    def _params(self, target_language: str):
        return {
            "api-version": "3.0",
            "from": BASE_LANGUAGE,
            "to": target_language,
            "textType": "html",
        }

    async def translate(self, text: str, target_language: str) -> str:
        """Translate text into target_language, or raise TranslationUnavailable."""
        url = f"{self.settings.endpoint}/translate"
        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self.settings.timeout_seconds
            ) as client:
                response = await client.post(
                    url,
                    params=self._params(target_language),
                    headers=self._headers(),
                    json=[{"Text": text}],
                )
        # InvalidURL is not an HTTPError; an oversized target language raises it
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise TranslationUnavailable(f"translation request failed: {e!r}") from e

        if not response.is_success:
            raise TranslationUnavailable(
                f"translation service returned HTTP {response.status_code}"
            )

        try:
            # only one target language is requested, so only one translation comes back
            result = response.json()[0]["translations"][0]["text"]
        except (ValueError, LookupError, TypeError) as e:
            raise TranslationUnavailable(f"unexpected translation response: {e!r}") from e
        if not isinstance(result, str):
            raise TranslationUnavailable("unexpected translation response: text is not a string")

        logger.debug("Translated %d chars into %s", len(text), target_language)
        return result

    async def translate_or_fallback(self, text: str, target_language: str) -> TranslationOutcome:
        """Translate, falling back to the source text when the service is unavailable."""
        try:
            translated = await self.translate(text, target_language)
        except TranslationUnavailable as e:
            return TranslationOutcome(text=text, translated=False, error=str(e))
        return TranslationOutcome(text=translated, translated=True)
