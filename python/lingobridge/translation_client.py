import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx
from pydantic import ValidationError

from lingobridge.config import TranslatorSettings
from lingobridge.errors import (
    AuthenticationError,
    ConfigurationError,
    EmptyResultError,
    ModelLoadingError,
    RateLimitError,
    TranslationError,
    TranslationFailedError,
    TranslationTimeoutError,
    UnsupportedPairError,
)
from lingobridge.language_registry import LanguageRegistry, default_registry
from lingobridge.rate_limiter import RateWindow
from lingobridge.response_parser import decode_response, extract_text
from lingobridge.schemas import TranslationRequest, TranslationResponse

logger = logging.getLogger("LingoBridge.Client")


def _estimated_time(response: httpx.Response) -> Optional[float]:
    """503 응답 본문의 estimated_time (모델 로딩 예상 시간)"""
    try:
        value = response.json().get("estimated_time")
    except (ValueError, AttributeError):
        return None
    return float(value) if isinstance(value, (int, float)) and not isinstance(value, bool) else None


def classify_status(response: httpx.Response) -> TranslationError:
    """Map a non-2xx backend response to a translation error category."""
    status = response.status_code
    if status == 429:
        return RateLimitError()
    if status == 401:
        return AuthenticationError()
    if status == 503:
        return ModelLoadingError(retry_after=_estimated_time(response))
    if status == 404:
        return UnsupportedPairError()
    return TranslationFailedError(f"Failed to translate text (HTTP {status}). Please try again later.")


class TranslationClient(ABC):
    """
    Single-attempt translation over HTTP.

    Subclasses only decide where the request goes and how the body is read;
    the credential check, rate window, pair check and error classification
    are shared.
    """
    def __init__(self, settings: TranslatorSettings, rate_window: RateWindow,
                 registry: Optional[LanguageRegistry] = None):
        self.settings = settings
        self.rate_window = rate_window
        self.registry = registry or default_registry

    async def translate(self, request: TranslationRequest) -> TranslationResponse:
        if not self.settings.api_token:
            raise ConfigurationError()

        self.rate_window.check()
        if not self.registry.is_supported(request.source_language, request.target_language):
            raise UnsupportedPairError.for_pair(request.source_language, request.target_language)
        url, body = self._prepare(request)
        self.rate_window.acquire()

        headers = {
            "Authorization": f"Bearer {self.settings.api_token}",
            "Content-Type": "application/json",
        }
        logger.info(f"[*] Translate {request.language_pair} ({len(request.text)} chars) -> {url}")

        async with httpx.AsyncClient() as client:
            try:
                resp = await client.post(url, json=body, headers=headers, timeout=self.settings.timeout_seconds)
            except httpx.TimeoutException as e:
                logger.warning(f"[*] Translation timed out after {self.settings.timeout_seconds}s: {e}")
                raise TranslationTimeoutError() from e
            except httpx.HTTPError as e:
                logger.error(f"[*] Translation transport error: {e!r}")
                raise TranslationFailedError() from e

        if not resp.is_success:
            error = classify_status(resp)
            logger.warning(f"[*] Backend returned HTTP {resp.status_code} -> {error.category}")
            raise error

        translated_text = self._read_text(resp)
        return TranslationResponse(
            translated_text=translated_text,
            source_language=request.source_language,
            target_language=request.target_language,
        )

    @abstractmethod
    def _prepare(self, request: TranslationRequest):
        """Return (url, json_body) for a registered pair."""

    @abstractmethod
    def _read_text(self, response: httpx.Response) -> str:
        """Extract translated text from a successful response."""


class HuggingFaceTranslationClient(TranslationClient):
    """Hosted inference API: one model per language pair."""

    def _prepare(self, request: TranslationRequest):
        model = self.registry.model_for(request.source_language, request.target_language)
        return f"{self.settings.base_url.rstrip('/')}/{model}", {"inputs": request.text}

    def _read_text(self, response: httpx.Response) -> str:
        return extract_text(decode_response(response))


class RelayTranslationClient(TranslationClient):
    """
    Self-hosted translation API that takes the whole request at /translate.
    Only registry pairs are forwarded, so /v1/languages holds for both backends.
    """

    def _prepare(self, request: TranslationRequest):
        return f"{self.settings.relay_url.rstrip('/')}/translate", request.model_dump(by_alias=True)

    def _read_text(self, response: httpx.Response) -> str:
        try:
            result = TranslationResponse.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise EmptyResultError() from e
        if not result.translated_text.strip():
            raise EmptyResultError()
        return result.translated_text


def build_translation_client(settings: TranslatorSettings,
                             registry: Optional[LanguageRegistry] = None) -> TranslationClient:
    """Wire the configured backend with a fresh process-wide rate window."""
    rate_window = RateWindow(max_requests=settings.max_requests, window_seconds=settings.window_seconds)
    registry = (registry or default_registry).validate()
    if settings.backend == "relay":
        return RelayTranslationClient(settings, rate_window, registry)
    return HuggingFaceTranslationClient(settings, rate_window, registry)
