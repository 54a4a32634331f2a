from typing import Optional


class TranslationError(Exception):
    """Base class for every categorized translation failure."""

    category = "translation_failed"
    default_message = "Failed to translate text. Please try again later."

    def __init__(self, message: Optional[str] = None, retry_after: Optional[float] = None):
        self.message = message or self.default_message
        self.retry_after = retry_after
        super().__init__(self.message)


class ConfigurationError(TranslationError):
    category = "configuration"
    default_message = "Translation API key is not configured. Please check your .env file."


class RateLimitError(TranslationError):
    category = "rate_limited"
    default_message = "Rate limit exceeded. Please try again in a minute."


class UnsupportedPairError(TranslationError):
    category = "unsupported_pair"
    default_message = "Translation model not found. Please try a different language pair."

    @classmethod
    def for_pair(cls, source: str, target: str) -> "UnsupportedPairError":
        return cls(f"Translation between {source} and {target} is not supported yet.")


class AuthenticationError(TranslationError):
    category = "authentication"
    default_message = "Invalid API key. Please check your configuration."


class ModelLoadingError(TranslationError):
    # 백엔드 cold-start: 잠시 후 재시도 가능
    category = "model_loading"
    default_message = "Model is currently loading. Please try again in a few seconds."


class TranslationTimeoutError(TranslationError, TimeoutError):
    category = "timeout"
    default_message = "Request timed out. Please try again."


class EmptyResultError(TranslationError):
    category = "empty_result"
    default_message = "No translation received from the API."


class TranslationFailedError(TranslationError):
    """Any other transport or HTTP failure."""
