import os
import json
import logging
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError

from lingobridge.errors import ConfigurationError

logger = logging.getLogger("LingoBridge.Config")

DEFAULT_CONFIG_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), '../../config/config.json'))
HUGGINGFACE_API_URL = "https://api-inference.huggingface.co/models"


class TranslatorSettings(BaseModel):
    """번역 백엔드 설정 (config.json + 환경변수)"""
    backend: Literal["huggingface", "relay"] = "huggingface"
    base_url: str = HUGGINGFACE_API_URL
    relay_url: Optional[str] = None
    api_token: Optional[str] = Field(default=None, repr=False)  # 토큰은 로그에 남기지 않음
    timeout_seconds: float = Field(default=30.0, gt=0)
    max_requests: int = Field(default=10, ge=1)
    window_seconds: float = Field(default=60.0, gt=0)


# env var -> settings field
ENV_OVERRIDES = {
    "TRANSLATION_BACKEND": "backend",
    "HUGGINGFACE_API_URL": "base_url",
    "TRANSLATION_API_URL": "relay_url",
    "TRANSLATION_TIMEOUT": "timeout_seconds",
    "RATE_LIMIT_MAX_REQUESTS": "max_requests",
    "RATE_LIMIT_WINDOW": "window_seconds",
}

TOKEN_ENV = {
    "huggingface": "HUGGINGFACE_API_KEY",
    "relay": "TRANSLATION_API_KEY",
}


def _read_config_file(config_path: str) -> dict:
    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON in {config_path}: {e}") from e
    return data.get('system_settings', {}).get('translation', {})


def get_translation_config(config_path: Optional[str] = None) -> TranslatorSettings:
    """
    Build settings from config/config.json, then .env, then the environment.
    Later sources win.
    """
    load_dotenv()
    config_data = dict(_read_config_file(config_path or DEFAULT_CONFIG_PATH))

    for env_name, field in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config_data[field] = value

    token_env = TOKEN_ENV.get(config_data.get('backend', 'huggingface'))
    env_token = os.getenv(token_env) if token_env else None
    if env_token:
        config_data['api_token'] = env_token

    try:
        settings = TranslatorSettings(**config_data)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid translation settings: {e}") from e

    if settings.backend == "relay" and not settings.relay_url:
        raise ConfigurationError("TRANSLATION_API_URL must be set for the relay backend")

    if not settings.api_token:
        logger.warning(f"No API token configured for backend '{settings.backend}'; translate calls will fail")

    return settings
