import logging
from contextlib import asynccontextmanager
from functools import lru_cache

import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from lingobridge.config import get_translation_config
from lingobridge.errors import (
    AuthenticationError,
    ConfigurationError,
    EmptyResultError,
    ModelLoadingError,
    RateLimitError,
    TranslationError,
    TranslationTimeoutError,
    UnsupportedPairError,
)
from lingobridge.language_registry import default_registry
from lingobridge.schemas import ErrorResponse, LanguagesResponse, TranslationRequest, TranslationResponse
from lingobridge.translation_client import TranslationClient, build_translation_client

logger = logging.getLogger("LingoBridge.API")

# 에러 분류 -> HTTP 상태 코드 (나머지는 502)
ERROR_STATUS = {
    ConfigurationError: 500,
    RateLimitError: 429,
    AuthenticationError: 502,
    ModelLoadingError: 503,
    UnsupportedPairError: 400,
    TranslationTimeoutError: 504,
    EmptyResultError: 502,
}


@lru_cache(maxsize=1)
def get_translation_client() -> TranslationClient:
    """Process-wide client (and therefore one shared rate window)."""
    settings = get_translation_config()
    logger.info(f"Translation backend: {settings.backend}")
    return build_translation_client(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Fail fast: 언어 목록과 모델 매핑이 어긋나면 서버를 띄우지 않음
    default_registry.validate()
    yield


app = FastAPI(title="LingoBridge", lifespan=lifespan)

# 브라우저 UI는 다른 origin에서 호출함
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TranslationError)
async def translation_error_handler(request: Request, exc: TranslationError):
    status_code = ERROR_STATUS.get(type(exc), 502)
    body = ErrorResponse(error=exc.category, message=exc.message, retry_after=exc.retry_after)

    headers = {}
    if exc.retry_after is not None:
        headers["Retry-After"] = str(max(1, int(round(exc.retry_after))))

    if status_code >= 500:
        logger.error(f"[*] Translation failed [{exc.category}]: {exc.message}")
    else:
        logger.warning(f"[*] Translation rejected [{exc.category}]: {exc.message}")

    return JSONResponse(status_code=status_code, content=body.model_dump(by_alias=True), headers=headers)


@app.get("/health")
async def health_check(client: TranslationClient = Depends(get_translation_client)):
    return {"status": "ok", "service": "lingobridge", "backend": client.settings.backend}


@app.get("/v1/languages", response_model=LanguagesResponse)
async def list_languages():
    return LanguagesResponse(
        languages=default_registry.languages(),
        supported_pairs=default_registry.supported_pairs(),
    )


@app.post("/v1/translate", response_model=TranslationResponse)
async def translate_endpoint(req: TranslationRequest,
                             client: TranslationClient = Depends(get_translation_client)):
    return await client.translate(req)


def run_api_server(host: str, port: int, log_level: str = "info"):
    uvicorn.run(app, host=host, port=port, log_level=log_level)
