from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

# -------------------------------------------------------------------------
# [Translation Schemas]
# 프론트엔드(JS)와 주고받는 JSON은 camelCase, 파이썬 쪽은 snake_case
# -------------------------------------------------------------------------

class TranslationRequest(BaseModel):
    """Browser -> Server: 번역 요청"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    text: str
    source_language: str = Field(alias="sourceLanguage")
    target_language: str = Field(alias="targetLanguage")

    @field_validator("text")
    @classmethod
    def text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("text must not be empty")
        return value

    @property
    def language_pair(self) -> str:
        return f"{self.source_language}-{self.target_language}"


class TranslationResponse(BaseModel):
    """Server -> Browser: 번역 결과"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    translated_text: str = Field(alias="translatedText", min_length=1)
    source_language: str = Field(alias="sourceLanguage")
    target_language: str = Field(alias="targetLanguage")


class Language(BaseModel):
    """언어 선택기에 노출되는 언어 항목"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    code: str
    name: str
    is_upcoming: bool = Field(default=False, alias="isUpcoming")


class LanguagesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    languages: List[Language]
    supported_pairs: List[str] = Field(default_factory=list, alias="supportedPairs")


class ErrorResponse(BaseModel):
    """분류된 번역 실패를 그대로 전달"""
    status: Literal["error"] = "error"
    error: str
    message: str
    retry_after: Optional[float] = Field(default=None, alias="retryAfter")

    model_config = ConfigDict(populate_by_name=True)
