import logging
from typing import Dict, List, Optional

from lingobridge.errors import ConfigurationError, UnsupportedPairError
from lingobridge.schemas import Language

logger = logging.getLogger("LingoBridge.Registry")

LANGUAGES: List[Language] = [
    Language(code="en", name="English"),
    Language(code="de", name="German"),
    Language(code="ru", name="Russian"),
    Language(code="es", name="Spanish"),
    # Zimbabwean languages (upcoming)
    Language(code="sn", name="Shona", is_upcoming=True),
    Language(code="nd", name="Ndebele", is_upcoming=True),
    Language(code="to", name="Tonga", is_upcoming=True),
    Language(code="ve", name="Venda", is_upcoming=True),
    Language(code="ts", name="Tsonga", is_upcoming=True),
    Language(code="ch", name="Chewa", is_upcoming=True),
]

MODEL_MAPPING: Dict[str, str] = {
    "en-de": "Helsinki-NLP/opus-mt-en-de",
    "de-en": "Helsinki-NLP/opus-mt-de-en",
    "en-es": "Helsinki-NLP/opus-mt-en-es",
    "es-en": "Helsinki-NLP/opus-mt-es-en",
    "en-ru": "Helsinki-NLP/opus-mt-en-ru",
    "ru-en": "Helsinki-NLP/opus-mt-ru-en",
}


class LanguageRegistry:
    """
    Closed mapping of "{source}-{target}" pairs to backend model identifiers.
    Adding a language means adding it to the language list and registering
    its pairs; validate() refuses a registry where the two disagree.
    """
    def __init__(self, languages: Optional[List[Language]] = None,
                 model_mapping: Optional[Dict[str, str]] = None):
        self._languages = list(LANGUAGES if languages is None else languages)
        self._models = dict(MODEL_MAPPING if model_mapping is None else model_mapping)

    def validate(self) -> "LanguageRegistry":
        codes = {lang.code for lang in self._languages}
        paired = set()

        for pair in self._models:
            source, sep, target = pair.partition("-")
            if not sep or not source or not target:
                raise ConfigurationError(f"Malformed language pair key: '{pair}'")
            if source == target:
                raise ConfigurationError(f"Language pair maps '{source}' to itself")
            unknown = {source, target} - codes
            if unknown:
                raise ConfigurationError(
                    f"Language pair '{pair}' refers to unknown language(s): {', '.join(sorted(unknown))}"
                )
            paired.update((source, target))

        for lang in self.available_languages():
            if lang.code not in paired:
                raise ConfigurationError(f"Language '{lang.code}' ({lang.name}) has no translation model")

        logger.info(f"Language registry OK: {len(self._models)} pairs, {len(paired)} languages")
        return self

    def languages(self) -> List[Language]:
        return list(self._languages)

    def available_languages(self) -> List[Language]:
        return [lang for lang in self._languages if not lang.is_upcoming]

    def supported_pairs(self) -> List[str]:
        return list(self._models)

    def is_supported(self, source: str, target: str) -> bool:
        return f"{source}-{target}" in self._models

    def model_for(self, source: str, target: str) -> str:
        model = self._models.get(f"{source}-{target}")
        if not model:
            raise UnsupportedPairError.for_pair(source, target)
        return model


default_registry = LanguageRegistry()
