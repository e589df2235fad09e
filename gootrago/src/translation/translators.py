import logging
import re
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from google.api_core.exceptions import GoogleAPIError
from google.auth.exceptions import GoogleAuthError
from google.cloud import translate_v2, translate_v3

from ..utils.auth import load_credentials
from ..utils.config import AUTO_DETECT, TranslationSettings
from ..utils.errors import (
    ConfigurationError,
    DispatcherError,
    EmptyTranslationError,
    InvalidLanguageCode,
    TranslationAuthError,
    TranslationLengthMismatch,
    TranslationServiceError,
)
from ..utils.logging_setup import TRACE

logger = logging.getLogger(__name__)

LANGUAGE_CODE_PATTERN = re.compile(r'^[A-Za-z]{2,3}(-[A-Za-z0-9]{2,8})*$')


def validate_language_code(code: Optional[str], role: str, allow_auto: bool = False) -> str:
    """Check a language tag such as 'en', 'pt-BR' or 'zh-Hant'."""
    if allow_auto and code == AUTO_DETECT:
        return code
    if not code or not LANGUAGE_CODE_PATTERN.match(code):
        raise InvalidLanguageCode(f"invalid {role} language code: {code!r}")
    return code


class Translator(ABC):
    """Translates an ordered batch of strings into an equally long batch.

    Subclasses only talk to the service; the checks that keep the output
    aligned with the input live here.
    """

    name = "translator"

    def __init__(self, target_lang: str, source_lang: str = AUTO_DETECT):
        self.target_lang = validate_language_code(target_lang, "target")
        self.source_lang = validate_language_code(source_lang, "source", allow_auto=True)
        self.detected_source_language: Optional[str] = None

    @property
    def auto_detect(self) -> bool:
        return self.source_lang == AUTO_DETECT

    def translate(self, texts: Sequence[str]) -> List[str]:
        """Translate `texts`, returning one translation per input in order."""
        texts = list(texts)
        if not texts:
            raise DispatcherError("nothing to translate: empty batch")

        logger.log(TRACE, f"[{self.name}] sending {len(texts)} strings: {texts!r}")
        translations = self._translate_batch(texts)
        logger.log(TRACE, f"[{self.name}] received {len(translations)} strings: {translations!r}")

        if len(translations) == 0:
            raise EmptyTranslationError("no translation returned")
        if len(translations) != len(texts):
            raise TranslationLengthMismatch(len(texts), len(translations))
        return translations

    @abstractmethod
    def _translate_batch(self, texts: List[str]) -> List[str]:
        """Send one request to the service."""

    def close(self) -> None:
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False


class BasicTranslator(Translator):
    """Cloud Translation Basic (v2) client. Needs no project id."""

    name = "basic"

    def __init__(self, target_lang: str, source_lang: str = AUTO_DETECT, credentials=None):
        super().__init__(target_lang, source_lang)
        self.credentials = credentials
        self._client = None

    @property
    def client(self) -> translate_v2.Client:
        if self._client is None:
            try:
                self._client = translate_v2.Client(credentials=self.credentials)
            except GoogleAuthError as e:
                raise TranslationAuthError(f"failed to create client: {e}") from e
            logger.debug("Initialized Cloud Translation Basic client")
        return self._client

    def _translate_batch(self, texts: List[str]) -> List[str]:
        kwargs = {"target_language": self.target_lang, "format_": "text"}
        if not self.auto_detect:
            kwargs["source_language"] = self.source_lang

        try:
            results = self.client.translate(texts, **kwargs)
        except GoogleAuthError as e:
            raise TranslationAuthError(f"authentication failed: {e}") from e
        except (GoogleAPIError, OSError) as e:
            raise TranslationServiceError(f"failed to translate text: {e}") from e

        # A single dict comes back when the service got a single string
        if isinstance(results, dict):
            results = [results]
        if results and self.auto_detect:
            self.detected_source_language = results[0].get("detectedSourceLanguage")
        return [item.get("translatedText", "") for item in results]


class AdvancedTranslator(Translator):
    """Cloud Translation Advanced (v3) client, scoped to a project."""

    name = "advanced"

    def __init__(self, target_lang: str, project_id: str, source_lang: str = AUTO_DETECT,
                 credentials=None, location: str = "global"):
        super().__init__(target_lang, source_lang)
        if not project_id:
            raise ConfigurationError("project ID is required for Advanced API")
        self.project_id = project_id
        self.location = location
        self.credentials = credentials
        self._client = None

    @property
    def parent(self) -> str:
        return f"projects/{self.project_id}/locations/{self.location}"

    @property
    def client(self) -> translate_v3.TranslationServiceClient:
        if self._client is None:
            try:
                self._client = translate_v3.TranslationServiceClient(credentials=self.credentials)
            except GoogleAuthError as e:
                raise TranslationAuthError(f"failed to create client: {e}") from e
            logger.debug(f"Initialized Cloud Translation Advanced client for {self.parent}")
        return self._client

    def _translate_batch(self, texts: List[str]) -> List[str]:
        request = {
            "parent": self.parent,
            "contents": texts,
            "target_language_code": self.target_lang,
            "mime_type": "text/plain",
        }
        if not self.auto_detect:
            request["source_language_code"] = self.source_lang

        try:
            response = self.client.translate_text(request=request)
        except GoogleAuthError as e:
            raise TranslationAuthError(f"authentication failed: {e}") from e
        except (GoogleAPIError, OSError) as e:
            raise TranslationServiceError(f"failed to translate text: {e}") from e

        translations = list(response.translations)
        if translations and self.auto_detect:
            self.detected_source_language = translations[0].detected_language_code or None
        return [t.translated_text for t in translations]

    def close(self) -> None:
        if self._client is not None:
            self._client.transport.close()
            self._client = None


def create_translator(settings: TranslationSettings) -> Translator:
    """Pick the translation client once, from the resolved settings."""
    credentials = load_credentials(settings.credentials_file)
    if settings.use_advanced:
        return AdvancedTranslator(
            target_lang=settings.target_lang,
            project_id=settings.project_id,
            source_lang=settings.source_lang,
            credentials=credentials,
        )
    return BasicTranslator(
        target_lang=settings.target_lang,
        source_lang=settings.source_lang,
        credentials=credentials,
    )
