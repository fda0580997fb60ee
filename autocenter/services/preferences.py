# autocenter/services/preferences.py
import logging
from typing import Optional

from autocenter.core.storage import KeyValueStore
from autocenter.models.common import LANGUAGES, normalize_language, text_direction

logger = logging.getLogger(__name__)

LANGUAGE_KEY = "abu_almagd_lang"
# each visitor's own choice travels in a cookie of the same name
LANGUAGE_COOKIE = LANGUAGE_KEY


def parse_language(lang: str) -> str:
    lang = (lang or "").strip().lower()
    if lang not in LANGUAGES:
        raise ValueError(f"unsupported language: {lang!r}")
    return lang


def other_language(lang: str) -> str:
    return "ar" if normalize_language(lang) == "en" else "en"


class LanguagePreference:
    """
    Site-wide default language. Read once at startup and only changed by the
    admin; visitors override it for themselves with the language cookie.
    """

    def __init__(self, kv: KeyValueStore, default: str = "ar"):
        self.kv = kv
        self.default = normalize_language(default)
        self._current = normalize_language(kv.get_item(LANGUAGE_KEY), self.default)

    @property
    def language(self) -> str:
        return self._current

    @property
    def direction(self) -> str:
        return text_direction(self._current)

    def set(self, lang: str) -> str:
        lang = parse_language(lang)
        self.kv.set_item(LANGUAGE_KEY, lang)
        self._current = lang
        logger.info("default display language set to %s", lang)
        return lang

    def resolve(self, lang: Optional[str] = None, client_lang: Optional[str] = None) -> str:
        """Explicit request language, then the visitor's cookie, then the site default."""
        return normalize_language(lang, normalize_language(client_lang, self._current))
