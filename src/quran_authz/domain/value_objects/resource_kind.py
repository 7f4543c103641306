"""Resource kinds addressable through the API."""

from enum import StrEnum


class ResourceKind(StrEnum):
    """Kinds of resource a request path can target."""

    ACCOUNT = "account"
    USER = "user"
    ORGANIZATION = "organization"
    MUSHAF = "mushaf"
    QURAN_SURAH = "quran_surah"
    QURAN_AYAH = "quran_ayah"
    QURAN_WORD = "quran_word"
    TRANSLATION = "translation"
    TRANSLATION_TEXT = "translation_text"
    PERMISSION = "permission"
    UNKNOWN = "unknown"
