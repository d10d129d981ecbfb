from __future__ import annotations

from engine import config

SUPPORTED_LOCALES: tuple[str, ...] = ("en", "ko")


def normalize_locale(code: str | None) -> str:
    """Map a language tag such as ``ko-KR`` or ``en_US`` onto a supported locale."""
    fallback = (config.DEFAULT_LOCALE or "en").strip().lower()
    if fallback not in SUPPORTED_LOCALES:
        fallback = "en"
    if not code:
        return fallback
    lang_code = code.strip().lower().replace("_", "-")
    if lang_code.startswith("ko"):
        return "ko"
    if lang_code.startswith("en"):
        return "en"
    return fallback


def pick(locale: str | None, en: str, ko: str) -> str:
    return ko if normalize_locale(locale) == "ko" and ko else en


__all__ = ["SUPPORTED_LOCALES", "normalize_locale", "pick"]
