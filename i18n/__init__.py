"""Internationalization system for SkinEval.

Usage: from i18n import t; t("key", name=value)
"""

import json
import logging
import sys
from collections import OrderedDict
from pathlib import Path

from PyQt6.QtCore import QSettings

logger = logging.getLogger(__name__)

ORGANIZATION = "SkinEval"
APPLICATION = "SkinEval"

LANGUAGES = OrderedDict([
    ("en", {"name": "English", "native_name": "English"}),
    ("es", {"name": "Spanish", "native_name": "Español"}),
])

_translations: dict = {}
_fallback: dict = {}
_current_lang: str = "en"


def _get_i18n_dir() -> Path:
    """Get the directory containing translation JSON files."""
    if getattr(sys, "frozen", False):
        return Path(sys._MEIPASS) / "i18n"
    return Path(__file__).parent


def _load_json(lang_code: str) -> dict:
    """Load a translation JSON file."""
    path = _get_i18n_dir() / f"{lang_code}.json"
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (FileNotFoundError, json.JSONDecodeError) as e:
        logger.warning("Cannot load translations from %s: %s", path, e)
        return {}


def get_settings() -> QSettings:
    return QSettings(ORGANIZATION, APPLICATION)


def init(lang_code: str = None):
    """Initialize the translation system. Call once at app startup.

    Without ``lang_code`` the saved preference is used.
    """
    global _translations, _fallback, _current_lang
    if lang_code is None:
        lang_code = get_settings().value("language", "en")
    _current_lang = lang_code if lang_code in LANGUAGES else "en"

    _fallback = _load_json("en")
    if _current_lang != "en":
        _translations = _load_json(_current_lang)
    else:
        _translations = _fallback


def t(key: str, **kwargs) -> str:
    """Translate a key with optional format arguments.

    Falls back: current language -> English -> raw key.
    """
    text = _translations.get(key) or _fallback.get(key) or key
    if kwargs:
        try:
            return text.format(**kwargs)
        except (KeyError, IndexError, ValueError):
            return text
    return text


def get_current_language() -> str:
    """Get the current language code."""
    return _current_lang


def set_language(code: str):
    """Save language preference. Takes effect on restart."""
    if code not in LANGUAGES:
        raise ValueError(f"Unsupported language: {code}")
    get_settings().setValue("language", code)


def is_rtl() -> bool:
    """Check if the current language uses right-to-left layout."""
    meta = _translations.get("_meta", {})
    if isinstance(meta, dict):
        return meta.get("direction", "ltr") == "rtl"
    return False
