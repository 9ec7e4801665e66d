"""
Internationalization support for customerror: language tags and the
per-language prefix templates used by the error shapes.
"""

from .language import (
    BUILT_IN_LANGUAGES,
    CHINESE,
    ENGLISH,
    FRENCH,
    GERMAN,
    ITALIAN,
    PORTUGUESE,
    SPANISH,
    Language,
    is_valid_language,
    new_language,
    parse_accept_language,
)
from .templates import (
    ErrorKind,
    TemplateStore,
    get_language_error_map,
    get_language_error_type_map,
    get_template,
    new_error_prefix_map,
    reset_language_error_map,
    set_error_prefix_map,
)

__all__ = [
    "BUILT_IN_LANGUAGES",
    "CHINESE",
    "ENGLISH",
    "FRENCH",
    "GERMAN",
    "ITALIAN",
    "PORTUGUESE",
    "SPANISH",
    "ErrorKind",
    "Language",
    "TemplateStore",
    "get_language_error_map",
    "get_language_error_type_map",
    "get_template",
    "is_valid_language",
    "new_error_prefix_map",
    "new_language",
    "parse_accept_language",
    "reset_language_error_map",
    "set_error_prefix_map",
]
