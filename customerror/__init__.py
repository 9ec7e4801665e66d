"""
customerror - structured, localizable application errors

    from customerror import new_missing_error, with_code, with_error

    raise new_missing_error("id", with_code("E1010"), with_error(exc))
"""

from .errors import *  # noqa: F401,F403
from .errors import __all__ as _errors_all
from .i18n import (
    BUILT_IN_LANGUAGES,
    CHINESE,
    ENGLISH,
    FRENCH,
    GERMAN,
    ITALIAN,
    PORTUGUESE,
    SPANISH,
    ErrorKind,
    Language,
    TemplateStore,
    get_language_error_map,
    get_language_error_type_map,
    get_template,
    new_error_prefix_map,
    new_language,
    set_error_prefix_map,
)

__version__ = "0.1.0"

__all__ = [
    *_errors_all,
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
    "new_error_prefix_map",
    "new_language",
    "set_error_prefix_map",
]
