"""
Per-language prefix templates for the error shapes

Each language maps every ErrorKind to a format string with exactly one ``%s``
slot for the subject:

    get_template("en", ErrorKind.MISSING)   # "missing %s"
    get_template("es", ErrorKind.INVALID)   # "%s inválido"

Custom languages are registered with ``set_error_prefix_map``.
"""

from __future__ import annotations

import threading
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Union

from customerror.errors.exceptions import (
    InvalidLanguageErrorMessageError,
    LanguageNotFoundError,
    TemplateNotFoundError,
)
from customerror.i18n.language import (
    CHINESE,
    ENGLISH,
    FRENCH,
    GERMAN,
    ITALIAN,
    PORTUGUESE,
    SPANISH,
    Language,
)
from customerror.utils.app_logger import get_logger
from customerror.utils.concurrent import ConcurrentDict

logger = get_logger(__name__)


class ErrorKind(str, Enum):
    """Shapes that have a per-language prefix template"""
    FAILED_TO = "failed to"
    INVALID = "invalid"
    MISSING = "missing"
    NOT_FOUND = "not found"
    REQUIRED = "required"


ErrorPrefixMap = Mapping[ErrorKind, str]


def is_valid_template(template: object) -> bool:
    """A template formats one subject: exactly one ``%s``, other percents escaped"""
    if not isinstance(template, str) or template.replace("%%", "").count("%s") != 1:
        return False
    try:
        template % ""
    except (TypeError, ValueError):
        return False
    return True


def new_error_prefix_map(
    failed_to: str,
    invalid: str,
    missing: str,
    required: str,
    not_found: str,
) -> Dict[ErrorKind, str]:
    """
    Build a complete prefix map for one language.

    Every template should hold exactly one ``%s`` slot for the subject.
    """
    return {
        ErrorKind.FAILED_TO: failed_to,
        ErrorKind.INVALID: invalid,
        ErrorKind.MISSING: missing,
        ErrorKind.REQUIRED: required,
        ErrorKind.NOT_FOUND: not_found,
    }


BUILT_IN_TEMPLATES: Dict[Language, Dict[ErrorKind, str]] = {
    CHINESE: new_error_prefix_map("无法 %s", "无效的 %s", "缺少 %s", "需要 %s", "%s 未找到"),
    ENGLISH: new_error_prefix_map(
        "failed to %s", "invalid %s", "missing %s", "%s required", "%s not found"
    ),
    SPANISH: new_error_prefix_map(
        "error al %s", "%s inválido", "falta %s", "%s requerido", "%s no encontrado"
    ),
    FRENCH: new_error_prefix_map(
        "échec de %s", "%s invalide", "%s manquant", "%s requis", "%s introuvable"
    ),
    GERMAN: new_error_prefix_map(
        "fehlgeschlagen bei %s", "ungültig %s", "fehlend %s", "%s erforderlich",
        "%s nicht gefunden",
    ),
    ITALIAN: new_error_prefix_map(
        "impossible %s", "%s non valido", "mancante %s", "%s richiesto", "%s non trovato"
    ),
    PORTUGUESE: new_error_prefix_map(
        "falhou %s", "%s é inválido", "faltando %s", "%s necessário", "%s não encontrado"
    ),
}


def _kind(kind: Union[ErrorKind, str]) -> ErrorKind:
    try:
        return ErrorKind(kind)
    except ValueError:
        raise TemplateNotFoundError(kind=str(kind)) from None


class TemplateStore:
    """
    Thread-safe Language -> {ErrorKind: template} table.

    Stored maps are read-only views; ``set`` replaces a language's map as a
    whole.
    """

    def __init__(self):
        self._maps: ConcurrentDict[Language, Mapping[ErrorKind, str]] = ConcurrentDict()

    @classmethod
    def with_builtin_languages(cls) -> "TemplateStore":
        store = cls()
        for language, prefix_map in BUILT_IN_TEMPLATES.items():
            store.set(language, prefix_map)
        logger.debug(f"Template store seeded with {len(BUILT_IN_TEMPLATES)} built-in languages")
        return store

    def set(self, language: Union[Language, str], prefix_map: ErrorPrefixMap) -> None:
        """
        Register (or replace) the templates of ``language``

        Raises:
            InvalidLanguageCodeError: when ``language`` is not a valid tag
            TemplateNotFoundError: when a key is not an ErrorKind
            InvalidLanguageErrorMessageError: when a template does not hold
                exactly one ``%s`` slot
        """
        language = Language(language)
        checked: Dict[ErrorKind, str] = {}
        for kind, template in prefix_map.items():
            error_kind = _kind(kind)
            if not is_valid_template(template):
                raise InvalidLanguageErrorMessageError(
                    language=str(language), kind=error_kind.value, template=repr(template)
                )
            checked[error_kind] = template
        frozen = MappingProxyType(checked)
        self._maps.set(language, frozen)

    def get_language_error_type_map(self, language: Union[Language, str]) -> Mapping[ErrorKind, str]:
        """
        Raises:
            LanguageNotFoundError: when ``language`` has no templates
        """
        prefix_map = self._maps.get(Language(language))
        if prefix_map is None:
            raise LanguageNotFoundError(language=str(language))
        return prefix_map

    def get_template(self, language: Union[Language, str], kind: Union[ErrorKind, str]) -> str:
        """
        Raises:
            LanguageNotFoundError: when ``language`` has no templates
            TemplateNotFoundError: when the language lacks ``kind``
        """
        prefix_map = self.get_language_error_type_map(language)
        error_kind = _kind(kind)
        template = prefix_map.get(error_kind)
        if template is None:
            raise TemplateNotFoundError(language=str(language), kind=error_kind.value)
        return template

    def resolve(self, language: Optional[Union[Language, str]], kind: Union[ErrorKind, str]) -> str:
        """
        Template used when building a shaped error.

        Lookup order: the exact language, its root ("en-US" -> "en"), then
        English.
        """
        error_kind = _kind(kind)
        candidates = []
        if language:
            language = Language(language)
            candidates.append(language)
            root = language.get_root()
            if root:
                candidates.append(Language(root))
        candidates.append(ENGLISH)

        for candidate in candidates:
            prefix_map = self._maps.get(candidate)
            if prefix_map is not None and error_kind in prefix_map:
                return prefix_map[error_kind]

        raise TemplateNotFoundError(language=str(language or ENGLISH), kind=error_kind.value)

    def languages(self):
        return sorted(self._maps.keys())

    def __contains__(self, language) -> bool:
        return language in self._maps

    def __len__(self) -> int:
        return len(self._maps)


_language_error_map: Optional[TemplateStore] = None
_language_error_map_lock = threading.Lock()


def get_language_error_map() -> TemplateStore:
    """Process-wide template store, seeded with the built-in languages on first use"""
    global _language_error_map
    if _language_error_map is None:
        with _language_error_map_lock:
            if _language_error_map is None:
                _language_error_map = TemplateStore.with_builtin_languages()
    return _language_error_map


def reset_language_error_map() -> None:
    """Drop the process-wide store; the next access reseeds it (useful for testing)"""
    global _language_error_map
    with _language_error_map_lock:
        _language_error_map = None


def _resolve_store(store: Optional[TemplateStore]) -> TemplateStore:
    return store if store is not None else get_language_error_map()


def get_language_error_type_map(
    language: Union[Language, str], store: Optional[TemplateStore] = None
) -> Mapping[ErrorKind, str]:
    return _resolve_store(store).get_language_error_type_map(language)


def get_template(
    language: Union[Language, str],
    kind: Union[ErrorKind, str],
    store: Optional[TemplateStore] = None,
) -> str:
    """
    Template of ``kind`` for ``language``.

    Raises:
        LanguageNotFoundError: when ``language`` has no templates
        TemplateNotFoundError: when the language lacks ``kind``
    """
    return _resolve_store(store).get_template(language, kind)


def set_error_prefix_map(
    language: Union[Language, str],
    prefix_map: ErrorPrefixMap,
    store: Optional[TemplateStore] = None,
) -> None:
    """Register templates for a language; replaces any existing map"""
    target = _resolve_store(store)
    replaced = language in target
    target.set(language, prefix_map)
    if replaced:
        logger.info(f"Error prefix map for '{language}' replaced")
