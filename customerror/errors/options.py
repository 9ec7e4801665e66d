"""
Functional options for building a CustomError

An option is a callable applied to a CustomError under construction, in the
order given:

    new("failed to parse body", with_code("E1010"), with_error(exc), with_tag("api"))
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Mapping

from customerror.errors.custom_error import CustomError, IgnorePredicate, Option, inherit
from customerror.errors.exceptions import (
    InvalidLanguageCodeError,
    InvalidLanguageErrorMessageError,
    InvalidLanguageMessageMapError,
)
from customerror.errors.fault import abort
from customerror.i18n.language import Language, is_valid_language

if TYPE_CHECKING:
    from customerror.i18n.templates import TemplateStore


def with_error(err: BaseException) -> Option:
    """Wrap ``err`` as the cause"""
    def option(cE: CustomError) -> None:
        cE.cause = err
    return option


def with_message(message: str) -> Option:
    def option(cE: CustomError) -> None:
        cE.message = message
    return option


def with_code(code: str) -> Option:
    def option(cE: CustomError) -> None:
        cE.code = code
    return option


def with_status_code(status_code: int) -> Option:
    def option(cE: CustomError) -> None:
        cE.status_code = status_code
    return option


def with_ignore_func(predicate: IgnorePredicate) -> Option:
    """
    Suppress the error when ``predicate`` returns True.

    Predicates are evaluated once the error is fully built, so they see the
    final message, code and cause. A suppressed constructor returns None.
    """
    def option(cE: CustomError) -> None:
        cE._ignore_predicates.append(predicate)
    return option


def with_ignore_string(*needles: str) -> Option:
    """Suppress the error when its message or cause contains any of ``needles``"""
    def predicate(cE: CustomError) -> bool:
        haystacks = [cE.message]
        if cE.cause is not None:
            haystacks.append(str(cE.cause))
        return any(needle and needle in haystack for needle in needles for haystack in haystacks)
    return with_ignore_func(predicate)


def with_tag(*tags: str) -> Option:
    def option(cE: CustomError) -> None:
        cE.tags.update(tags)
    return option


def with_fields(fields: Mapping[str, Any]) -> Option:
    """Replace all fields"""
    snapshot: Dict[str, Any] = dict(fields)

    def option(cE: CustomError) -> None:
        cE.fields = type(cE.fields)(snapshot)
    return option


def with_field(key: str, value: Any) -> Option:
    """Add or overwrite a single field"""
    def option(cE: CustomError) -> None:
        cE.fields.set(key, value)
    return option


def with_language(language: str) -> Option:
    """
    Select the language of the error.

    The language picks the shape template (``invalid %s``, ``%s inválido``...)
    and, when a translation was registered for it, replaces the message.
    """
    if not is_valid_language(language):
        abort(f"Language {language!r} is not a valid language code", InvalidLanguageCodeError(language=language))
    selected = Language(language)

    def option(cE: CustomError) -> None:
        cE._language = selected
        translated = cE.language_messages.get(selected)
        if translated:
            cE.message = translated
    return option


def with_translation(language: str, message: str) -> Option:
    """Register the message to use when ``language`` is selected"""
    if not is_valid_language(language):
        abort(f"Language {language!r} is not a valid language code", InvalidLanguageCodeError(language=language))
    if not isinstance(message, str):
        abort(
            f"Translation for {language!r} must be a string",
            InvalidLanguageErrorMessageError(language=language),
        )
    selected = Language(language)

    def option(cE: CustomError) -> None:
        cE.language_messages.set(selected, message)
    return option


def with_translations(translations: Mapping[str, str]) -> Option:
    """Register several translations at once"""
    if not isinstance(translations, Mapping):
        abort(
            "Translations must be a mapping of language codes to messages",
            InvalidLanguageMessageMapError(),
        )
    options = [with_translation(language, message) for language, message in translations.items()]

    def option(cE: CustomError) -> None:
        for translate in options:
            translate(cE)
    return option


def with_template_store(store: "TemplateStore") -> Option:
    """Resolve shape templates against ``store`` instead of the process-wide one"""
    def option(cE: CustomError) -> None:
        cE._template_store = store
    return option


def with_baseline(source: CustomError) -> Option:
    """Start from everything ``source`` carries except its message"""
    def option(cE: CustomError) -> None:
        inherit(source, cE)
    return option

