"""
Constructors for CustomError

``new`` builds a validated error from a message and options. The shapes
(``new_missing_error("id")`` -> "missing id", status 400) format the subject
with the template of the selected language:

    new_invalid_error("id", with_language("es"))   # "id inválido"

``factory``/``new_factory`` build unvalidated templates meant to be
specialized later through the instance methods of CustomError.
"""

from __future__ import annotations

from typing import Any, List, Mapping, Optional

from fastapi import status
from pydantic import BaseModel, Field, ValidationError

from customerror.config.settings import get_settings
from customerror.errors.custom_error import CustomError, Option
from customerror.errors.fault import abort
from customerror.errors.options import (
    with_baseline,
    with_fields,
    with_message,
    with_status_code,
    with_tag,
)
from customerror.i18n.templates import ErrorKind, get_language_error_map
from customerror.utils.http_status import MAX_STATUS_CODE, MIN_STATUS_CODE, status_text

__all__ = [
    "factory",
    "new",
    "new_factory",
    "new_failed_to_error",
    "new_http_error",
    "new_invalid_error",
    "new_missing_error",
    "new_not_found_error",
    "new_required_error",
    "with_baseline",
]


class _CustomErrorModel(BaseModel):
    """Structural rules every built error must satisfy"""

    message: str = Field(min_length=3)
    code: Optional[str] = Field(default=None, min_length=2)
    status_code: Optional[int] = Field(default=None, ge=MIN_STATUS_CODE, le=MAX_STATUS_CODE)


def _describe(exc: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


def _configure(message: str, options: List[Option]) -> CustomError:
    cE = CustomError()
    for option in [with_message(message), *options]:
        option(cE)

    # A translation registered for the selected language wins over the
    # message, whichever option came first.
    if cE.language is not None:
        translated = cE.language_messages.get(cE.language)
        if translated:
            cE.message = translated
    return cE


def _finalize(cE: CustomError) -> Optional[CustomError]:
    if not cE.message:
        if cE.status_code:
            cE.message = status_text(cE.status_code)
        elif cE.code:
            cE.message = cE.code

    if any(predicate(cE) for predicate in cE._ignore_predicates):
        return None

    try:
        _CustomErrorModel(
            message=cE.message,
            code=cE.code or None,
            status_code=cE.status_code or None,
        )
    except ValidationError as e:
        abort(_describe(e), e)

    return cE


def new(message: str, *options: Option) -> Optional[CustomError]:
    """
    Build a validated CustomError.

    Args:
        message: Error message; may be empty when a status code or code is set
        *options: Options applied in order

    Returns:
        The error, or None when an ignore option matched
    """
    return _finalize(_configure(message, list(options)))


def _new_shaped(
    kind: ErrorKind, subject: str, default_status: int, options: List[Option]
) -> Optional[CustomError]:
    cE = _configure(subject, [with_status_code(default_status), *options])

    store = cE._template_store if cE._template_store is not None else get_language_error_map()
    template = store.resolve(cE.language or get_settings().default_language, kind)
    cE.message = template % cE.message

    return _finalize(cE)


def new_failed_to_error(subject: str, *options: Option) -> Optional[CustomError]:
    """e.g. "failed to create host". Default status code is 500."""
    return _new_shaped(
        ErrorKind.FAILED_TO, subject, status.HTTP_500_INTERNAL_SERVER_ERROR, list(options)
    )


def new_invalid_error(subject: str, *options: Option) -> Optional[CustomError]:
    """e.g. "invalid port". Default status code is 400."""
    return _new_shaped(ErrorKind.INVALID, subject, status.HTTP_400_BAD_REQUEST, list(options))


def new_missing_error(subject: str, *options: Option) -> Optional[CustomError]:
    """e.g. "missing host". Default status code is 400."""
    return _new_shaped(ErrorKind.MISSING, subject, status.HTTP_400_BAD_REQUEST, list(options))


def new_required_error(subject: str, *options: Option) -> Optional[CustomError]:
    """e.g. "port required". Default status code is 400."""
    return _new_shaped(ErrorKind.REQUIRED, subject, status.HTTP_400_BAD_REQUEST, list(options))


def new_not_found_error(subject: str, *options: Option) -> Optional[CustomError]:
    """e.g. "host not found". Default status code is 404."""
    return _new_shaped(ErrorKind.NOT_FOUND, subject, status.HTTP_404_NOT_FOUND, list(options))


def new_http_error(status_code: int, *options: Option) -> Optional[CustomError]:
    """
    Plain HTTP error, e.g. "not found" for 404.

    The message is always the lower-cased reason phrase of the final status
    code; it is never localized.
    """
    cE = _configure("", [with_status_code(status_code), *options])
    cE.message = status_text(cE.status_code).lower()
    return _finalize(cE)


def factory(message: str, *options: Option) -> CustomError:
    """
    Unvalidated template for later specialization, e.g.

        base = factory("id", with_tag("api"))
        base.new_missing_error(with_code("E1010"))
    """
    cE = CustomError()
    for option in [with_message(message), *options]:
        option(cE)
    return cE


def new_factory(fields: Optional[Mapping[str, Any]] = None, *tags: str) -> CustomError:
    """Template carrying only ``fields`` and ``tags``"""
    options: List[Option] = []
    if fields:
        options.append(with_fields(fields))
    if tags:
        options.append(with_tag(*tags))
    return factory("", *options)
