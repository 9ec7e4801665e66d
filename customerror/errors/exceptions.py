"""
Errors raised by customerror itself

Each class is a CustomError with a fixed message, code and status code, so
callers can match them with ``is_error(err, TemplateNotFoundError)`` or a plain
``except`` clause. Context (the offending language, code, ...) is attached as
fields. A new instance is created for every raise.
"""

from typing import Any

from fastapi import status

from customerror.errors.custom_error import CustomError


class CustomErrorLibraryError(CustomError):
    """Base class for errors raised by the library"""

    default_message = "custom error failure"
    default_code = "CE_ERR"
    default_status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, **fields: Any):
        super().__init__(
            self.default_message,
            code=self.default_code,
            status_code=self.default_status_code,
            fields={key: value for key, value in fields.items() if value is not None},
        )


class InvalidLanguageCodeError(CustomErrorLibraryError):
    default_message = (
        "invalid language code. It must be a two-letter lowercase ISO 639-1 code, "
        "optionally followed by a hyphen and a two-letter uppercase ISO 3166-1 "
        "alpha-2 country code, e.g. en or pt-BR"
    )
    default_code = "CE_ERR_INVALID_LANG_CODE"
    default_status_code = status.HTTP_400_BAD_REQUEST


class InvalidLanguageErrorMessageError(CustomErrorLibraryError):
    default_message = "invalid language error message. It must be a string"
    default_code = "CE_ERR_INVALID_LANG_ERROR_MESSAGE"
    default_status_code = status.HTTP_400_BAD_REQUEST


class InvalidLanguageMessageMapError(CustomErrorLibraryError):
    default_message = (
        "invalid language message map. It must map language codes to messages"
    )
    default_code = "CE_ERR_INVALID_LANGUAGE_MESSAGE_MAP"
    default_status_code = status.HTTP_400_BAD_REQUEST


class TemplateNotFoundError(CustomErrorLibraryError):
    default_message = (
        "template not found. Please set one using `set_error_prefix_map`. "
        "Built-in languages: ch, en, fr, de, it, pt, es"
    )
    default_code = "CE_ERR_TEMPLATE_NOT_FOUND"
    default_status_code = status.HTTP_404_NOT_FOUND


class LanguageNotFoundError(CustomErrorLibraryError):
    default_message = "language not found. Please set one using `set_error_prefix_map`"
    default_code = "CE_ERR_LANGUAGE_NOT_FOUND"
    default_status_code = status.HTTP_404_NOT_FOUND


class CatalogErrorNotFoundError(CustomErrorLibraryError):
    default_message = "missing error"
    default_code = "CE_ERR_CATALOG_ERR_NOT_FOUND"
    default_status_code = status.HTTP_404_NOT_FOUND


class CatalogInvalidNameError(CustomErrorLibraryError):
    default_message = "invalid name. It must be at least 4 characters long"
    default_code = "CE_ERR_CATALOG_INVALID_NAME"
    default_status_code = status.HTTP_400_BAD_REQUEST


class ErrorCodeInvalidCodeError(CustomErrorLibraryError):
    default_message = (
        "invalid error code. It must be upper-case words and digits separated "
        "by underscores, e.g. E1010 or ERR_INVALID_REQUEST"
    )
    default_code = "CE_ERR_INVALID_ERROR_CODE"
    default_status_code = status.HTTP_400_BAD_REQUEST
