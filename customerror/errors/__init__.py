"""
Structured errors: the CustomError value, its options and constructors, the
error catalog and the errors raised by the library itself.
"""

# Import order matters: exceptions must be loaded before i18n pulls it in.
from .custom_error import CustomError, WrappedError, as_custom_error, is_error, merge, wrap
from .exceptions import (
    CatalogErrorNotFoundError,
    CatalogInvalidNameError,
    CustomErrorLibraryError,
    ErrorCodeInvalidCodeError,
    InvalidLanguageCodeError,
    InvalidLanguageErrorMessageError,
    InvalidLanguageMessageMapError,
    LanguageNotFoundError,
    TemplateNotFoundError,
)
from .fault import InvalidCustomErrorFault
from .options import (
    with_baseline,
    with_code,
    with_error,
    with_field,
    with_fields,
    with_ignore_func,
    with_ignore_string,
    with_language,
    with_message,
    with_status_code,
    with_tag,
    with_template_store,
    with_translation,
    with_translations,
)
from .builtin import (
    factory,
    new,
    new_factory,
    new_failed_to_error,
    new_http_error,
    new_invalid_error,
    new_missing_error,
    new_not_found_error,
    new_required_error,
)
from .catalog import Catalog, ErrorCode, new_catalog, new_error_code

__all__ = [
    "Catalog",
    "CatalogErrorNotFoundError",
    "CatalogInvalidNameError",
    "CustomError",
    "CustomErrorLibraryError",
    "ErrorCode",
    "ErrorCodeInvalidCodeError",
    "InvalidCustomErrorFault",
    "InvalidLanguageCodeError",
    "InvalidLanguageErrorMessageError",
    "InvalidLanguageMessageMapError",
    "LanguageNotFoundError",
    "TemplateNotFoundError",
    "WrappedError",
    "as_custom_error",
    "factory",
    "is_error",
    "merge",
    "new",
    "new_catalog",
    "new_error_code",
    "new_factory",
    "new_failed_to_error",
    "new_http_error",
    "new_invalid_error",
    "new_missing_error",
    "new_not_found_error",
    "new_required_error",
    "with_baseline",
    "with_code",
    "with_error",
    "with_field",
    "with_fields",
    "with_ignore_func",
    "with_ignore_string",
    "with_language",
    "with_message",
    "with_status_code",
    "with_tag",
    "with_template_store",
    "with_translation",
    "with_translations",
    "wrap",
]
