"""
Catalog of named error templates

A catalog registers error templates once, keyed by a normalized ErrorCode, and
hands them out for per-call instantiation:

    catalog = new_catalog("orders")
    catalog.set("E1010", "invalid response", with_translation("es-ES", "respuesta inválida"))

    raise catalog.get("e1010").new(with_language("es-ES"))
"""

from __future__ import annotations

import re
from typing import Any, Dict, Iterator, List, Optional

from pydantic import BaseModel, Field, ValidationError

from customerror.errors.builtin import factory
from customerror.errors.custom_error import CustomError, Option
from customerror.errors.exceptions import (
    CatalogErrorNotFoundError,
    CatalogInvalidNameError,
    ErrorCodeInvalidCodeError,
)
from customerror.errors.fault import abort
from customerror.utils.app_logger import get_logger
from customerror.utils.concurrent import ConcurrentDict

logger = get_logger(__name__)

ERROR_CODE_PATTERN = re.compile(
    r"^(\d?[A-Z]_)?ERR_[A-Z]\d_[A-Z]\d(_\d[A-Z])?$"
    r"|^ERR_[A-Z]\d_[A-Z]\d(_\d[A-Z])?$"
    r"|^E\d{1,8}$"
    r"|^[A-Z\d]+(_[A-Z\d]+)*$"
)


class ErrorCode(str):
    """
    Catalog key: upper-cased and validated on construction.

    Accepted shapes: ``1A_ERR_A1_B2_3C``, ``ERR_A1_B2``, ``E12345678`` and,
    as a fallback, upper-case words/digits joined by single underscores
    (``INVALID_REQUEST_BODY``).
    """

    def __new__(cls, name: str) -> "ErrorCode":
        if isinstance(name, ErrorCode):
            return name
        normalized = name.upper() if isinstance(name, str) else ""
        if not ERROR_CODE_PATTERN.fullmatch(normalized):
            raise ErrorCodeInvalidCodeError(error_code=name)
        return super().__new__(cls, normalized)


def new_error_code(name: str) -> ErrorCode:
    """
    Raises:
        ErrorCodeInvalidCodeError: when ``name`` does not follow the grammar
    """
    return ErrorCode(name)


class _CatalogModel(BaseModel):
    name: str = Field(min_length=4)


class Catalog:
    """Named, thread-safe ErrorCode -> CustomError template table"""

    def __init__(self, name: str):
        try:
            _CatalogModel(name=name)
        except ValidationError:
            raise CatalogInvalidNameError(name=name) from None

        self.name = name
        self._errors: ConcurrentDict[ErrorCode, CustomError] = ConcurrentDict()

    def set(self, code: str, default_message: str, *options: Option) -> ErrorCode:
        """
        Register the template for ``code``, replacing any previous one.

        Returns:
            The normalized code

        Raises:
            ErrorCodeInvalidCodeError: when ``code`` does not follow the grammar
        """
        error_code = ErrorCode(code)
        if error_code in self._errors:
            logger.debug(f"Catalog '{self.name}': template for {error_code} replaced")
        self._errors.set(error_code, factory(default_message, *options))
        return error_code

    def add(self, code: str, default_message: str, *options: Option) -> None:
        self.set(code, default_message, *options)

    def get(self, code: str, *options: Option) -> CustomError:
        """
        Template registered for ``code``.

        With options, a child of the template configured by them is returned
        instead; the stored template is never modified.

        Raises:
            ErrorCodeInvalidCodeError: when ``code`` does not follow the grammar
            CatalogErrorNotFoundError: when nothing is registered for ``code``
        """
        error_code = ErrorCode(code)
        template = self._errors.get(error_code)
        if template is None:
            raise CatalogErrorNotFoundError(catalog=self.name, error_code=str(error_code))
        if options:
            return template.new_child_error(*options)
        return template

    def must_set(self, code: str, default_message: str, *options: Option) -> ErrorCode:
        try:
            return self.set(code, default_message, *options)
        except ErrorCodeInvalidCodeError as e:
            abort(f"Catalog '{self.name}' cannot register {code!r}", e)

    def must_get(self, code: str, *options: Option) -> CustomError:
        try:
            return self.get(code, *options)
        except (ErrorCodeInvalidCodeError, CatalogErrorNotFoundError) as e:
            abort(f"Catalog '{self.name}' has no error registered for {code!r}", e)

    def codes(self) -> List[ErrorCode]:
        return sorted(self._errors.keys())

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "custom_errors": {
                str(code): template.to_dict() for code, template in sorted(self._errors.items(), key=lambda item: item[0])
            },
        }

    def __contains__(self, code: Any) -> bool:
        try:
            return ErrorCode(code) in self._errors
        except ErrorCodeInvalidCodeError:
            return False

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[ErrorCode]:
        return iter(self.codes())

    def __repr__(self) -> str:
        return f"Catalog(name={self.name!r}, errors={len(self)})"


def new_catalog(name: Optional[str]) -> Catalog:
    """
    Raises:
        CatalogInvalidNameError: when ``name`` is empty or shorter than 4 characters
    """
    return Catalog(name or "")
