"""
CustomError - the structured error value

A CustomError provides context - a ``message`` to an optionally wrapped
``cause``. Additionally a ``code`` (e.g. "E1010"), an HTTP ``status_code``,
``tags``, ``fields`` and per-language message translations can be attached.

    err = new_missing_error("id", with_code("E1010"), with_tag("api"))
    str(err)          # "E1010: missing id. Tags: api"
    err.api_error()   # "E1010: missing id (400 - Bad Request). Tags: api"
"""

from __future__ import annotations

import json
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Set,
    Type,
    TypeVar,
)

from customerror.utils.concurrent import ConcurrentDict
from customerror.utils.http_status import status_text

if TYPE_CHECKING:
    from customerror.i18n.language import Language
    from customerror.i18n.templates import TemplateStore

Option = Callable[["CustomError"], None]
IgnorePredicate = Callable[["CustomError"], bool]

E = TypeVar("E", bound=BaseException)


class CustomError(Exception):
    """
    Structured application error.

    Attributes:
        message: Human readable message, at least 3 characters once built
        code: Optional code such as "E1010" (at least 2 characters)
        cause: Optional wrapped exception, also exposed as ``__cause__``
        status_code: Optional HTTP status code in [100, 511]; 0 means unset
        tags: Set of categorization tags, rendered sorted
        fields: Thread-safe key/value context, rendered sorted by key
        language_messages: Thread-safe language -> message translations
    """

    def __init__(
        self,
        message: str = "",
        *,
        code: str = "",
        cause: Optional[BaseException] = None,
        status_code: int = 0,
        tags: Optional[Iterable[str]] = None,
        fields: Optional[Mapping[str, Any]] = None,
        language_messages: Optional[Mapping[str, str]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.cause = cause
        self.status_code = status_code
        self.tags: Set[str] = set(tags or ())
        self.fields: ConcurrentDict[str, Any] = ConcurrentDict(fields)
        self.language_messages: ConcurrentDict[str, str] = ConcurrentDict(language_messages)

        # Transient construction state, never rendered nor serialized.
        self._ignore_predicates: List[IgnorePredicate] = []
        self._language: Optional["Language"] = None
        self._template_store: Optional["TemplateStore"] = None

    @property
    def cause(self) -> Optional[BaseException]:
        return self._cause

    @cause.setter
    def cause(self, err: Optional[BaseException]) -> None:
        self._cause = err
        self.__cause__ = err

    @property
    def language(self) -> Optional["Language"]:
        """Language selected with ``with_language``, if any"""
        return self._language

    def set_message(self, message: str) -> None:
        self.message = message

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------

    def _code_and_message(self) -> str:
        if not self.code:
            return self.message
        if self.message == self.code:
            return self.code
        return f"{self.code}: {self.message}"

    def _status_segment(self) -> str:
        if not self.status_code:
            return ""
        reason = status_text(self.status_code)
        if self.message == reason:
            return f" ({self.status_code})"
        return f" ({self.status_code} - {reason})"

    def _with_cause(self, text: str) -> str:
        if self.cause is None:
            return text
        return f"{text}. Original Error: {self.cause}"

    def _with_tags_and_fields(self, text: str) -> str:
        if self.tags:
            text = f"{text}. Tags: {', '.join(sorted(self.tags))}"
        fields = sorted(self.fields.items(), key=lambda item: item[0])
        if fields:
            text = f"{text}. Fields: {', '.join(f'{k}={v}' for k, v in fields)}"
        return text

    def error(self) -> str:
        """
        Full message: code, message, wrapped error, tags and fields.

        Format: ``[code: ]message[. Original Error: cause][. Tags: ...][. Fields: ...]``
        """
        return self._with_tags_and_fields(self._with_cause(self._code_and_message()))

    def api_error(self) -> str:
        """Like ``error()`` plus the status code right after the message"""
        text = self._code_and_message() + self._status_segment()
        return self._with_tags_and_fields(self._with_cause(text))

    def just_error(self) -> str:
        """Message and wrapped error only"""
        return self._with_cause(self.message)

    def __str__(self) -> str:
        return self.error()

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, code={self.code!r}, "
            f"status_code={self.status_code!r})"
        )

    # ------------------------------------------------------------------
    # Chain
    # ------------------------------------------------------------------

    def is_(self, target: Any) -> bool:
        """True when the wrapped error is ``target`` (one level only)"""
        if self.cause is None:
            return False
        return self.cause is target or self.cause == target

    def unwrap(self) -> Optional[BaseException]:
        return self.cause

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """
        JSON view.

        Fields are flattened as siblings of ``message``/``code``/``tags``, so a
        field named ``code`` or ``message`` overwrites those keys.
        """
        payload: Dict[str, Any] = {"message": self.just_error()}
        if self.code:
            payload["code"] = self.code
        if self.tags:
            payload["tags"] = sorted(self.tags)
        for key, value in self.fields.items():
            if key and value is not None:
                payload[key] = value
        return payload

    def to_json(self, **kwargs: Any) -> str:
        kwargs.setdefault("sort_keys", True)
        kwargs.setdefault("separators", (",", ":"))
        kwargs.setdefault("ensure_ascii", False)
        kwargs.setdefault("default", str)
        return json.dumps(self.to_dict(), **kwargs)

    # ------------------------------------------------------------------
    # Derivation
    # ------------------------------------------------------------------

    def copy(self) -> "CustomError":
        return merge(self, CustomError())

    def new_child_error(self, *options: Option) -> "CustomError":
        """
        Derive an unvalidated child.

        The child starts as a copy of this error and ``options`` are applied
        to the copy, so they see inherited state: ``with_language`` picks up
        the parent's translations, ``with_tag``/``with_field`` add to the
        inherited ones and ``with_fields`` replaces them. The parent is never
        mutated.
        """
        child = self.copy()
        for option in options:
            option(child)
        return child

    def new(self, *options: Option) -> Optional["CustomError"]:
        """Validated error from this template. Preferred for translations."""
        from customerror.errors import builtin

        child = self.new_child_error(*options)
        return builtin.new(child.message, builtin.with_baseline(child))

    def new_failed_to_error(self, *options: Option) -> Optional["CustomError"]:
        from customerror.errors import builtin

        child = self.new_child_error(*options)
        return builtin.new_failed_to_error(child.message, builtin.with_baseline(child))

    def new_invalid_error(self, *options: Option) -> Optional["CustomError"]:
        from customerror.errors import builtin

        child = self.new_child_error(*options)
        return builtin.new_invalid_error(child.message, builtin.with_baseline(child))

    def new_missing_error(self, *options: Option) -> Optional["CustomError"]:
        from customerror.errors import builtin

        child = self.new_child_error(*options)
        return builtin.new_missing_error(child.message, builtin.with_baseline(child))

    def new_required_error(self, *options: Option) -> Optional["CustomError"]:
        from customerror.errors import builtin

        child = self.new_child_error(*options)
        return builtin.new_required_error(child.message, builtin.with_baseline(child))

    def new_not_found_error(self, *options: Option) -> Optional["CustomError"]:
        from customerror.errors import builtin

        child = self.new_child_error(*options)
        return builtin.new_not_found_error(child.message, builtin.with_baseline(child))

    def new_http_error(self, status_code: int, *options: Option) -> Optional["CustomError"]:
        """HTTP error; a status code already set on this error takes precedence"""
        from customerror.errors import builtin

        child = self.new_child_error(*options)
        return builtin.new_http_error(child.status_code or status_code, builtin.with_baseline(child))


def _overlay(source: CustomError, target: CustomError, *, include_message: bool = True) -> None:
    """Copy the values present in ``source`` onto ``target``"""
    if source.code:
        target.code = source.code
    if source.cause is not None:
        target.cause = source.cause
    if include_message and source.message:
        target.message = source.message
    if source.status_code:
        target.status_code = source.status_code
    if source._language is not None:
        target._language = source._language
    if source._template_store is not None:
        target._template_store = source._template_store

    target._ignore_predicates.extend(source._ignore_predicates)
    target.tags.update(source.tags)
    target.fields.update(source.fields.snapshot())
    target.language_messages.update(source.language_messages.snapshot())


def merge(base: CustomError, overlay: CustomError) -> CustomError:
    """
    Combine two errors into a new one.

    Scalars present in ``overlay`` win, tags are united, fields and
    translations are merged key-wise with ``overlay`` winning. Containers are
    copied so later mutation of either input never leaks into the result.
    """
    merged = CustomError()
    _overlay(base, merged)
    _overlay(overlay, merged)
    return merged


def inherit(source: CustomError, target: CustomError) -> None:
    """Overlay everything but the message of ``source`` onto ``target``"""
    _overlay(source, target, include_message=False)


class WrappedError(Exception):
    """
    Display wrapper around ``error``.

    Renders ``"<error>. Wrapped Error(s): <e1>. <e2>"`` while ``unwrap()`` (and
    ``is_error``) still resolve to ``error``.
    """

    def __init__(self, error: BaseException, *errors: Optional[BaseException]):
        self.error = error
        self.errors = tuple(err for err in errors if err is not None)
        super().__init__(self._render())
        self.__cause__ = error

    def _render(self) -> str:
        if not self.errors:
            return str(self.error)
        extra = ". ".join(str(err) for err in self.errors)
        return f"{self.error}. Wrapped Error(s): {extra}"

    def __str__(self) -> str:
        return self._render()

    def unwrap(self) -> BaseException:
        return self.error


def wrap(error: BaseException, *errors: Optional[BaseException]) -> WrappedError:
    """Wrap ``error`` around ``errors`` without changing its identity"""
    return WrappedError(error, *errors)


def _next_in_chain(err: BaseException) -> Optional[BaseException]:
    unwrap = getattr(err, "unwrap", None)
    if callable(unwrap):
        return unwrap()
    return err.__cause__


def is_error(err: Optional[BaseException], target: Any) -> bool:
    """
    Walk the error chain looking for ``target``.

    ``target`` may be an error instance (identity, or a CustomError wrapping
    it) or an exception class.
    """
    seen: Set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        if err is target:
            return True
        if isinstance(target, type) and isinstance(err, target):
            return True
        if isinstance(err, CustomError) and err.is_(target):
            return True
        err = _next_in_chain(err)
    return False


def as_custom_error(
    err: Optional[BaseException], cls: Type[E] = CustomError  # type: ignore[assignment]
) -> Optional[E]:
    """First error in the chain that is an instance of ``cls``"""
    seen: Set[int] = set()
    while err is not None and id(err) not in seen:
        seen.add(id(err))
        if isinstance(err, cls):
            return err
        err = _next_in_chain(err)
    return None
