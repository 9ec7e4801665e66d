"""
Language tags for customerror

A language tag is a two-letter lowercase ISO 639-1 code, optionally followed by
a hyphen and a two-letter uppercase ISO 3166-1 alpha-2 country code
("en", "pt-BR"), or the literal "default".
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from customerror.utils.language_tag import is_valid_language_tag


class Language(str):
    """
    Validated language tag.

    Behaves as a plain ``str`` (hashable, comparable with "en") so it can key
    template tables and translation maps directly.
    """

    def __new__(cls, tag: str) -> "Language":
        if isinstance(tag, Language):
            return tag
        if not is_valid_language_tag(tag):
            from customerror.errors.exceptions import InvalidLanguageCodeError

            raise InvalidLanguageCodeError(language=tag)
        return super().__new__(cls, tag)

    def get_root(self) -> str:
        """
        Two-letter root of a region-qualified tag ("pt-BR" -> "pt"); empty
        for tags without a region.
        """
        if len(self) == 5 and self[2] == "-":
            return self[:2]
        return ""

    def __repr__(self) -> str:
        return f"Language({str.__repr__(self)})"


def new_language(tag: str) -> Language:
    """
    Create a Language, raising InvalidLanguageCodeError for malformed tags.

    Args:
        tag: Language tag such as "en" or "pt-BR"
    """
    return Language(tag)


def is_valid_language(tag: Optional[str]) -> bool:
    return is_valid_language_tag(tag)


CHINESE = Language("ch")
ENGLISH = Language("en")
FRENCH = Language("fr")
GERMAN = Language("de")
ITALIAN = Language("it")
PORTUGUESE = Language("pt")
SPANISH = Language("es")

BUILT_IN_LANGUAGES: Tuple[Language, ...] = (
    CHINESE,
    ENGLISH,
    FRENCH,
    GERMAN,
    ITALIAN,
    PORTUGUESE,
    SPANISH,
)


def parse_accept_language(header: Optional[str]) -> List[Language]:
    """
    Parse an Accept-Language header into valid tags ordered by quality.

    Entries that are not valid language tags (e.g. "*" or "en-us") are
    dropped.

    Args:
        header: Raw header value, e.g. "pt-BR,pt;q=0.9,en;q=0.8"

    Returns:
        Languages, highest quality first
    """
    if not header:
        return []

    weighted: List[Tuple[Language, float]] = []
    for part in header.split(","):
        part = part.strip()
        if not part:
            continue

        tag, _, params = part.partition(";")
        tag = tag.strip()
        quality = 1.0
        params = params.strip()
        if params.startswith("q="):
            try:
                quality = float(params[2:])
            except ValueError:
                quality = 0.0

        if quality <= 0 or not is_valid_language(tag):
            continue
        weighted.append((Language(tag), quality))

    # sorted() is stable, so equal weights keep header order
    weighted = sorted(weighted, key=lambda item: item[1], reverse=True)
    return [language for language, _ in weighted]
