"""
Language tag grammar shared by settings and the i18n package

Kept free of package imports so configuration can validate tags before the
error machinery is loaded.
"""

import re
from typing import Any

LANGUAGE_TAG_PATTERN = re.compile(r"^[a-z]{2}(?:-[A-Z]{2})?$|^default$")


def is_valid_language_tag(tag: Any) -> bool:
    return isinstance(tag, str) and LANGUAGE_TAG_PATTERN.fullmatch(tag) is not None
