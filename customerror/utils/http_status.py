"""
HTTP status helpers
"""

from http import HTTPStatus

MIN_STATUS_CODE = 100
MAX_STATUS_CODE = 511


def status_text(status_code: int) -> str:
    """
    Standard reason phrase for a status code.

    Args:
        status_code: HTTP status code

    Returns:
        Reason phrase (e.g. "Not Found"), or an empty string for unknown codes
    """
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


def is_valid_status_code(status_code: int) -> bool:
    return MIN_STATUS_CODE <= status_code <= MAX_STATUS_CODE
