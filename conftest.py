from __future__ import annotations

import os


def _ensure_test_environment() -> None:
    # Construction faults must raise instead of exiting the test process.
    os.environ["CUSTOMERROR_ENVIRONMENT"] = "testing"
    os.environ.setdefault("CUSTOMERROR_DEFAULT_LANGUAGE", "en")
    os.environ.setdefault("CUSTOMERROR_LOG_LEVEL", "INFO")


_ensure_test_environment()
