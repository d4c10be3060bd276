"""Exception hierarchy for resultant."""

from __future__ import annotations

from typing import Any


class ResultantError(Exception):
    """Base exception for all resultant errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(ResultantError):
    """Configuration validation or resolution failed."""


class UnwrapError(ResultantError):
    """``get_or_raise()`` was called on an ``Err``.

    This is a contract violation rather than a domain failure: the caller
    asserted success and was wrong. The original error payload stays
    available on ``error`` for diagnostics; the message carries a rendering
    of the whole result.
    """

    def __init__(
        self,
        message: str,
        *,
        error: Any = None,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.error = error
