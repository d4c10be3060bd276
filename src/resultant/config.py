"""Configuration: frozen Config resolved from the environment."""

from __future__ import annotations

from dataclasses import dataclass
import os

from dotenv import load_dotenv

from resultant.errors import ConfigurationError

load_dotenv()

RENDER_LIMIT_ENV_VAR = "RESULTANT_RENDER_LIMIT"
_DEFAULT_RENDER_LIMIT = 200
_NO_LIMIT_VALUES = frozenset({"", "none"})


@dataclass(frozen=True)
class Config:
    """Immutable configuration for diagnostic rendering.

    Example:
        config = Config(render_limit=80)
        # UnwrapError messages show at most 80 characters of the payload
    """

    #: Characters of payload rendering kept in diagnostics; *None* keeps all.
    render_limit: int | None = _DEFAULT_RENDER_LIMIT

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if self.render_limit is not None and (
            isinstance(self.render_limit, bool)
            or not isinstance(self.render_limit, int)
        ):
            raise ConfigurationError(
                f"render_limit must be an int or None, got {self.render_limit!r}",
                hint="Pass render_limit=200, or None to disable truncation.",
            )
        if self.render_limit is not None and self.render_limit < 1:
            raise ConfigurationError(
                f"render_limit must be ≥ 1, got {self.render_limit}",
                hint="Use None to disable truncation instead of 0.",
            )

    @classmethod
    def from_env(cls) -> Config:
        """Build a Config from ``RESULTANT_RENDER_LIMIT`` (unset keeps the default)."""
        raw = os.environ.get(RENDER_LIMIT_ENV_VAR)
        if raw is None:
            return cls()

        text = raw.strip()
        if text.lower() in _NO_LIMIT_VALUES:
            return cls(render_limit=None)
        try:
            limit = int(text)
        except ValueError:
            raise ConfigurationError(
                f"{RENDER_LIMIT_ENV_VAR} must be an integer, got {raw!r}",
                hint=f"Set {RENDER_LIMIT_ENV_VAR}=200, or 'none' to disable truncation.",
            ) from None
        return cls(render_limit=limit)
