"""Result type for explicit, composable error handling.

A ``Result`` is exactly one of two immutable variants:

- ``Ok(value)``: the computation succeeded.
- ``Err(error)``: the computation failed with a caller-chosen error payload.

Failures flow through the combinators as ordinary data instead of raised
exceptions, so chains of fallible steps read top to bottom and stop at the
first failure.

Example:
    from resultant import Err, Ok, err, ok

    def parse_port(text: str) -> Result[int, str]:
        return ok(int(text)) if text.isdigit() else err(f"not a port: {text!r}")

    port = parse_port("8080").map(lambda p: p + 1).get_or_else(80)

    match parse_port("http"):
        case Ok(value):
            print(f"Port: {value}")
        case Err(error):
            print(f"Failed: {error}")
"""

from __future__ import annotations

import dataclasses
import functools
import logging
import typing

from resultant.config import Config
from resultant.errors import ConfigurationError, UnwrapError

if typing.TYPE_CHECKING:
    from collections.abc import Callable, Iterable

log = logging.getLogger(__name__)

TValue = typing.TypeVar("TValue")
TError = typing.TypeVar("TError")

_UNWRAP_HINT = (
    "Branch on is_ok() first, or handle the Err with get_or_else(), "
    "get_or_else_with() or fold()."
)


@dataclasses.dataclass(frozen=True, slots=True)
class Ok[V]:
    """A successful result carrying ``value``."""

    value: V

    def __repr__(self) -> str:
        return f"Ok({self.value!r})"

    def __str__(self) -> str:
        return f"[Ok: {self.value}]"

    def __hash__(self) -> int:
        return hash(self.value)

    def is_ok(self) -> bool:
        """Return True; this is the success variant."""
        return True

    def is_err(self) -> bool:
        """Return False; this is the success variant."""
        return False

    def map[V2](self, transform: Callable[[V], V2]) -> Ok[V2]:
        """Transform the value.

        ok(100).map(lambda n: n + 1) == ok(101)
        """
        return Ok(transform(self.value))

    def map_error(self, transform: Callable[[typing.Any], object]) -> Ok[V]:
        """Leave the value untouched; there is no error to transform."""
        del transform
        return Ok(self.value)

    def fold[R](
        self,
        transform_value: Callable[[V], R],
        transform_error: Callable[[typing.Any], R],
    ) -> R:
        """Collapse both branches to one type by applying ``transform_value``."""
        del transform_error
        return transform_value(self.value)

    def flat_map[V2, E2](self, transform: Callable[[V], Result[V2, E2]]) -> Result[V2, E2]:
        """Chain into another fallible computation.

        The returned result is the transform's own, not re-wrapped:
        ok(42).flat_map(lambda _: ok(100)) == ok(100)
        """
        return transform(self.value)

    def flat_map_error(self, transform: Callable[[typing.Any], object]) -> Ok[V]:
        del transform
        return Ok(self.value)

    def get_or_else(self, default: object) -> V:
        """Return the value; ``default`` is only used for ``Err``."""
        del default
        return self.value

    def get_or_else_with(self, transform_error: Callable[[typing.Any], object]) -> V:
        del transform_error
        return self.value

    def get_or_raise(self) -> V:
        """Return the value."""
        return self.value


@dataclasses.dataclass(frozen=True, slots=True)
class Err[E]:
    """A failed result carrying the ``error`` payload."""

    error: E

    def __repr__(self) -> str:
        return f"Err({self.error!r})"

    def __str__(self) -> str:
        return f"[Err: {self.error}]"

    def __hash__(self) -> int:
        return hash(self.error)

    def is_ok(self) -> bool:
        """Return False; this is the failure variant."""
        return False

    def is_err(self) -> bool:
        """Return True; this is the failure variant."""
        return True

    def map(self, transform: Callable[[typing.Any], object]) -> Err[E]:
        del transform
        return Err(self.error)

    def map_error[E2](self, transform: Callable[[E], E2]) -> Err[E2]:
        """Transform the error.

        err("failure").map_error(lambda e: e + "-mapped") == err("failure-mapped")
        """
        return Err(transform(self.error))

    def fold[R](
        self,
        transform_value: Callable[[typing.Any], R],
        transform_error: Callable[[E], R],
    ) -> R:
        """Collapse both branches to one type by applying ``transform_error``."""
        del transform_value
        return transform_error(self.error)

    def flat_map(self, transform: Callable[[typing.Any], object]) -> Err[E]:
        """Short-circuit: the same error payload, ``transform`` is never called."""
        del transform
        return Err(self.error)

    def flat_map_error[V2, E2](
        self, transform: Callable[[E], Result[V2, E2]]
    ) -> Result[V2, E2]:
        """Recover from the error with another fallible computation."""
        return transform(self.error)

    def get_or_else[D](self, default: D) -> D:
        return default

    def get_or_else_with[D](self, transform_error: Callable[[E], D]) -> D:
        """Derive the fallback from the error payload."""
        return transform_error(self.error)

    def get_or_raise(self) -> typing.NoReturn:
        """Raise ``UnwrapError``; an ``Err`` has no value to return."""
        rendered = render(self)
        log.debug("get_or_raise() called on %s", rendered)
        raise UnwrapError(
            f"Called get_or_raise() on {rendered}",
            error=self.error,
            hint=_UNWRAP_HINT,
        )


Result = Ok[TValue] | Err[TError]


def ok[V](value: V) -> Ok[V]:
    """Wrap ``value`` in the success variant."""
    return Ok(value)


def err[E](error: E) -> Err[E]:
    """Wrap ``error`` in the failure variant."""
    return Err(error)


def collect[V, E](results: Iterable[Result[V, E]]) -> Result[list[V], E]:
    """Combine results into a single result holding every value in order.

    Stops at the first ``Err`` and returns it; later items are never pulled
    from ``results``, so lazy iterables are only consumed up to that point.

    collect([ok(1), ok(2), ok(3)]) == ok([1, 2, 3])
    collect([ok(1), err("a"), err("b")]) == err("a")
    collect([]) == ok([])
    """
    values: list[V] = []
    for result in results:
        if not isinstance(result, Ok | Err):
            raise TypeError(f"collect() expects Ok or Err items, got {result!r}")
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)


def _ambient_config() -> Config:
    """Resolve Config from the environment, falling back to defaults when invalid."""
    try:
        return Config.from_env()
    except ConfigurationError as exc:
        log.warning("Ignoring invalid rendering configuration: %s", exc)
        return Config()


def render(result: Result[typing.Any, typing.Any], *, config: Config | None = None) -> str:
    """Render ``result`` for diagnostics, truncating the payload per ``config``.

    Not a stable format; do not parse it.
    """
    cfg = config if config is not None else _ambient_config()
    match result:
        case Ok(value=payload):
            tag = "Ok"
        case Err(error=payload):
            tag = "Err"
        case _:
            raise TypeError(f"render() expects Ok or Err, got {result!r}")

    text = repr(payload)
    if cfg.render_limit is not None and len(text) > cfg.render_limit:
        text = text[: cfg.render_limit] + "..."
    return f"{tag}({text})"


def catching[**P, T](
    *exceptions: type[BaseException],
) -> Callable[[Callable[P, T]], Callable[P, Result[T, BaseException]]]:
    """Decorate a raising function so it returns a Result instead.

    Exceptions matching ``exceptions`` (``Exception`` when none are given)
    become ``Err(exc)``; anything else propagates. ``UnwrapError`` always
    propagates, since it signals a broken success assertion, not a failure.

    Example:
        @catching(ValueError)
        def parse(text: str) -> int:
            return int(text)

        parse("12") == ok(12)
        parse("x").is_err()
    """
    caught = exceptions or (Exception,)
    for exc_type in caught:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            raise TypeError(f"catching() expects exception types, got {exc_type!r}")

    def decorator(func: Callable[P, T]) -> Callable[P, Result[T, BaseException]]:
        name = getattr(func, "__qualname__", repr(func))

        @functools.wraps(func)
        def wrapper(*args: P.args, **kwargs: P.kwargs) -> Result[T, BaseException]:
            try:
                value = func(*args, **kwargs)
            except UnwrapError:
                raise
            except caught as exc:
                log.debug("%s raised %s; returning Err", name, type(exc).__name__)
                return Err(exc)
            return Ok(value)

        return wrapper

    return decorator
