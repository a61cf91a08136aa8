"""Duration literals such as ``30s`` or ``200ms``."""

from __future__ import annotations

from datetime import timedelta
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

_DIGITS = "0123456789"


class DurationParseError(ValueError):
    """Raised when a duration literal cannot be parsed.

    ``token`` is the first invalid character, or the whole input when no unit
    suffix was found.
    """

    def __init__(self, token: str) -> None:
        super().__init__(f"Invalid character in duration string: {token}")
        self.token = token


class Interval(timedelta):
    """A ``timedelta`` that validates from a duration literal in pydantic models."""

    @classmethod
    def parse(cls, text: str) -> "Interval":
        return parse_duration(text)

    @property
    def literal(self) -> str:
        millis = self // timedelta(milliseconds=1)
        if millis % 1000 == 0:
            return f"{millis // 1000}s"
        return f"{millis}ms"

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.literal,
                when_used="json",
            ),
        )

    @classmethod
    def _validate(cls, value: Any) -> "Interval":
        if isinstance(value, cls):
            return value
        if isinstance(value, timedelta):
            return cls(days=value.days, seconds=value.seconds, microseconds=value.microseconds)
        if not isinstance(value, str):
            raise ValueError("expected a duration string like '30s' or '200ms'")
        try:
            return parse_duration(value)
        except DurationParseError as exc:
            raise ValueError(f"Invalid duration string: {exc}") from exc


def parse_duration(text: str) -> Interval:
    """Parse ``<digits>s`` or ``<digits>ms`` into an :class:`Interval`.

    Scanning stops at the first unit suffix; anything after it is ignored, so
    ``"30sabc"`` is thirty seconds.
    """
    value = 0
    for index, char in enumerate(text):
        if char not in _DIGITS:
            raise DurationParseError(char)
        value = value * 10 + int(char)
        rest = text[index + 1 :]
        # "ms" first, otherwise the "s" check would never see the "m".
        if rest.startswith("ms"):
            return _build(text, milliseconds=value)
        if rest.startswith("s"):
            return _build(text, seconds=value)
    raise DurationParseError(text)


def _build(text: str, **amount: int) -> Interval:
    try:
        return Interval(**amount)
    except OverflowError as exc:
        raise DurationParseError(text) from exc
