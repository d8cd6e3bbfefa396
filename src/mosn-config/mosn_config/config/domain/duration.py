"""Duration literals — '300ms', '1h', '1m30s' — and the DurationConfig value type.

The grammar is the one used by the proxy's own config files: an optional sign
followed by one or more ``<decimal><unit>`` terms, with units ``ns``, ``us``
(``µs``/``μs``), ``ms``, ``s``, ``m`` and ``h``.  A bare ``0`` needs no unit.
Values are held as integer nanoseconds within the signed 64-bit range.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_MAX_NANOSECONDS = (1 << 63) - 1

_UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # U+00B5 micro sign
    "μs": MICROSECOND,  # U+03BC greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}


class DurationParseError(ValueError):
    """Raised when text is not a valid duration literal."""

    def __init__(self, literal: str, reason: str) -> None:
        self.literal = literal
        super().__init__(f"invalid duration literal {literal!r}: {reason}")


def parse_duration(text: str) -> int:
    """Parse a duration literal and return its length in nanoseconds.

    Raises:
        DurationParseError: if the text is empty, a term lacks a unit, a unit
            is unknown, or the value overflows a signed 64-bit nanosecond count.
    """
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]
    if rest == "0":
        return 0
    if not rest:
        raise DurationParseError(text, "empty")

    limit = _MAX_NANOSECONDS + 1 if negative else _MAX_NANOSECONDS
    total = 0
    pos = 0
    while pos < len(rest):
        whole, pos = _consume_digits(rest, pos)
        fraction = ""
        if pos < len(rest) and rest[pos] == ".":
            fraction, pos = _consume_digits(rest, pos + 1)
        if not whole and not fraction:
            raise DurationParseError(text, "expected a number")

        unit_start = pos
        while pos < len(rest) and rest[pos] not in ".0123456789":
            pos += 1
        unit = rest[unit_start:pos]
        if not unit:
            raise DurationParseError(text, "missing unit")
        if unit not in _UNITS:
            raise DurationParseError(text, f"unknown unit {unit!r}")

        scale = _UNITS[unit]
        total += int(whole or "0") * scale
        if fraction:
            total += int(fraction) * scale // 10 ** len(fraction)
        if total > limit:
            raise DurationParseError(text, "out of range")

    return -total if negative else total


def _consume_digits(text: str, pos: int) -> tuple[str, int]:
    start = pos
    while pos < len(text) and text[pos] in "0123456789":
        pos += 1
    return text[start:pos], pos


def format_duration(nanoseconds: int) -> str:
    """Render nanoseconds in canonical form, e.g. '1h0m0s', '1.5s', '300ms'."""
    if nanoseconds == 0:
        return "0s"
    sign = "-" if nanoseconds < 0 else ""
    magnitude = abs(nanoseconds)

    if magnitude < SECOND:
        if magnitude < MICROSECOND:
            return f"{sign}{magnitude}ns"
        if magnitude < MILLISECOND:
            return f"{sign}{_with_fraction(magnitude, 3)}µs"
        return f"{sign}{_with_fraction(magnitude, 6)}ms"

    seconds, sub_second = divmod(magnitude, SECOND)
    minutes, seconds = divmod(seconds, 60)
    seconds_text = _with_fraction(seconds * SECOND + sub_second, 9)
    if minutes == 0:
        return f"{sign}{seconds_text}s"
    hours, minutes = divmod(minutes, 60)
    if hours == 0:
        return f"{sign}{minutes}m{seconds_text}s"
    return f"{sign}{hours}h{minutes}m{seconds_text}s"


def _with_fraction(value: int, precision: int) -> str:
    """Format value / 10**precision, dropping trailing zeros of the fraction."""
    whole, fraction = divmod(value, 10**precision)
    if fraction == 0:
        return str(whole)
    digits = str(fraction).rjust(precision, "0").rstrip("0")
    return f"{whole}.{digits}"


@dataclass(frozen=True, order=True)
class DurationConfig:
    """A duration that reads and writes as a quoted literal such as "300ms".

    Missing duration fields decode to ``DurationConfig()`` (zero).
    """

    nanoseconds: int = 0

    @classmethod
    def from_literal(cls, text: str) -> "DurationConfig":
        return cls(parse_duration(text))

    @classmethod
    def from_timedelta(cls, value: timedelta) -> "DurationConfig":
        return cls(
            (value.days * 86_400 + value.seconds) * SECOND
            + value.microseconds * MICROSECOND
        )

    @classmethod
    def decode(cls, raw: bytes | str) -> "DurationConfig":
        """Decode a raw JSON token: strip one pair of surrounding quotes, then parse."""
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        if text.startswith('"'):
            text = text[1:]
        if text.endswith('"'):
            text = text[:-1]
        return cls.from_literal(text)

    def encode(self) -> bytes:
        return f'"{self}"'.encode("utf-8")

    def as_timedelta(self) -> timedelta:
        # timedelta resolution is microseconds; sub-microsecond remainder is dropped
        return timedelta(microseconds=self.nanoseconds // MICROSECOND)

    def total_seconds(self) -> float:
        return self.nanoseconds / SECOND

    def __str__(self) -> str:
        return format_duration(self.nanoseconds)

    def __bool__(self) -> bool:
        return self.nanoseconds != 0

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            _coerce_duration,
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, when_used="json"
            ),
        )


def _coerce_duration(value: Any) -> DurationConfig:
    """Accept a literal, an existing value, or a timedelta.

    Bare JSON numbers go through the literal grammar as written, so only ``0``
    is accepted; anything else lacks a unit.
    """
    if isinstance(value, DurationConfig):
        return value
    if isinstance(value, timedelta):
        return DurationConfig.from_timedelta(value)
    if isinstance(value, str):
        return DurationConfig.from_literal(value)
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return DurationConfig.from_literal(str(value))
    raise DurationParseError(
        repr(value), f"expected a string, got {type(value).__name__}"
    )
