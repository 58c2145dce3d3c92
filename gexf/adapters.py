"""
    Scalar adapters — text conversion for values that are not natively text.

    Every method is pure and lossless: decoding the text produced by the
    matching encode method always succeeds and gives back the same value.
"""
import math
import re
from datetime import date, datetime, timezone
from enum import Enum
from typing import Any, Type, TypeVar, Union

from .constants import DATE_FORMAT
from .exceptions import (
    ChannelOutOfRangeError,
    InvalidDateError,
    SchemaMismatchError,
    UnknownEnumValueError,
)

TEnum = TypeVar('TEnum', bound=Enum)

_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
# Unsigned, no leading zeros
_CHANNEL_PATTERN = re.compile(r"0|[1-9][0-9]*")

CHANNEL_MIN = 0
CHANNEL_MAX = 255


class ScalarAdapter:
    """Two-way conversions between typed values and attribute text"""

    # ── Dates ────────────────────────────────────────────────────

    @staticmethod
    def encode_date(value: Union[date, datetime]) -> str:
        """
        Render a calendar date as YYYY-MM-DD.

        Aware datetimes are moved to UTC before the day is taken; naive ones
        are treated as UTC already.  Time of day is dropped.
        """
        if isinstance(value, datetime):
            if value.tzinfo is not None:
                value = value.astimezone(timezone.utc)
            value = value.date()
        elif not isinstance(value, date):
            raise InvalidDateError(f"Cannot encode {value!r} as a date")
        # strftime does not zero-pad years below 1000 on every platform
        return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"

    @staticmethod
    def decode_date(text: str) -> date:
        """Parse YYYY-MM-DD into a date, rejecting impossible calendar days."""
        if text is None or not _DATE_PATTERN.fullmatch(text):
            raise InvalidDateError(f"Date {text!r} does not match YYYY-MM-DD")
        try:
            return datetime.strptime(text, DATE_FORMAT).date()
        except ValueError as e:
            raise InvalidDateError(f"Date {text!r} is not a valid calendar date: {e}") from e

    # ── Enumerations ─────────────────────────────────────────────

    @staticmethod
    def encode_enum(enum_cls: Type[TEnum], value: Any) -> str:
        """Render an enum member as its token; plain strings are not accepted."""
        if not isinstance(value, enum_cls):
            raise UnknownEnumValueError(
                f"{value!r} is not a {enum_cls.__name__} member"
            )
        return value.value

    @staticmethod
    def decode_enum(enum_cls: Type[TEnum], token: str) -> TEnum:
        """Map a token to its enum member by exact, case-sensitive match."""
        for member in enum_cls:
            if member.value == token:
                return member
        allowed = ", ".join(m.value for m in enum_cls)
        raise UnknownEnumValueError(
            f"Unknown {enum_cls.__name__} token {token!r} (expected one of: {allowed})"
        )

    # ── Color channels ───────────────────────────────────────────

    @staticmethod
    def encode_channel(value: Any) -> str:
        """Render an 8-bit channel as a decimal numeral."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise ChannelOutOfRangeError(f"Color channel {value!r} is not an integer")
        if not CHANNEL_MIN <= value <= CHANNEL_MAX:
            raise ChannelOutOfRangeError(
                f"Color channel {value} outside [{CHANNEL_MIN}, {CHANNEL_MAX}]"
            )
        return str(value)

    @staticmethod
    def decode_channel(text: str) -> int:
        if text is None or not _CHANNEL_PATTERN.fullmatch(text):
            raise ChannelOutOfRangeError(f"Color channel {text!r} is not a decimal numeral")
        value = int(text)
        if not CHANNEL_MIN <= value <= CHANNEL_MAX:
            raise ChannelOutOfRangeError(
                f"Color channel {value} outside [{CHANNEL_MIN}, {CHANNEL_MAX}]"
            )
        return value

    # ── Floats ───────────────────────────────────────────────────

    @staticmethod
    def encode_float(value: Any) -> str:
        """
        Render a float in its shortest decimal form.

        Integral values drop the fractional part (``1.0`` -> ``"1"``,
        ``-0.0`` -> ``"-0"``).
        """
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise SchemaMismatchError(f"Cannot encode {value!r} as a number")
        value = float(value)
        if math.isfinite(value) and value.is_integer() and abs(value) < 1e21:
            text = str(int(value))
            return "-0" if text == "0" and math.copysign(1.0, value) < 0 else text
        return repr(value)

    @staticmethod
    def decode_float(text: str) -> float:
        """Parse an ASCII decimal; underscores and surrounding whitespace are rejected."""
        if isinstance(text, str) and (not text.isascii() or '_' in text or text != text.strip()):
            raise SchemaMismatchError(f"{text!r} is not a number")
        try:
            return float(text)
        except (TypeError, ValueError) as e:
            raise SchemaMismatchError(f"{text!r} is not a number") from e
