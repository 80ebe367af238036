"""Conversions from single BaseStation CSV tokens into typed values.

The coercers return ``None`` for empty or malformed tokens and never raise;
optional fields on the feed are frequently blank. ``parse_timestamp`` is the
exception: the timestamps are load-bearing, so it raises
``MessageFormatError`` instead.
"""

from __future__ import annotations

from datetime import datetime, timezone
import math
import re

from feedprocessor.basestation.errors import MessageFormatError
from feedprocessor.models.geo import WGS84, GeoPosition

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")
_FLOAT_RE = re.compile(r"[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)([eE][+-]?[0-9]+)?")
_SHORT_MIN = -(2**15)
_SHORT_MAX = 2**15 - 1
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}:[0-9]{2}(\.[0-9]{1,3})?")

# HH:MM:SS.SSS
_MAX_TIME_TOKEN_LENGTH = 12


def _parse_integer(token: str | None, minimum: int, maximum: int) -> int | None:
    if token is None or not _INTEGER_RE.fullmatch(token):
        return None
    value = int(token)
    if value < minimum or value > maximum:
        return None
    return value


def token_as_short(token: str | None) -> int | None:
    """Parse a 16-bit signed integer."""

    return _parse_integer(token, _SHORT_MIN, _SHORT_MAX)


def token_as_float(token: str | None) -> float | None:
    """Parse a finite decimal number; NaN and infinities count as malformed."""

    if token is None or not _FLOAT_RE.fullmatch(token):
        return None
    value = float(token)
    if not math.isfinite(value):
        return None
    return value


def token_as_boolean(token: str | None) -> bool | None:
    """Parse a flag; BaseStation writes ``-1`` for true, any non-zero counts."""

    value = _parse_integer(token, _INT_MIN, _INT_MAX)
    if value is None:
        return None
    return value != 0


def token_as_text(token: str | None) -> str | None:
    if not token:
        return None
    return token


def tokens_as_position(lon: str | None, lat: str | None) -> GeoPosition | None:
    """Build a WGS 84 position; both coordinates must parse."""

    longitude = token_as_float(lon)
    latitude = token_as_float(lat)
    if longitude is None or latitude is None:
        return None
    return GeoPosition(longitude=longitude, latitude=latitude, crs=WGS84)


def parse_timestamp(date_token: str | None, time_token: str | None) -> datetime:
    """Combine BaseStation date and time tokens into a UTC datetime."""

    if not date_token or not time_token:
        raise MessageFormatError(
            f"Date ({date_token!r}) and time ({time_token!r}) must be provided"
        )

    # Values such as '16:01:15.4294967295' have been seen; keep milliseconds only
    if len(time_token) > _MAX_TIME_TOKEN_LENGTH:
        time_token = time_token[:_MAX_TIME_TOKEN_LENGTH]

    date_token = date_token.replace("/", "-")
    if not _DATE_RE.fullmatch(date_token) or not _TIME_RE.fullmatch(time_token):
        raise MessageFormatError(
            f"Malformed date ({date_token!r}) or time ({time_token!r})"
        )

    raw_ts = f"{date_token}T{time_token}Z"
    try:
        parsed = datetime.fromisoformat(raw_ts.replace("Z", "+00:00"))
    except ValueError as exc:
        raise MessageFormatError(f"Unparsable timestamp: {raw_ts!r}") from exc

    return parsed.astimezone(timezone.utc)


__all__ = [
    "parse_timestamp",
    "token_as_boolean",
    "token_as_float",
    "token_as_short",
    "token_as_text",
    "tokens_as_position",
]
