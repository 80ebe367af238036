from datetime import datetime, timezone

import pytest

from feedprocessor.basestation.errors import MessageFormatError
from feedprocessor.basestation.tokens import (
    parse_timestamp,
    token_as_boolean,
    token_as_float,
    token_as_short,
    token_as_text,
    tokens_as_position,
)
from feedprocessor.models.geo import WGS84


def test_token_as_short_parses_integers():
    assert token_as_short("7700") == 7700
    assert token_as_short("-640") == -640
    assert token_as_short("+12") == 12


@pytest.mark.parametrize("token", ["abc", "", "7.5", "40000", " ", None])
def test_token_as_short_returns_none_for_bad_tokens(token):
    assert token_as_short(token) is None


def test_token_as_float_parses_values():
    assert token_as_float("35000") == pytest.approx(35000.0)
    assert token_as_float("271.3") == pytest.approx(271.3)
    assert token_as_float("") is None
    assert token_as_float("fast") is None


def test_token_as_boolean_treats_non_zero_as_true():
    assert token_as_boolean("0") is False
    assert token_as_boolean("1") is True
    assert token_as_boolean("-1") is True
    assert token_as_boolean("x") is None
    assert token_as_boolean("") is None


def test_token_as_text_treats_empty_as_missing():
    assert token_as_text("RYR1234") == "RYR1234"
    assert token_as_text("") is None


def test_tokens_as_position_uses_wgs84():
    position = tokens_as_position("-0.4614", "51.4775")

    assert position is not None
    assert position.longitude == pytest.approx(-0.4614)
    assert position.latitude == pytest.approx(51.4775)
    assert position.crs == WGS84
    assert position.crs.epsg_code == 4326


def test_tokens_as_position_never_returns_partial_position():
    assert tokens_as_position("abc", "51.4775") is None
    assert tokens_as_position("-0.4614", "") is None


def test_parse_timestamp_truncates_excess_precision():
    parsed = parse_timestamp("2017-12-23", "16:01:15.4294967295")

    assert parsed == datetime(2017, 12, 23, 16, 1, 15, 429000, tzinfo=timezone.utc)


def test_parse_timestamp_normalizes_slashes():
    parsed = parse_timestamp("2017/12/23", "16:01:15")

    assert parsed == datetime(2017, 12, 23, 16, 1, 15, tzinfo=timezone.utc)
    assert parsed.utcoffset().total_seconds() == 0


def test_parse_timestamp_keeps_short_fractions():
    parsed = parse_timestamp("2017/12/23", "16:01:15.4")

    assert parsed.microsecond == 400000


@pytest.mark.parametrize(
    "date_token, time_token",
    [("", "16:01:15"), ("2017-12-23", ""), (None, "16:01:15")],
)
def test_parse_timestamp_requires_both_tokens(date_token, time_token):
    with pytest.raises(MessageFormatError):
        parse_timestamp(date_token, time_token)


def test_parse_timestamp_rejects_garbage():
    with pytest.raises(MessageFormatError):
        parse_timestamp("2017/13/45", "16:01:15")

    with pytest.raises(ValueError):
        parse_timestamp("yesterday", "teatime")


@pytest.mark.parametrize(
    "date_token, time_token",
    [
        ("20171223", "160115"),
        ("2017-W51-6", "16:01:15"),
        ("2017-12-23", "16"),
        ("2017-12-23", "16:01:15+01:00"),
    ],
)
def test_parse_timestamp_rejects_non_basestation_layouts(date_token, time_token):
    with pytest.raises(MessageFormatError):
        parse_timestamp(date_token, time_token)


@pytest.mark.parametrize("token", ["1_000", "nan", "inf", "-infinity", "1e999", "0x10"])
def test_token_as_float_rejects_non_decimal_and_non_finite(token):
    assert token_as_float(token) is None


def test_token_as_float_accepts_decimal_forms():
    assert token_as_float("-0.4614") == pytest.approx(-0.4614)
    assert token_as_float(".5") == pytest.approx(0.5)
    assert token_as_float("3.5e2") == pytest.approx(350.0)
