from datetime import datetime

import pytest

from stribot.errors import ParseError
from stribot.parser.date_utils import format_timestamp, parse_timestamp


def test_parse_timestamp_returns_naive_datetime():
    result = parse_timestamp("2018-11-27 08:42:00")
    assert result == datetime(2018, 11, 27, 8, 42)
    assert result.tzinfo is None


@pytest.mark.parametrize("text", [" 2018-11-26 15:17:00", "2018-11-26 15:17:00\n", "2018-11-26 15:17:00 "])
def test_parse_timestamp_rejects_surrounding_whitespace(text):
    with pytest.raises(ParseError):
        parse_timestamp(text)


@pytest.mark.parametrize(
    "text",
    [
        "27.11.2018 08:42:00",
        "2018/11/27 08:42:00",
        "2018-11-27T08:42:00",
        "2018-11-27 08:42",
        "2018-1-27 08:42:00",
        "2018-11-27 08:42:00 extra",
        "2018-13-01 00:00:00",
        "2018-11-27 25:00:00",
        "",
    ],
)
def test_parse_timestamp_rejects_deviations(text):
    with pytest.raises(ParseError):
        parse_timestamp(text)


def test_format_timestamp_uses_minute_precision():
    assert format_timestamp(datetime(2018, 11, 27, 8, 42, 59)) == "2018-11-27 08:42"
