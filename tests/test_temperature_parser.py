import pytest

from stribot.errors import NotFound, ParseError
from stribot.parser.temperature_parser import (
    NSU_EXTRACTOR,
    TGK_EXTRACTOR,
    extract_temperature,
    get_extractor,
)


def test_nsu_page(load_resource):
    assert NSU_EXTRACTOR.extract(load_resource("nsu.html")) == -7.8


def test_tgk_page_normalizes_comma(load_resource):
    assert TGK_EXTRACTOR.extract(load_resource("tgk.html")) == -10.6


def test_only_first_match_is_used():
    body = "12,5&deg;C then -3,0&deg;C"
    assert extract_temperature(body, "tgk") == 12.5


def test_grammars_are_not_interchangeable(load_resource):
    with pytest.raises(NotFound):
        NSU_EXTRACTOR.extract(load_resource("tgk.html"))
    with pytest.raises(NotFound):
        TGK_EXTRACTOR.extract(load_resource("nsu.html"))


def test_missing_pattern_raises_not_found():
    with pytest.raises(NotFound) as excinfo:
        extract_temperature("<html><body>нет данных</body></html>", "nsu")
    assert excinfo.value.kind == "not_found"


def test_bad_number_raises_parse_error():
    with pytest.raises(ParseError):
        extract_temperature("Температура около НГУ 1.2.3 C", "nsu")


def test_extraction_is_idempotent(load_resource):
    body = load_resource("tgk.html")
    assert TGK_EXTRACTOR.extract(body) == TGK_EXTRACTOR.extract(body)


def test_unknown_grammar():
    with pytest.raises(ValueError):
        get_extractor("metar")
