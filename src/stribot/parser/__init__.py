# stribot/parser/__init__.py
from .date_utils import format_timestamp, parse_timestamp
from .numeric import normalize_decimal
from .table_parser import TableRowExtractor, parse_minmax
from .temperature_parser import (
    NSU_EXTRACTOR,
    TGK_EXTRACTOR,
    TemperatureExtractor,
    extract_temperature,
    get_extractor,
)

__all__ = [
    "NSU_EXTRACTOR",
    "TGK_EXTRACTOR",
    "TableRowExtractor",
    "TemperatureExtractor",
    "extract_temperature",
    "format_timestamp",
    "get_extractor",
    "normalize_decimal",
    "parse_minmax",
    "parse_timestamp",
]
