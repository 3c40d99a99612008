"""Single-value temperature extraction from source pages."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Pattern

from ..errors import NotFound
from ..logger.app_logger import get_logger
from .numeric import normalize_decimal

logger = get_logger(__name__)

# NSU: "Температура около НГУ -7.8 C"
NSU_PATTERN = re.compile(r"Температура около НГУ (-?[\d.,]+) C")
# TGK: "-10,6&deg;C"
TGK_PATTERN = re.compile(r"(-?[\d.,]+)&deg;C")


@dataclass(frozen=True)
class TemperatureExtractor:
    """Finds the first temperature expression matching ``pattern``."""

    name: str
    pattern: Pattern[str]

    def extract(self, body: str) -> float:
        match = self.pattern.search(body)
        if match is None:
            raise NotFound(f"{self.name} temperature")
        raw = match.group(1)
        logger.debug("%s: matched %r", self.name, raw)
        return normalize_decimal(raw)


NSU_EXTRACTOR = TemperatureExtractor("nsu", NSU_PATTERN)
TGK_EXTRACTOR = TemperatureExtractor("tgk", TGK_PATTERN)

_EXTRACTORS = {
    NSU_EXTRACTOR.name: NSU_EXTRACTOR,
    TGK_EXTRACTOR.name: TGK_EXTRACTOR,
}


def get_extractor(grammar: str) -> TemperatureExtractor:
    try:
        return _EXTRACTORS[grammar]
    except KeyError:
        raise ValueError(f"Unsupported grammar: {grammar}") from None


def extract_temperature(body: str, grammar: str) -> float:
    """Extract the temperature from ``body`` using the ``"nsu"`` or ``"tgk"`` grammar."""
    return get_extractor(grammar).extract(body)
