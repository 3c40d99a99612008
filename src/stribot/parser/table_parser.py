"""Reading table parsing for the TGK history page."""

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from bs4 import BeautifulSoup, Tag

from ..domain.models import MinMax, TempReading
from ..domain.services.extrema import reduce_minmax
from ..errors import ParseError
from ..logger.app_logger import get_logger
from .date_utils import parse_timestamp
from .numeric import normalize_decimal

logger = get_logger(__name__)


class TableRowExtractor:
    """Turns the rows of the reading table into TempReading values.

    The first row is a header. Every other row must carry the timestamp in its
    first ``td`` and the temperature in its second; rows that do not are
    skipped, since the source table contains stray formatting rows.
    """

    def find_table(self, soup: BeautifulSoup) -> Optional[Tag]:
        """HTMLから最初のテーブルを返す（無ければNone）"""
        return soup.find("table")

    def parse_row(self, row: Tag) -> Optional[TempReading]:
        cells = row.find_all("td")
        if len(cells) < 2:
            logger.debug("skip row with %d cells", len(cells))
            return None
        try:
            timestamp = parse_timestamp(cells[0].get_text(strip=True))
            temperature = normalize_decimal(cells[1].get_text(strip=True))
        except ParseError as exc:
            logger.debug("skip row: %s", exc)
            return None
        return TempReading(timestamp=timestamp, temperature=temperature)

    def parse_table(self, table: Tag, not_before: Optional[datetime] = None) -> List[TempReading]:
        readings: List[TempReading] = []
        for row in table.find_all("tr")[1:]:
            reading = self.parse_row(row)
            if reading is None:
                continue
            if not_before is not None and reading.timestamp < not_before:
                continue
            readings.append(reading)
        return readings

    def extract(self, html: str, not_before: Optional[datetime] = None) -> List[TempReading]:
        """HTMLをパースして読み取り値のリストを返す

        Args:
            html: パース対象のHTML文字列
            not_before: これより前の時刻の行を除外する（省略時は全行）

        Returns:
            List[TempReading]: 文書順の読み取り値
        """
        soup = BeautifulSoup(html, "html.parser")
        table = self.find_table(soup)
        if table is None:
            logger.warning("reading table not found in document")
            return []
        readings = self.parse_table(table, not_before)
        logger.info("parsed %d readings", len(readings))
        return readings


def parse_minmax(html: str, not_before: Optional[datetime] = None) -> MinMax:
    """Min/max reading of the table in ``html``; raises EmptyInput when no row survives."""
    return reduce_minmax(TableRowExtractor().extract(html, not_before))
