# stribot/fetcher/sources.py
"""Source adapters: fetch one page and hand its text to the parsers."""

from __future__ import annotations

import random
import time
from datetime import datetime
from typing import Callable, Mapping, Optional

from ..domain.models import MinMax
from ..logger.app_logger import get_logger
from ..parser.table_parser import parse_minmax
from ..parser.temperature_parser import NSU_EXTRACTOR, TGK_EXTRACTOR
from ..utils.config_loader import NsuSettings, TgkSettings
from ..utils.http_client import HttpClient


class NsuSource:
    """
    NsuSource クラス: NSU 気象ページから現在の気温を取得する。
    """

    name = "NSU"

    def __init__(
        self,
        settings: Optional[NsuSettings] = None,
        *,
        client: Optional[HttpClient] = None,
        headers: Optional[Mapping[str, str]] = None,
        clock: Callable[[], float] = time.time,
        rand: Callable[[], float] = random.random,
    ):
        """
        :param settings: URL とタイムアウト
        :param client: HTTPクライアント（テスト用に差し替え可能）
        :param clock: tick パラメータ用の現在時刻（Unix秒）
        :param rand: rand パラメータ用の乱数
        """
        self.settings = settings or NsuSettings()
        self.client = client or HttpClient(self.settings.timeout, headers=headers)
        self._clock = clock
        self._rand = rand
        self.logger = get_logger(__name__)

    def _build_params(self) -> dict[str, str]:
        """キャッシュ回避用のクエリパラメータを組み立てる。"""
        return {"tick": str(int(self._clock())), "rand": str(self._rand())}

    def current_temperature(self) -> float:
        body = self.client.get_text(self.settings.url, params=self._build_params())
        value = NSU_EXTRACTOR.extract(body)
        self.logger.info("NSU temperature: %s", value)
        return value


class TgkSource:
    """
    TgkSource クラス: TGK の現在値ページと履歴テーブルを取得する。
    """

    name = "TGK"

    def __init__(
        self,
        settings: Optional[TgkSettings] = None,
        *,
        current_client: Optional[HttpClient] = None,
        table_client: Optional[HttpClient] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        self.settings = settings or TgkSettings()
        self.current_client = current_client or HttpClient(self.settings.current_timeout, headers=headers)
        self.table_client = table_client or HttpClient(self.settings.table_timeout, headers=headers)
        self.logger = get_logger(__name__)

    def current_temperature(self) -> float:
        body = self.current_client.get_text(self.settings.current_url)
        value = TGK_EXTRACTOR.extract(body)
        self.logger.info("TGK temperature: %s", value)
        return value

    def current_minmax(self, not_before: Optional[datetime] = None) -> MinMax:
        """履歴テーブルから最低・最高気温を求める。

        :param not_before: これより前の行を除外する
        """
        body = self.table_client.get_text(self.settings.table_url)
        result = parse_minmax(body, not_before)
        self.logger.info("TGK min/max: %s / %s", result.min.format(), result.max.format())
        return result
