"""HTTPユーティリティ: 取得元ごとのタイムアウト付きGETを提供する。"""

from __future__ import annotations

from typing import Callable, Mapping, Optional

import requests
from requests import Response, exceptions as req_exc

from ..errors import StatusError, TransportError
from ..logger.app_logger import get_logger

logger = get_logger(__name__)

DEFAULT_HEADERS: dict[str, str] = {
    "User-Agent": "stribot",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "ru,en-US;q=0.9,en;q=0.8",
}

DEFAULT_ENCODING = "utf-8"

RequestFunc = Callable[..., Response]


class HttpClient:
    """One blocking GET per call, no retries.

    Each source adapter owns its own client, so nothing is shared between
    concurrently running lookups.
    """

    def __init__(
        self,
        timeout: float,
        *,
        headers: Optional[Mapping[str, str]] = None,
        request_func: Optional[RequestFunc] = None,
    ) -> None:
        self._timeout = timeout
        self._headers = {**DEFAULT_HEADERS, **(headers or {})}
        self._request = request_func or requests.get

    @property
    def timeout(self) -> float:
        return self._timeout

    def get_text(self, url: str, params: Optional[Mapping[str, str]] = None) -> str:
        """
        GETを実行して本文を文字列で返す。

        :param url: アクセス先URL
        :param params: クエリパラメータ
        :raises TransportError: 接続・タイムアウト等の失敗
        :raises StatusError: 2xx 以外のステータス
        """
        logger.info("GET %s (timeout=%ss)", url, self._timeout)
        try:
            response = self._request(url, params=params, headers=self._headers, timeout=self._timeout)
        except req_exc.RequestException as exc:
            logger.warning("request to %s failed: %s", url, exc)
            raise TransportError(url, exc) from exc

        if not 200 <= response.status_code < 300:
            logger.warning("%s returned HTTP %s", url, response.status_code)
            raise StatusError(url, response.status_code)

        # charset 未指定の text/html は requests が ISO-8859-1 とみなすため上書きする
        content_type = response.headers.get("Content-Type", "")
        if "charset" not in content_type.lower():
            response.encoding = DEFAULT_ENCODING
        logger.debug("%s: HTTP %s, %d chars", url, response.status_code, len(response.text))
        return response.text
