"""Report use cases for stribot."""

from __future__ import annotations

import threading
from datetime import datetime
from typing import Dict, List, Optional, Protocol, Sequence

from ..domain.models import MinMax, SourceOutcome
from ..errors import ExtractionError
from ..logger.app_logger import get_logger

logger = get_logger(__name__)


class CurrentTemperatureSource(Protocol):
    name: str

    def current_temperature(self) -> float:
        ...


class MinMaxSource(Protocol):
    def current_minmax(self, not_before: Optional[datetime] = None) -> MinMax:
        ...


def lookup_current(source: CurrentTemperatureSource) -> SourceOutcome:
    try:
        return SourceOutcome(source=source.name, value=source.current_temperature())
    except ExtractionError as exc:  # 取得元ごとに独立して報告する
        logger.warning("%s lookup failed: %s", source.name, exc)
        return SourceOutcome(source=source.name, error=exc)


def current_report(sources: Sequence[CurrentTemperatureSource]) -> List[SourceOutcome]:
    """Look up every source in its own thread; outcomes keep the order of ``sources``."""
    outcomes: Dict[int, SourceOutcome] = {}
    failures: Dict[int, Exception] = {}

    def _worker(index: int, source: CurrentTemperatureSource) -> None:
        try:
            outcomes[index] = lookup_current(source)
        except Exception as exc:  # 呼び出し元のスレッドで再送出する
            failures[index] = exc

    threads = [
        threading.Thread(target=_worker, args=(index, source), name=f"lookup-{source.name}", daemon=True)
        for index, source in enumerate(sources)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    if failures:
        raise failures[min(failures)]
    return [outcomes[index] for index in range(len(sources))]


def minmax_report(source: MinMaxSource, not_before: Optional[datetime] = None) -> MinMax:
    return source.current_minmax(not_before)
