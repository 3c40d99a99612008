#!/usr/bin/env python3
"""stribot - エントリポイント"""

from __future__ import annotations

import argparse
import sys
from typing import Sequence, Tuple

from stribot.errors import ExtractionError
from stribot.fetcher.sources import NsuSource, TgkSource
from stribot.logger.app_logger import ConfigError, get_logger, setup_logging
from stribot.service.report import current_report, minmax_report
from stribot.utils.config_loader import get_http_headers, get_source_settings, load_config
from stribot.version import get_version_string

logger = get_logger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    """コマンドライン引数のパーサーを構成する。"""
    parser = argparse.ArgumentParser(
        prog="stribot",
        description="TGK / NSU の現在の外気温を表示する",
    )
    parser.add_argument("--config", help="設定ファイル (YAML) のパス")
    parser.add_argument("--version", action="version", version=get_version_string())
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("current", help="両方の取得元の現在の気温を表示")
    subparsers.add_parser("minmax", help="TGK 履歴テーブルの最低・最高気温を表示")
    return parser


def build_sources(config: dict) -> Tuple[TgkSource, NsuSource]:
    nsu_settings, tgk_settings = get_source_settings(config)
    headers = get_http_headers(config)
    return TgkSource(tgk_settings, headers=headers), NsuSource(nsu_settings, headers=headers)


def _run_current(tgk: TgkSource, nsu: NsuSource) -> int:
    status = 0
    for outcome in current_report([tgk, nsu]):
        if outcome.ok:
            print(f"TEMP {outcome.source} {outcome.value}")
        else:
            print(f"TEMP {outcome.source} error: {outcome.error}")
            status = 1
    return status


def _run_minmax(tgk: TgkSource) -> int:
    try:
        result = minmax_report(tgk)
    except ExtractionError as exc:
        logger.error("min/max lookup failed: %s", exc)
        print(f"MINMAX {tgk.name} error: {exc}")
        return 1
    print(f"MIN {result.min.format()}")
    print(f"MAX {result.max.format()}")
    return 0


def run(argv: Sequence[str] | None = None) -> int:
    """CLI入口。終了コードを返す。"""
    parser = _build_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(args.config)
    except ConfigError as exc:
        print(f"警告: ログ設定の初期化に失敗しました: {exc}", file=sys.stderr)
    config = load_config(args.config)
    tgk, nsu = build_sources(config)

    if args.command == "current":
        return _run_current(tgk, nsu)
    return _run_minmax(tgk)


def main() -> None:
    """スクリプトのエントリポイント。"""
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
