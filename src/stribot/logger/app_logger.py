"""
stribot のログ設定

モジュールは get_logger() でロガーを取得するだけで、ハンドラーは追加しない。
ハンドラーは CLI から setup_logging() を呼んだときに "stribot" ロガーにのみ付く。
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import yaml

from ..utils.path_utils import get_package_root, get_project_root

LOGGER_NAME = 'stribot'
CONFIG_FILENAME = 'config.yml'
DEFAULT_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class ConfigError(Exception):
    """設定エラー"""
    pass


def get_logger(name: str) -> logging.Logger:
    """名前付きロガーを取得（設定は行わない）"""
    return logging.getLogger(name)


def setup_logging(config_path_override: Optional[str] = None) -> logging.Logger:
    """
    "stribot" ロガーにコンソールとローテーションファイルのハンドラーを設定する。
    ルートロガーには触れない。繰り返し呼んでもハンドラーは重複しない。

    Args:
        config_path_override: 設定ファイルのパス（オーバーライド用）

    Returns:
        Logger: 設定済みの "stribot" ロガー
    """
    log_config = _load_log_config(config_path_override)
    level = getattr(logging, log_config['level'])

    app_logger = logging.getLogger(LOGGER_NAME)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()
    app_logger.setLevel(level)
    app_logger.propagate = False

    formatter = logging.Formatter(log_config['format'])

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    console_handler.setLevel(logging.WARNING)
    app_logger.addHandler(console_handler)

    log_file = Path(log_config['file'])
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.handlers.RotatingFileHandler(
        log_file,
        maxBytes=log_config['max_size_mb'] * 1024 * 1024,
        backupCount=log_config['backup_count'],
        encoding='utf-8',
        delay=True,
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)
    app_logger.addHandler(file_handler)

    return app_logger


def _load_log_config(config_path_override: Optional[str] = None) -> dict:
    """
    設定ファイルの logging セクションを読み込み、既定値で補う

    Raises:
        ConfigError: 設定読み込みエラー
    """
    path = Path(config_path_override) if config_path_override else get_package_root() / CONFIG_FILENAME
    log_config: dict = {}
    if path.exists():
        try:
            with path.open('r', encoding='utf-8') as f:
                config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"ログ設定の読み込みに失敗しました: {e}") from e
        if isinstance(config, dict) and isinstance(config.get('logging'), dict):
            log_config = config['logging']

    log_path = Path(log_config.get('file', 'logs/stribot.log'))
    if not log_path.is_absolute():
        log_path = get_project_root() / log_path

    level = str(log_config.get('level', 'INFO')).upper()
    if not isinstance(getattr(logging, level, None), int):
        raise ConfigError(f"不正なログレベルです: {level}")

    return {
        'level': level,
        'file': str(log_path),
        'max_size_mb': log_config.get('max_size_mb', 10),
        'backup_count': log_config.get('backup_count', 5),
        'format': log_config.get('format', DEFAULT_FORMAT),
    }
