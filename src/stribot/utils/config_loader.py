"""設定ファイル読み込みユーティリティ"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

import yaml

from ..logger.app_logger import get_logger
from .path_utils import get_package_root


logger = get_logger(__name__)

NSU_URL = "http://weather.nsu.ru/loadata.php?std=three"
TGK_CURRENT_URL = "http://tgk1.org/utils/external_view.php"
TGK_TABLE_URL = "http://tgk1.org/utils/table_ext.php"


@dataclass(frozen=True)
class NsuSettings:
    url: str = NSU_URL
    timeout: float = 3


@dataclass(frozen=True)
class TgkSettings:
    current_url: str = TGK_CURRENT_URL
    table_url: str = TGK_TABLE_URL
    current_timeout: float = 5
    table_timeout: float = 10


def get_default_config_path() -> Path:
    """Return the canonical config file location."""

    return get_package_root() / "config.yml"


def load_config(config_path: str | Path | None = None) -> Dict[str, Any]:
    """Load configuration data, tolerating missing files."""

    if config_path is None:
        config_path = get_default_config_path()
    else:
        config_path = Path(config_path)

    try:
        with config_path.open("r", encoding="utf-8") as file:
            config = yaml.safe_load(file) or {}
        logger.info("設定ファイルを読み込みました: %s", config_path)
    except FileNotFoundError:
        logger.warning("設定ファイルが見つかりません。デフォルト設定を使用します: %s", config_path)
        return {}
    except yaml.YAMLError as exc:
        logger.error("設定ファイルの解析エラー: %s", exc)
        raise

    if not isinstance(config, dict):
        logger.warning("設定ファイルの形式が不正です。デフォルト設定を使用します: %s", config_path)
        return {}
    return config


def _section(config: Dict[str, Any] | None, *keys: str) -> Dict[str, Any]:
    current: Any = config or {}
    for key in keys:
        current = current.get(key) if isinstance(current, dict) else None
    return current if isinstance(current, dict) else {}


def get_source_settings(config: Dict[str, Any] | None = None) -> Tuple[NsuSettings, TgkSettings]:
    """Resolve per-source URLs and timeouts, falling back to the built-in defaults."""

    if config is None:
        config = load_config()

    nsu = _section(config, "sources", "nsu")
    tgk = _section(config, "sources", "tgk")
    nsu_defaults = NsuSettings()
    tgk_defaults = TgkSettings()

    return (
        NsuSettings(
            url=nsu.get("url", nsu_defaults.url),
            timeout=float(nsu.get("timeout", nsu_defaults.timeout)),
        ),
        TgkSettings(
            current_url=tgk.get("current_url", tgk_defaults.current_url),
            table_url=tgk.get("table_url", tgk_defaults.table_url),
            current_timeout=float(tgk.get("current_timeout", tgk_defaults.current_timeout)),
            table_timeout=float(tgk.get("table_timeout", tgk_defaults.table_timeout)),
        ),
    )


def get_http_headers(config: Dict[str, Any] | None = None) -> Dict[str, str]:
    """Extra request headers from the ``http`` section."""

    http_config = _section(config, "http")
    user_agent = http_config.get("user_agent")
    return {"User-Agent": str(user_agent)} if user_agent else {}
