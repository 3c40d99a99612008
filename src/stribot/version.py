"""バージョン情報管理モジュール"""

__version__ = "0.2.0"
__version_info__ = (0, 2, 0)

__app_name__ = "stribot"
__description__ = "Outdoor temperature from the TGK and NSU public pages"


def get_version_string():
    """詳細なバージョン情報文字列を取得する"""
    return f"{__app_name__} v{__version__}"
