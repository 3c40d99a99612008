"""Project path resolution."""

from pathlib import Path
from typing import Iterable
import sys


_DEFAULT_MARKERS = ("pyproject.toml", "setup.cfg", ".git")


def get_project_root(markers: Iterable[str] = _DEFAULT_MARKERS) -> Path:
    """プロジェクトルートディレクトリを返す。

    - 凍結時（PyInstaller等）は実行ファイルの親を返す。
    - 非凍結時は pyproject.toml/.git などを上位に探し、見つからなければカレントディレクトリ。
    """
    if getattr(sys, "frozen", False):
        return Path(sys.executable).resolve().parent

    current = Path(__file__).resolve().parent

    for directory in [current, *current.parents]:
        if any((directory / marker).exists() for marker in markers):
            return directory

    # site-packages からの実行時
    return Path.cwd()


def get_package_root() -> Path:
    """Directory of the installed stribot package (holds config.yml)."""
    return Path(__file__).resolve().parents[1]
