"""
Exposes the version of decipin
"""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path


def _read_version_file() -> str | None:
    """
    Used when decipin is imported from a source checkout that was never
    installed; reads the VERSION file at the repository root.
    """
    try:
        return (Path(__file__).resolve().parents[1] / 'VERSION').read_text(encoding='utf-8').strip()
    except OSError:
        return None


try:
    __version__ = version('decipin')
except PackageNotFoundError:
    __version__ = _read_version_file()

__all__ = ['__version__']
