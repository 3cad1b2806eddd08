"""Streaming download helpers."""

from .fs_downloader import download_on_fs, download_on_fs_sync

__all__ = ["download_on_fs", "download_on_fs_sync"]
