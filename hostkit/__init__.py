"""Convenience wrappers over filesystem, path and HTTP primitives."""

from .downloader import download_on_fs, download_on_fs_sync
from .fs import (
    UnsupportedPlatformError,
    expand_tilde,
    is_path_syntax,
    is_tilde_notation,
    resolve,
)
from .http import http_json_request, http_raw_request, http_request
from .models import DirCategory, DirContext, HttpResponse, Platform, RequestOptions, ResponseMeta

__all__ = [
    "download_on_fs",
    "download_on_fs_sync",
    "UnsupportedPlatformError",
    "expand_tilde",
    "is_path_syntax",
    "is_tilde_notation",
    "resolve",
    "http_json_request",
    "http_raw_request",
    "http_request",
    "DirCategory",
    "DirContext",
    "HttpResponse",
    "Platform",
    "RequestOptions",
    "ResponseMeta",
]
