"""Data models for platform lookups and HTTP requests."""

from .http_models import HttpResponse, RequestDescriptor, RequestOptions, ResponseMeta
from .platform_models import DirCategory, DirContext, Platform

__all__ = [
    "DirCategory",
    "DirContext",
    "Platform",
    "HttpResponse",
    "RequestDescriptor",
    "RequestOptions",
    "ResponseMeta",
]
