"""HTTP/HTTPS request helpers."""

from .constants import Header, Method
from .cookies import cookies_to_obj, obj_to_cookies
from .http_client import (
    adapt_request_opts,
    http_json_request,
    http_json_request_sync,
    http_raw_request,
    http_raw_request_sync,
    http_request,
    http_request_sync,
    http_simple_request,
    http_simple_request_sync,
    is_json_response,
    response_meta,
    to_request_opts,
)
from .transports import TRANSPORTS, Transport, get_protocol, get_request_fn

__all__ = [
    "Header",
    "Method",
    "cookies_to_obj",
    "obj_to_cookies",
    "adapt_request_opts",
    "http_json_request",
    "http_json_request_sync",
    "http_raw_request",
    "http_raw_request_sync",
    "http_request",
    "http_request_sync",
    "http_simple_request",
    "http_simple_request_sync",
    "is_json_response",
    "response_meta",
    "to_request_opts",
    "TRANSPORTS",
    "Transport",
    "get_protocol",
    "get_request_fn",
]
