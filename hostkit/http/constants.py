"""HTTP method and header name constants."""

from __future__ import annotations

from enum import Enum


class Method(str, Enum):
    """Request methods accepted by :class:`~hostkit.models.RequestOptions`."""

    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    CONNECT = "CONNECT"


class Header:
    ACCEPT = "Accept"
    AUTHORIZATION = "Authorization"
    CONTENT_LENGTH = "Content-Length"
    CONTENT_TYPE = "Content-Type"
    COOKIE = "Cookie"
    SET_COOKIE = "Set-Cookie"
    USER_AGENT = "User-Agent"


JSON_CONTENT_TYPE = "application/json"
JSON_REQUEST_CONTENT_TYPE = "application/json; charset=utf-8"
