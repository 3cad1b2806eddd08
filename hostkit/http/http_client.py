"""Thin HTTP/HTTPS request helpers.

Every call performs exactly one request/response cycle: no retries, no
redirect following and no timeout unless ``RequestOptions.timeout`` is set.
Coroutines use ``aiohttp``; the ``*_sync`` variants use ``requests``.
"""

from __future__ import annotations

import json
import logging
from contextlib import asynccontextmanager, contextmanager
from typing import Any, AsyncIterator, Dict, Iterable, Iterator, List, Optional, Tuple, Union
from urllib.parse import ParseResult, SplitResult, urlencode, urlsplit

import aiohttp
import requests

from ..fs.files import ObjectHook, merge_object_hooks
from ..models import HttpResponse, RequestDescriptor, RequestOptions, ResponseMeta
from .constants import JSON_CONTENT_TYPE, JSON_REQUEST_CONTENT_TYPE, Header
from .transports import Transport, get_request_fn

Payload = Union[str, bytes, bytearray, None]


def adapt_request_opts(descriptor: Optional[RequestDescriptor]) -> Optional[Union[str, ParseResult, SplitResult, RequestOptions]]:
    """Fills structured fields from ``url`` and appends ``search_params`` to the path.

    Strings and parsed URLs are returned unchanged. A ``url`` without a host
    raises ``ValueError``.
    """

    if descriptor is None:
        return None
    if isinstance(descriptor, (str, ParseResult, SplitResult)):
        return descriptor
    opts = descriptor if isinstance(descriptor, RequestOptions) else RequestOptions.model_validate(descriptor)
    if not opts.url:
        return opts

    parsed = urlsplit(opts.url)
    if not parsed.netloc:
        raise ValueError(f"Invalid URL: {opts.url!r}")
    path = parsed.path or "/"
    if parsed.query:
        path = f"{path}?{parsed.query}"
    if opts.search_params:
        separator = "&" if "?" in path else "?"
        path = f"{path}{separator}{urlencode(opts.search_params, doseq=True)}"

    return opts.model_copy(
        update={
            "scheme": parsed.scheme,
            "host": parsed.netloc.rpartition("@")[2],
            "hostname": parsed.hostname,
            "port": parsed.port,
            "path": path,
        }
    )


def to_request_opts(descriptor: Optional[RequestDescriptor]) -> Optional[RequestOptions]:
    """Like :func:`adapt_request_opts` but always returns :class:`RequestOptions`."""

    if descriptor is None:
        return None
    if isinstance(descriptor, (ParseResult, SplitResult)):
        descriptor = descriptor.geturl()
    if isinstance(descriptor, str):
        descriptor = RequestOptions(url=descriptor)
    return adapt_request_opts(descriptor)


def _prepare(descriptor: RequestDescriptor) -> Tuple[Transport, RequestOptions, str]:
    opts = to_request_opts(descriptor)
    if opts is None:
        raise ValueError("A request descriptor is required")
    transport = get_request_fn(opts)
    return transport, opts, transport.url_for(opts)


def _encode_payload(payload: Payload) -> Optional[bytes]:
    if payload is None:
        return None
    if isinstance(payload, str):
        return payload.encode("utf-8")
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload)
    raise TypeError(f"Unsupported payload type: {type(payload).__name__}")


def response_meta(response: Union[requests.Response, aiohttp.ClientResponse]) -> ResponseMeta:
    """Status, reason, headers and final URL of a ``requests`` or ``aiohttp`` response."""

    if isinstance(response, requests.Response):
        status = response.status_code
    else:
        status = response.status
    return ResponseMeta(
        status=status,
        reason=response.reason,
        headers=_collect_headers(_header_items(response)),
        url=str(response.url),
    )


def _header_items(response: Union[requests.Response, aiohttp.ClientResponse]) -> List[Tuple[str, str]]:
    if isinstance(response, requests.Response):
        raw_headers = getattr(response.raw, "headers", None)
        if raw_headers is not None and hasattr(raw_headers, "getlist"):
            return [(key, value) for key in raw_headers.keys() for value in raw_headers.getlist(key)]
    return list(response.headers.items())


def _collect_headers(items: Iterable[Tuple[str, str]]) -> Dict[str, Union[str, List[str]]]:
    """Repeated headers (e.g. ``Set-Cookie``) become a list of values."""

    headers: Dict[str, Union[str, List[str]]] = {}
    names: Dict[str, str] = {}
    for key, value in items:
        name = names.setdefault(key.lower(), key)
        existing = headers.get(name)
        if existing is None:
            headers[name] = value
        elif isinstance(existing, list):
            existing.append(value)
        else:
            headers[name] = [existing, value]
    return headers


def _charset(meta: ResponseMeta) -> str:
    content_type = meta.header(Header.CONTENT_TYPE) or ""
    for param in content_type.split(";")[1:]:
        key, _, value = param.strip().partition("=")
        if key.lower() == "charset" and value:
            return value.strip("\"'")
    return "utf-8"


def _decode(body: bytes, meta: ResponseMeta) -> str:
    try:
        return body.decode(_charset(meta), errors="replace")
    except LookupError:
        return body.decode("utf-8", errors="replace")


@asynccontextmanager
async def http_simple_request(descriptor: RequestDescriptor, payload: Payload = None) -> AsyncIterator[aiohttp.ClientResponse]:
    """Sends the request and yields the unread ``aiohttp`` response."""

    transport, opts, url = _prepare(descriptor)
    logging.debug("%s %s via %r", opts.method, url, transport)
    async with transport.client_session(opts.timeout) as session:
        try:
            async with session.request(
                opts.method,
                url,
                headers=opts.headers,
                data=_encode_payload(payload),
                allow_redirects=False,
            ) as response:
                yield response
        except aiohttp.ClientError as exc:
            logging.error("HTTP %s to %s failed: %s", opts.method, url, exc)
            raise


@contextmanager
def http_simple_request_sync(
    descriptor: RequestDescriptor,
    payload: Payload = None,
    stream: bool = False,
) -> Iterator[requests.Response]:
    """Blocking :func:`http_simple_request` built on ``requests``."""

    transport, opts, url = _prepare(descriptor)
    logging.debug("%s %s via %r", opts.method, url, transport)
    with transport.session() as session:
        try:
            response = session.request(
                opts.method,
                url,
                headers=opts.headers,
                data=_encode_payload(payload),
                timeout=opts.timeout,
                allow_redirects=False,
                stream=stream,
            )
        except requests.RequestException as exc:
            logging.error("HTTP %s to %s failed: %s", opts.method, url, exc)
            raise
        with response:
            yield response


async def http_raw_request(descriptor: RequestDescriptor, payload: Payload = None) -> HttpResponse:
    """Issues the request and returns the body as bytes."""

    async with http_simple_request(descriptor, payload) as response:
        meta = response_meta(response)
        body = await response.read()
    return HttpResponse(response=meta, data=body)


async def http_request(descriptor: RequestDescriptor, payload: Payload = None) -> HttpResponse:
    """Issues the request and returns the body decoded as text."""

    raw = await http_raw_request(descriptor, payload)
    return HttpResponse(response=raw.response, data=_decode(raw.data, raw.response))


def http_raw_request_sync(descriptor: RequestDescriptor, payload: Payload = None) -> HttpResponse:
    with http_simple_request_sync(descriptor, payload) as response:
        return HttpResponse(response=response_meta(response), data=response.content)


def http_request_sync(descriptor: RequestDescriptor, payload: Payload = None) -> HttpResponse:
    raw = http_raw_request_sync(descriptor, payload)
    return HttpResponse(response=raw.response, data=_decode(raw.data, raw.response))


def _json_request(descriptor: RequestDescriptor, data: Any) -> Tuple[RequestOptions, Optional[bytes]]:
    opts = to_request_opts(descriptor)
    if opts is None:
        raise ValueError("A request descriptor is required")
    body = json.dumps(data).encode("utf-8") if data is not None else None
    replaced = {Header.CONTENT_TYPE.lower(), Header.CONTENT_LENGTH.lower()}
    headers = {key: value for key, value in opts.headers.items() if key.lower() not in replaced}
    headers[Header.CONTENT_TYPE] = JSON_REQUEST_CONTENT_TYPE
    headers[Header.CONTENT_LENGTH] = str(len(body) if body else 0)
    return opts.model_copy(update={"headers": headers}), body


def _parse_json_response(resp: HttpResponse, object_hooks: Iterable[Optional[ObjectHook]]) -> HttpResponse:
    if resp.data and is_json_response(resp.response):
        parsed = json.loads(resp.data, object_hook=merge_object_hooks(*object_hooks))
        return HttpResponse(response=resp.response, data=parsed)
    return resp


async def http_json_request(
    descriptor: RequestDescriptor,
    data: Any = None,
    object_hooks: Iterable[Optional[ObjectHook]] = (),
) -> HttpResponse:
    """Sends ``data`` as JSON; a JSON response body is parsed through ``object_hooks``."""

    opts, body = _json_request(descriptor, data)
    resp = await http_request(opts, body)
    return _parse_json_response(resp, object_hooks)


def http_json_request_sync(
    descriptor: RequestDescriptor,
    data: Any = None,
    object_hooks: Iterable[Optional[ObjectHook]] = (),
) -> HttpResponse:
    opts, body = _json_request(descriptor, data)
    return _parse_json_response(http_request_sync(opts, body), object_hooks)


def is_json_response(meta: ResponseMeta) -> bool:
    return JSON_CONTENT_TYPE in (meta.header(Header.CONTENT_TYPE) or "").lower()

