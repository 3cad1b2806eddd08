"""Scheme-keyed registry of the HTTP and HTTPS transports."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Dict, Optional
from urllib.parse import ParseResult, SplitResult, urlsplit

import aiohttp
import requests
from requests.adapters import HTTPAdapter

from ..models import RequestDescriptor, RequestOptions


class Transport:
    """Opens clients that can only talk to one URL scheme."""

    def __init__(self, scheme: str, default_port: int, ssl: bool) -> None:
        self.scheme = scheme
        self.default_port = default_port
        self.ssl = ssl

    def __repr__(self) -> str:
        return f"Transport({self.scheme!r})"

    def session(self) -> requests.Session:
        """A ``requests`` session with an adapter mounted for this scheme only."""

        session = requests.Session()
        session.adapters.clear()
        session.mount(f"{self.scheme}://", HTTPAdapter(max_retries=0))
        return session

    def client_session(self, timeout: Optional[float] = None) -> aiohttp.ClientSession:
        connector = aiohttp.TCPConnector(ssl=self.ssl)
        return aiohttp.ClientSession(
            connector=connector,
            timeout=aiohttp.ClientTimeout(total=timeout),
        )

    def url_for(self, opts: RequestOptions) -> str:
        """Builds the absolute URL for structured options, always with this transport's scheme."""

        hostname = opts.hostname
        port = opts.port
        if not hostname and opts.host:
            hostname = opts.host
            if _has_port(opts.host):
                hostname, _, host_port = opts.host.rpartition(":")
                if port is None:
                    port = int(host_port)
        hostname = hostname or "localhost"
        if ":" in hostname and not hostname.startswith("["):
            hostname = f"[{hostname}]"
        netloc = f"{hostname}:{port}" if port else hostname
        path = opts.path or "/"
        if not path.startswith("/"):
            path = f"/{path}"
        return f"{self.scheme}://{netloc}{path}"


TRANSPORTS: Dict[str, Transport] = {
    "http": Transport("http", 80, ssl=False),
    "https": Transport("https", 443, ssl=True),
}
DEFAULT_SCHEME = "http"


def _clean_scheme(value: Optional[str]) -> str:
    return (value or "").replace(":", "").lower()


def _has_port(host: str) -> bool:
    head, sep, tail = host.rpartition(":")
    return bool(sep) and tail.isdigit() and not head.endswith(":")


def get_protocol(descriptor: RequestDescriptor) -> str:
    """Scheme of a descriptor without the trailing colon, or ``""`` if unknown."""

    if isinstance(descriptor, str):
        return _clean_scheme(urlsplit(descriptor).scheme)
    if isinstance(descriptor, (ParseResult, SplitResult)):
        return _clean_scheme(descriptor.scheme)
    if isinstance(descriptor, Mapping):
        descriptor = RequestOptions.model_validate(descriptor)
    if isinstance(descriptor, RequestOptions):
        if descriptor.scheme:
            return _clean_scheme(descriptor.scheme)
        if descriptor.url:
            return _clean_scheme(urlsplit(descriptor.url).scheme)
    return ""


def get_request_fn(descriptor: RequestDescriptor) -> Transport:
    """Picks the transport for the descriptor's scheme, falling back to plain HTTP."""

    return TRANSPORTS.get(get_protocol(descriptor), TRANSPORTS[DEFAULT_SCHEME])
