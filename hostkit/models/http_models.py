"""Pydantic models for request descriptors and response envelopes."""

from __future__ import annotations

from typing import Any, Dict, List, Mapping, Optional, Union
from urllib.parse import ParseResult, SplitResult

from pydantic import BaseModel, ConfigDict, Field


class RequestOptions(BaseModel):
    """Structured request descriptor.

    When ``url`` is set, ``scheme``/``host``/``hostname``/``port``/``path`` are
    derived from it by :func:`hostkit.http.http_client.adapt_request_opts`.
    """

    model_config = ConfigDict(populate_by_name=True)

    url: Optional[str] = None
    scheme: Optional[str] = Field(default=None, alias="protocol")
    host: Optional[str] = None
    hostname: Optional[str] = None
    port: Optional[int] = None
    path: Optional[str] = None
    search_params: Optional[Dict[str, Any]] = Field(default=None, alias="searchParams")
    headers: Dict[str, str] = Field(default_factory=dict)
    method: str = "GET"
    timeout: Optional[float] = None


class ResponseMeta(BaseModel):
    """Transport response metadata without the body."""

    status: int
    reason: Optional[str] = None
    headers: Dict[str, Union[str, List[str]]] = Field(default_factory=dict)
    url: Optional[str] = None

    def header_list(self, name: str) -> List[str]:
        """All values sent for ``name`` (case-insensitive), in arrival order."""

        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return list(value) if isinstance(value, list) else [value]
        return []

    def header(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Single header value; repeated values are joined with ``", "``."""

        values = self.header_list(name)
        return ", ".join(values) if values else default


class HttpResponse(BaseModel):
    """Response metadata paired with the accumulated body."""

    response: ResponseMeta
    data: Any = None


RequestDescriptor = Union[str, ParseResult, SplitResult, RequestOptions, Mapping[str, Any]]
