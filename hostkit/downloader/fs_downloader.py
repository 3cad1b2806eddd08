"""Streams HTTP responses straight to disk.

Prefer these helpers for big files: the body is written chunk by chunk and
never held in memory.
"""

from __future__ import annotations

import asyncio
import logging
import os

import aiohttp
import requests

from ..fs.files import PathLike, ensure_directory, exists
from ..http.http_client import Payload, http_simple_request, http_simple_request_sync, response_meta
from ..models import RequestDescriptor, ResponseMeta

CHUNK_SIZE = 1 << 14


def _parent_dir(path: PathLike) -> str:
    return os.path.dirname(os.path.abspath(os.fspath(path))) or "."


async def download_on_fs(
    descriptor: RequestDescriptor,
    path: PathLike,
    body: Payload = None,
    chunk_size: int = CHUNK_SIZE,
) -> ResponseMeta:
    """Downloads ``descriptor`` into ``path`` and returns the response metadata.

    The destination folder is created when missing. The response status is not
    checked; callers inspect ``ResponseMeta.status``.
    """

    dir_path = _parent_dir(path)
    if not await exists(dir_path):
        await asyncio.to_thread(ensure_directory, dir_path)

    try:
        with open(path, "wb") as file_obj:
            async with http_simple_request(descriptor, body) as resp:
                meta = response_meta(resp)
                async for chunk in resp.content.iter_chunked(chunk_size):
                    if chunk:
                        file_obj.write(chunk)
    except (aiohttp.ClientError, OSError) as exc:
        logging.error("Download to %s failed: %s", path, exc)
        raise

    logging.info("Saved %s to %s", meta.url, path)
    return meta


def download_on_fs_sync(
    descriptor: RequestDescriptor,
    path: PathLike,
    body: Payload = None,
    chunk_size: int = CHUNK_SIZE,
) -> ResponseMeta:
    """Blocking :func:`download_on_fs` built on ``requests``."""

    ensure_directory(_parent_dir(path))

    try:
        with open(path, "wb") as file_obj:
            with http_simple_request_sync(descriptor, body, stream=True) as resp:
                meta = response_meta(resp)
                for chunk in resp.iter_content(chunk_size=chunk_size):
                    if chunk:
                        file_obj.write(chunk)
    except (requests.RequestException, OSError) as exc:
        logging.error("Download to %s failed: %s", path, exc)
        raise

    logging.info("Saved %s to %s", meta.url, path)
    return meta
