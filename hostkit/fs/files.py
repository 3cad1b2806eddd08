"""Filesystem helpers that create missing folders on write.

Async helpers run the blocking call in a worker thread so they can be awaited
from an event loop; the ``*_sync`` helpers block.
"""

from __future__ import annotations

import asyncio
import gzip
import hashlib
import json
import logging
import os
import re
import shutil
import zlib
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Pattern, Union

PathLike = Union[str, os.PathLike]
Data = Union[str, bytes, bytearray, memoryview, None]
ObjectHook = Callable[[Dict[str, Any]], Any]

DEFAULT_ENCODING = "utf-8"
LINE_SEPARATOR_RE = re.compile(r"[\n\r]")
# zlib window bits accepting both gzip and zlib headers.
_AUTO_HEADER_WBITS = zlib.MAX_WBITS | 32


def ensure_directory(path: PathLike) -> str:
    """Creates a directory (and its parents) if needed."""

    Path(path).mkdir(parents=True, exist_ok=True)
    return os.fspath(path)


def _ensure_parent(path: PathLike) -> None:
    parent = os.path.dirname(os.path.abspath(os.fspath(path)))
    if not os.path.isdir(parent):
        ensure_directory(parent)


def _to_bytes(data: Data) -> bytes:
    if data is None:
        return b""
    if isinstance(data, str):
        return data.encode(DEFAULT_ENCODING)
    return bytes(data)


def write_sync(path: PathLike, data: Data = None) -> None:
    """Writes ``data`` to ``path``, creating the parent directory first."""

    _ensure_parent(path)
    with open(path, "wb") as handle:
        handle.write(_to_bytes(data))


def write_file_and_dir(path: PathLike, data: Data = None) -> None:
    """Same as :func:`write_sync`, kept for callers of the older name."""

    write_sync(path, data)


async def write(path: PathLike, data: Data = None) -> None:
    """Async :func:`write_sync`; missing folders are created recursively."""

    dir_path = os.path.dirname(os.path.abspath(os.fspath(path)))
    if not await exists(dir_path):
        await asyncio.to_thread(ensure_directory, dir_path)
    await asyncio.to_thread(_write_bytes, path, _to_bytes(data), "wb")


def _write_bytes(path: PathLike, payload: bytes, mode: str) -> None:
    with open(path, mode) as handle:
        handle.write(payload)


async def append(path: PathLike, data: Data) -> None:
    """Appends to ``path``; if its folder is missing it is created and the write retried once."""

    payload = _to_bytes(data)
    try:
        await asyncio.to_thread(_write_bytes, path, payload, "ab")
    except FileNotFoundError:
        await asyncio.to_thread(ensure_directory, os.path.dirname(os.path.abspath(os.fspath(path))))
        await asyncio.to_thread(_write_bytes, path, payload, "ab")


def merge_object_hooks(*hooks: Optional[ObjectHook]) -> Optional[ObjectHook]:
    """Chains ``json`` object hooks so each sees the previous hook's result."""

    active = [hook for hook in hooks if hook is not None]
    if not active:
        return None
    if len(active) == 1:
        return active[0]

    def merged(obj: Dict[str, Any]) -> Any:
        value: Any = obj
        for hook in active:
            if not isinstance(value, dict):
                break
            value = hook(value)
        return value

    return merged


def read_json_sync(path: PathLike, object_hook: Optional[ObjectHook] = None) -> Any:
    """Reads and parses a JSON file; an empty or malformed file raises ``JSONDecodeError``."""

    with open(path, "r", encoding=DEFAULT_ENCODING) as handle:
        content = handle.read()
    return json.loads(content, object_hook=object_hook)


def write_json_sync(
    path: PathLike,
    obj: Any,
    default: Optional[Callable[[Any], Any]] = None,
    indent: Optional[int] = None,
) -> None:
    write_sync(path, json.dumps(obj, default=default, indent=indent, ensure_ascii=False))


async def read_json(path: PathLike, object_hook: Optional[ObjectHook] = None) -> Any:
    content = await asyncio.to_thread(Path(path).read_text, encoding=DEFAULT_ENCODING)
    return json.loads(content, object_hook=object_hook)


async def write_json(
    path: PathLike,
    obj: Any,
    default: Optional[Callable[[Any], Any]] = None,
    indent: Optional[int] = None,
) -> None:
    """Serializes ``obj`` as JSON and writes it with :func:`write`."""

    await write(path, json.dumps(obj, default=default, indent=indent, ensure_ascii=False))


def write_gzip_sync(path: PathLike, data: Data, compresslevel: int = 9) -> None:
    """Writes ``data`` (text or bytes) gzip-compressed."""

    write_sync(path, gzip.compress(_to_bytes(data), compresslevel=compresslevel))


def read_gzip_sync(path: PathLike) -> bytes:
    """Reads a gzip (or zlib) compressed file and returns the raw bytes."""

    with open(path, "rb") as handle:
        compressed = handle.read()
    return zlib.decompress(compressed, _AUTO_HEADER_WBITS)


def serialize_object_sync(path: PathLike, obj: Any) -> None:
    """Stores ``obj`` as gzip-compressed JSON."""

    write_gzip_sync(path, json.dumps(obj, ensure_ascii=False))


def deserialize_object_sync(path: PathLike) -> Any:
    return json.loads(read_gzip_sync(path).decode(DEFAULT_ENCODING))


def remove_sync(path: PathLike) -> None:
    """Unlinks ``path``; a missing file is not an error."""

    try:
        os.unlink(path)
    except FileNotFoundError:
        pass


async def remove(path: PathLike) -> None:
    await asyncio.to_thread(remove_sync, path)


def silent_remove(path: PathLike, recursive: bool = False) -> None:
    """Removes a file, or a directory tree when ``recursive``; absence is ignored."""

    try:
        if recursive and os.path.isdir(path) and not os.path.islink(path):
            shutil.rmtree(path)
        else:
            os.remove(path)
    except FileNotFoundError:
        pass


def exists_sync(path: PathLike) -> bool:
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


async def exists(path: PathLike) -> bool:
    """True if ``path`` can be stat'ed; errors other than not-found propagate."""

    return await asyncio.to_thread(exists_sync, path)


def file_lines_sync(path: PathLike, line_separator: Union[str, Pattern[str]] = LINE_SEPARATOR_RE) -> Optional[List[str]]:
    """Returns the file split into lines, or ``None`` if it is empty or unreadable."""

    try:
        with open(path, "r", encoding=DEFAULT_ENCODING, newline="") as handle:
            data = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        logging.error("Unable to read lines from %s: %s", path, exc)
        return None
    if not data:
        return None
    return re.split(line_separator, data)


def insert_between_placeholders_sync(path: PathLike, data: str, begin_placeholder: str, end_placeholder: str) -> None:
    """Replaces the text between two markers in a file, creating the file if needed.

    Text before ``begin_placeholder`` and after ``end_placeholder`` is kept. When
    the markers are not found the block is appended to the existing content.
    """

    if not os.path.exists(path):
        write_sync(path, "")

    with open(path, "r", encoding=DEFAULT_ENCODING, newline="") as handle:
        content = handle.read()

    top, found_begin, rest = content.partition(begin_placeholder)
    bottom = ""
    if found_begin:
        _, found_end, tail = rest.partition(end_placeholder)
        if found_end:
            bottom = tail

    block = f"{begin_placeholder}\n{data}\n{end_placeholder}"
    write_sync(path, f"{top}{block}{bottom}")


def copy_file_recursive(src: PathLike, dest: PathLike) -> None:
    """Copies a file, creating the destination folder if needed."""

    _ensure_parent(dest)
    shutil.copyfile(src, dest)


def sha256(path: PathLike) -> str:
    """Hex SHA-256 digest of the whole file."""

    with open(path, "rb") as handle:
        return hashlib.sha256(handle.read()).hexdigest()
