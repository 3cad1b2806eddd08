import asyncio

import aiohttp
import pytest

from hostkit.downloader import download_on_fs, download_on_fs_sync
from hostkit.fs.files import exists


def test_download_creates_directory_and_file(server_url, tmp_path):
    dir_path = tmp_path / "test"
    file_path = dir_path / "test.txt"
    assert not asyncio.run(exists(dir_path))

    meta = asyncio.run(download_on_fs({"url": server_url}, file_path))

    assert meta.status == 200
    assert file_path.read_text() == "Hello World\n"


def test_download_streams_large_body(server_url, tmp_path):
    file_path = tmp_path / "big.bin"

    asyncio.run(download_on_fs(server_url + "/big", file_path, chunk_size=1024))

    assert file_path.stat().st_size == 1 << 18


def test_download_sync(server_url, tmp_path):
    file_path = tmp_path / "nested" / "dir" / "hello.txt"

    meta = download_on_fs_sync({"url": server_url}, file_path)

    assert meta.status == 200
    assert file_path.read_text() == "Hello World\n"


def test_download_transport_error_propagates(tmp_path):
    with pytest.raises(aiohttp.ClientError):
        asyncio.run(download_on_fs({"url": "http://127.0.0.1:9/"}, tmp_path / "out.txt"))
