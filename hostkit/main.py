from __future__ import annotations

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import List, Optional

from dotenv import load_dotenv

from .downloader.fs_downloader import download_on_fs
from .fs.dirs import UnsupportedPlatformError, get_os_dirs
from .fs.files import sha256
from .fs.paths import resolve
from .http.constants import Method
from .http.http_client import http_json_request, http_request
from .models import RequestOptions

load_dotenv()


def _env_str(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or value == "":
        return None
    return value


def _env_float(name: str) -> float | None:
    value = _env_str(name)
    if value is None:
        return None
    try:
        return float(value)
    except ValueError:
        return None


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Filesystem, standard directory and HTTP helpers.")
    parser.add_argument(
        "--log-level",
        default=_env_str("HOSTKIT_LOG_LEVEL") or "INFO",
        help="Logging level name (DEBUG, INFO, WARNING, ...)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=_env_float("HOSTKIT_HTTP_TIMEOUT"),
        help="Request timeout in seconds; no timeout when omitted",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("dirs", help="Print the standard directories for this platform")

    expand = sub.add_parser("expand", help="Print the absolute form of a path, expanding ~")
    expand.add_argument("path")

    digest = sub.add_parser("sha256", help="Print the SHA-256 digest of a file")
    digest.add_argument("file")

    get = sub.add_parser("get", help="Fetch a URL and print the body")
    get.add_argument("url")
    get.add_argument("--json", action="store_true", help="Parse the response as JSON")
    get.add_argument("--method", default=Method.GET.value, choices=[method.value for method in Method], help="HTTP method")

    download = sub.add_parser("download", help="Stream a URL to a file")
    download.add_argument("url")
    download.add_argument("dest")
    return parser.parse_args(argv)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def _request_options(args: argparse.Namespace) -> RequestOptions:
    return RequestOptions(url=args.url, timeout=args.timeout, method=getattr(args, "method", Method.GET.value))


def run(args: argparse.Namespace) -> int:
    if args.command == "dirs":
        try:
            dirs = get_os_dirs()
        except (UnsupportedPlatformError, KeyError) as exc:
            logging.error("Unable to resolve standard directories: %s", exc)
            return 1
        for category, path in dirs.items():
            print(f"{category:<14} {path}")
        return 0

    if args.command == "expand":
        print(resolve(args.path))
        return 0

    if args.command == "sha256":
        print(sha256(args.file))
        return 0

    if args.command == "get":
        if args.json:
            resp = asyncio.run(http_json_request(_request_options(args)))
        else:
            resp = asyncio.run(http_request(_request_options(args)))
        logging.info("%s %s", resp.response.status, resp.response.reason or "")
        data = resp.data
        print(data if isinstance(data, str) else json.dumps(data, indent=2, ensure_ascii=False))
        return 0 if resp.response.status < 400 else 1

    if args.command == "download":
        meta = asyncio.run(download_on_fs(_request_options(args), resolve(args.dest)))
        return 0 if meta.status < 400 else 1

    return 2


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    configure_logging(args.log_level)
    sys.exit(run(args))


if __name__ == "__main__":
    main()
