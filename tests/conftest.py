"""Pytest configuration for hostkit tests."""
import json
import threading
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer

import pytest


class _Handler(BaseHTTPRequestHandler):
    def _reply(self, status, body, content_type=None, extra_headers=None):
        payload = body.encode("utf-8") if isinstance(body, str) else body
        self.send_response(status)
        if content_type:
            self.send_header("Content-Type", content_type)
        for key, value in extra_headers or ():
            self.send_header(key, value)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        self.wfile.write(payload)

    def _read_body(self):
        length = int(self.headers.get("Content-Length") or 0)
        return self.rfile.read(length) if length else b""

    def _dispatch(self):
        body = self._read_body()
        if self.path.startswith("/json"):
            self._reply(200, '{"a":1}', "application/json")
        elif self.path.startswith("/echo"):
            echoed = {
                "method": self.command,
                "path": self.path,
                "content_type": self.headers.get("Content-Type"),
                "content_types": self.headers.get_all("Content-Type"),
                "content_lengths": self.headers.get_all("Content-Length"),
                "body": body.decode("utf-8"),
            }
            self._reply(200, json.dumps(echoed), "application/json; charset=utf-8")
        elif self.path.startswith("/empty-json"):
            self._reply(200, "", "application/json")
        elif self.path.startswith("/cookies"):
            self._reply(200, "ok", "text/plain", [("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")])
        elif self.path.startswith("/redirect"):
            self._reply(302, "", extra_headers=[("Location", "/json")])
        elif self.path.startswith("/big"):
            self._reply(200, b"x" * (1 << 18), "application/octet-stream")
        else:
            self._reply(200, "Hello World\n")

    do_GET = _dispatch
    do_POST = _dispatch

    def log_message(self, format, *args):
        pass


@pytest.fixture
def server_url():
    """Base URL of a local HTTP server on an ephemeral port."""
    server = ThreadingHTTPServer(("127.0.0.1", 0), _Handler)
    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield f"http://127.0.0.1:{server.server_address[1]}"
    finally:
        server.shutdown()
        server.server_close()
