"""An HTTP front end to a :class:`~toybox.database.Database`."""

from __future__ import annotations

import logging
import re
import sys
import threading
from http import HTTPStatus
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import unquote, urlsplit

from toybox.database import Database

DEFAULT_DATABASE = "test.db"
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 3000

_ROUTE = re.compile(r"^/(get|set)/([^/]+)$")
_LOG = logging.getLogger(__name__)


class _KeyValueServer(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, address: tuple[str, int], database: Database) -> None:
        super().__init__(address, KeyValueHandler)
        self.database = database
        self.lock = threading.Lock()


class KeyValueHandler(BaseHTTPRequestHandler):
    """Serves ``POST /set/<key>`` and ``GET /get/<key>``."""

    server: _KeyValueServer

    def do_GET(self) -> None:
        route = self._route()
        if route is None:
            self._respond(HTTPStatus.NOT_FOUND)
            return
        action, key = route
        if action != "get":
            self._respond(HTTPStatus.METHOD_NOT_ALLOWED)
            return
        with self.server.lock:
            value = self.server.database.get(key)
        if value is None:
            self._respond(HTTPStatus.NOT_FOUND)
        else:
            self._respond(HTTPStatus.OK, value.encode("utf-8"))

    def do_POST(self) -> None:
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length > 0 else b""
        route = self._route()
        if route is None:
            self._respond(HTTPStatus.NOT_FOUND)
            return
        action, key = route
        if action != "set":
            self._respond(HTTPStatus.METHOD_NOT_ALLOWED)
            return
        value = body.decode("utf-8", errors="replace")
        with self.server.lock:
            self.server.database.put(key, value)
        self._respond(HTTPStatus.OK)

    def _route(self) -> tuple[str, str] | None:
        match = _ROUTE.match(urlsplit(self.path).path)
        if match is None:
            return None
        return match.group(1), unquote(match.group(2))

    def _respond(self, status: HTTPStatus, body: bytes = b"") -> None:
        self.send_response(status)
        if body:
            self.send_header("Content-Type", "text/plain; charset=utf-8")
        self.send_header("Content-Length", str(len(body)))
        self.end_headers()
        if body:
            self.wfile.write(body)

    def log_message(self, format: str, *args: object) -> None:
        _LOG.debug("%s - %s", self.address_string(), format % args)


def make_server(
    database: Database, host: str = DEFAULT_HOST, port: int = DEFAULT_PORT
) -> ThreadingHTTPServer:
    """Create a threaded HTTP server bound to ``host``:``port``."""
    return _KeyValueServer((host, port), database)


def main(argv: list[str] | None = None) -> int:
    logging.basicConfig(level=logging.INFO)
    database = Database(DEFAULT_DATABASE)
    try:
        server = make_server(database, DEFAULT_HOST, DEFAULT_PORT)
    except OSError as error:
        print(f"Cannot listen on {DEFAULT_HOST}:{DEFAULT_PORT}: {error}", file=sys.stderr)
        return 1
    print(f"Listening on http://{DEFAULT_HOST}:{DEFAULT_PORT}")
    with server:
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())