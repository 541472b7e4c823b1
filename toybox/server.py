"""A TCP server that reads and decodes HTTP request lines."""

from __future__ import annotations

import socket
import sys
from dataclasses import dataclass

from toybox.http_request import ParseError, Request, parse_request

DEFAULT_ADDRESS = "127.0.0.1:8080"
_BUFFER_SIZE = 1024


@dataclass
class Server:
    """Listens on ``addr`` (``host:port``) and decodes each request it receives."""

    addr: str

    def handle_connection(self, conn: socket.socket) -> Request | None:
        """Read one request from ``conn``, report it and close the connection.

        Returns the decoded request, or ``None`` if it could not be read or
        decoded.
        """
        with conn:
            try:
                data = conn.recv(_BUFFER_SIZE)
            except OSError as error:
                print(f"Failed to read from connection: {error}")
                return None
            print(f"Received a request: {data.decode('utf-8', errors='replace')}")
            try:
                return parse_request(data)
            except ParseError as error:
                print(f"Error on decoding request: {error}")
                return None

    def run(self) -> None:
        """Accept connections forever."""
        print(f"Listening on {self.addr}")
        host, _, port = self.addr.rpartition(":")
        with socket.create_server((host, int(port))) as listener:
            while True:
                try:
                    conn, _ = listener.accept()
                except OSError as error:
                    print(f"Error on accept: {error}")
                    continue
                self.handle_connection(conn)


def main(argv: list[str] | None = None) -> int:
    server = Server(DEFAULT_ADDRESS)
    try:
        server.run()
    except KeyboardInterrupt:
        return 0
    except OSError as error:
        print(f"Cannot listen on {server.addr}: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())