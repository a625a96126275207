"""A tiny TCP server answering HTTP-style responses, with a linked-list service."""

from __future__ import annotations

import argparse
import re
import socket
import sys
from typing import Callable

from scratchkit.linked_list import LinkedList

PORT = 8081
BUFFER_SIZE = 1024

_OK = "HTTP/1.1 200 OK\r\nContent-Type: text/html\r\n\r\n"
_BAD = "HTTP/1.1 400 Bad Request\r\nContent-Type: text/html\r\n\r\n"

_HELLO_STATUS = "HTTP/1.1 200 OK"
_HELLO_HEADERS = (("Content-Type", "text/html"), ("Content-Length", "47"))
_HELLO_BODY = "<html><body><h1>Hello, World!</h1></body></html>"

# operation of 1-15 non-colon characters, a colon, then a signed integer
_REQUEST = re.compile(r"([^:]{1,15}):[ \t\n\r\f\v]*([+-]?\d+)")

Handler = Callable[[str], str]


def _limit(response: str) -> str:
    return response[: BUFFER_SIZE - 1]


def _compose(status: str, headers, body: str) -> str:
    lines = [status, *(f"{name}: {value}" for name, value in headers)]
    return "\r\n".join(lines) + "\r\n\r\n" + body


HELLO_RESPONSE = _compose(_HELLO_STATUS, _HELLO_HEADERS, _HELLO_BODY)


class ListService:
    """Answers ``insert:N``, ``search:N``, ``delete:N`` and ``print`` requests."""

    def __init__(self, values=()):
        self.items = LinkedList(values)

    def handle(self, request: str) -> str:
        """Apply ``request`` to the list and return the full response text."""
        match = _REQUEST.match(request)
        if match:
            operation, value = match.group(1), int(match.group(2))
            if operation == "insert":
                self.items.append(value)
                body = f"{_OK}Inserted {value} into the list."
            elif operation == "search":
                if self.items.search(value):
                    body = f"{_OK}Found {value} in the list."
                else:
                    body = f"{_OK}{value} not found in the list."
            elif operation == "delete":
                self.items.delete(value)
                body = f"{_OK}Deleted {value} from the list."
            else:
                body = f"{_BAD}Unknown operation."
        elif request == "print":
            contents = "".join(f"{value} " for value in self.items)
            body = f"{_OK}List: {contents}"
        else:
            body = f"{_BAD}Invalid request."
        return _limit(body)


def hello_response(request: str) -> str:
    """Return the hello-world page; the request does not change the answer."""
    return _limit(_compose(_HELLO_STATUS, _HELLO_HEADERS, _HELLO_BODY))


def _decode(raw: bytes) -> str:
    return raw.split(b"\x00", 1)[0].decode("latin-1")


def serve(host: str = "", port: int = PORT, handler: Handler = hello_response) -> None:
    """Accept connections forever, answering each request with ``handler``."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as server:
        server.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
        server.bind((host, port))
        server.listen(3)
        print(f"Server is listening on port {port}...", flush=True)
        while True:
            print("Waiting for a connection...", flush=True)
            conn, _address = server.accept()
            with conn:
                request = _decode(conn.recv(BUFFER_SIZE))
                print(f"Received request:\n{request}\n", flush=True)
                conn.sendall(handler(request).encode("latin-1"))
                print("Response sent", flush=True)


def main(argv=None) -> int:
    """Run the server from the command line."""
    parser = argparse.ArgumentParser(
        prog="scratchkit-server", description="Serve a linked list over TCP."
    )
    parser.add_argument("--host", default="", help="address to bind (default: all)")
    parser.add_argument("--port", type=int, default=PORT, help="port to listen on")
    parser.add_argument(
        "--hello", action="store_true", help="serve a fixed hello-world page instead"
    )
    args = parser.parse_args(argv)
    handler = hello_response if args.hello else ListService().handle
    try:
        serve(args.host, args.port, handler)
    except KeyboardInterrupt:
        return 0
    except OSError as exc:
        print(f"server: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())