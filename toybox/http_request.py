"""Parsing of the request line of an HTTP/1.1 request."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union

_INVALID_REQUEST = "Invalid Request"
_INVALID_ENCODING = "Invalid Encoding"
_INVALID_PROTOCOL = "Invalid Protocol"
_INVALID_METHOD = "Invalid Method"

_PROTOCOL = "HTTP/1.1"


class Method(str, Enum):
    """The request methods HTTP defines."""

    GET = "GET"
    DELETE = "DELETE"
    POST = "POST"
    PUT = "PUT"
    HEAD = "HEAD"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"


class ParseError(ValueError):
    """Raised when a buffer does not hold a request that can be understood."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


QueryValue = Union[str, list[str]]


@dataclass
class QueryString:
    """Query parameters; a key maps to one value or to a list of them."""

    data: dict[str, QueryValue] = field(default_factory=dict)

    def get(self, key: str) -> QueryValue | None:
        return self.data.get(key)


@dataclass
class Request:
    """The parts of a request taken from its request line."""

    path: str
    query_string: str | None
    method: Method
    headers: dict[str, str] = field(default_factory=dict)
    body: str = ""


def _next_word(text: str) -> tuple[str, str] | None:
    """Split ``text`` at its first space or carriage return."""
    for index, char in enumerate(text):
        if char in (" ", "\r"):
            return text[:index], text[index + 1:]
    return None


def _take_word(text: str) -> tuple[str, str]:
    split = _next_word(text)
    if split is None:
        raise ParseError(_INVALID_REQUEST)
    return split


def parse_request(buf: bytes) -> Request:
    """Parse the request line at the start of ``buf``.

    Raises :class:`ParseError` if the buffer is not UTF-8, the line is
    incomplete, the protocol is not HTTP/1.1 or the method is unknown.
    """
    try:
        text = bytes(buf).decode("utf-8")
    except UnicodeDecodeError:
        raise ParseError(_INVALID_ENCODING) from None

    method_word, rest = _take_word(text)
    path, rest = _take_word(rest)
    protocol, _ = _take_word(rest)

    if protocol != _PROTOCOL:
        raise ParseError(_INVALID_PROTOCOL)

    try:
        method = Method(method_word)
    except ValueError:
        raise ParseError(_INVALID_METHOD) from None

    query_string = None
    path, question, query = path.partition("?")
    if question:
        query_string = query

    return Request(path=path, query_string=query_string, method=method)