"""Map transport exceptions onto fetch error kinds."""

import socket
import ssl

import httpx

from .models import FetchErrorKind

_DNS_MARKERS = (
    "name or service not known",
    "nodename nor servname",
    "getaddrinfo failed",
    "temporary failure in name resolution",
    "no address associated with hostname",
)
_TLS_MARKERS = ("certificate", "ssl", "tls", "handshake")


def _exception_chain(exc: BaseException):
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def classify_error(exc: Exception) -> FetchErrorKind:
    """Return the FetchErrorKind that best describes ``exc``."""
    if isinstance(exc, httpx.TimeoutException):
        return FetchErrorKind.TIMEOUT
    if isinstance(exc, (httpx.RemoteProtocolError, httpx.DecodingError, httpx.InvalidURL)):
        return FetchErrorKind.MALFORMED

    for link in _exception_chain(exc):
        if isinstance(link, socket.gaierror):
            return FetchErrorKind.DNS
        if isinstance(link, ssl.SSLError):
            return FetchErrorKind.TLS

    message = str(exc).lower()
    if any(marker in message for marker in _DNS_MARKERS):
        return FetchErrorKind.DNS
    if any(marker in message for marker in _TLS_MARKERS):
        return FetchErrorKind.TLS
    if isinstance(exc, httpx.ProtocolError):
        return FetchErrorKind.MALFORMED
    return FetchErrorKind.CONNECTION
