"""URL validation utility to prevent SSRF when fetching job pages.

Blocks requests to internal/private network addresses before any URL access.

NOTE: This validation is subject to DNS rebinding (TOCTOU) attacks. The hostname
is resolved here, and httpx resolves it again when it connects. For full
protection, use a network-level egress filter or proxy.
"""

from __future__ import annotations

import ipaddress
import socket
from urllib.parse import urlparse


class SSRFError(ValueError):
    """Raised when a URL resolves to a blocked (private/internal) address."""


_BLOCKED_HOSTNAMES = {"localhost", "localhost.localdomain"}

# Cloud metadata and special IPs that may bypass is_private checks
_BLOCKED_IPS = {
    ipaddress.ip_address("169.254.169.254"),
    ipaddress.ip_address("0.0.0.0"),
}


def _is_blocked(addr: ipaddress.IPv4Address | ipaddress.IPv6Address) -> bool:
    return (
        addr in _BLOCKED_IPS
        or addr.is_private
        or addr.is_loopback
        or addr.is_reserved
        or addr.is_link_local
    )


def validate_url(url: str) -> str:
    """Validate that a URL does not point to an internal/private network.

    Returns the validated URL string on success.
    Raises SSRFError if the URL targets a private/internal address.
    Raises ValueError if the URL is malformed.
    """
    parsed = urlparse(url)

    if parsed.scheme not in ("http", "https"):
        raise ValueError(f"Unsupported URL scheme: {parsed.scheme!r}")

    hostname = parsed.hostname
    if not hostname:
        raise ValueError(f"No hostname in URL: {url!r}")

    if hostname.lower() in _BLOCKED_HOSTNAMES:
        raise SSRFError(f"Blocked internal hostname: {hostname!r}")

    try:
        addr = ipaddress.ip_address(hostname)
    except ValueError:
        addr = None
    if addr is not None:
        if _is_blocked(addr):
            raise SSRFError(f"Blocked private/internal IP: {addr}")
        return url

    try:
        results = socket.getaddrinfo(hostname, None, socket.AF_UNSPEC, socket.SOCK_STREAM)
    except socket.gaierror as exc:
        raise ValueError(f"Cannot resolve hostname {hostname!r}: {exc}") from exc

    for _family, _type, _proto, _canonname, sockaddr in results:
        addr = ipaddress.ip_address(sockaddr[0])
        if _is_blocked(addr):
            raise SSRFError(f"Hostname {hostname!r} resolves to blocked address: {addr}")

    return url
