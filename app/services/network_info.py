"""Network Info — reflects inbound request metadata (headers, client IP, host).

Invariants:
    - Header names are lower-cased; repeated headers joined with ", "
    - Without trust_proxy: ip is the socket peer, ips is empty, hostname from Host
    - With trust_proxy: X-Forwarded-For / X-Forwarded-Host take precedence
"""

from fastapi import Request

from app.core.clock import utc_timestamp
from app.schemas.probes import NetworkInfo


def collect_headers(request: Request) -> dict[str, str]:
    headers: dict[str, str] = {}
    for name, value in request.headers.items():
        if name in headers:
            headers[name] = f"{headers[name]}, {value}"
        else:
            headers[name] = value
    return headers


def forwarded_chain(request: Request) -> list[str]:
    """Client-first list of addresses from X-Forwarded-For."""
    raw = request.headers.get("x-forwarded-for", "")
    return [part.strip() for part in raw.split(",") if part.strip()]


def strip_port(host: str) -> str:
    if host.startswith("["):
        end = host.find("]")
        return host[: end + 1] if end != -1 else host
    return host.split(":", 1)[0]


def resolve_hostname(request: Request, trust_proxy: bool) -> str | None:
    host = None
    if trust_proxy:
        forwarded = request.headers.get("x-forwarded-host")
        if forwarded:
            host = forwarded.split(",", 1)[0].strip()
    if not host:
        host = request.headers.get("host")
    return strip_port(host) if host else None


def describe_request(
    request: Request, region: str, trust_proxy: bool,
) -> NetworkInfo:
    peer = request.client.host if request.client else None
    ips = forwarded_chain(request) if trust_proxy else []
    return NetworkInfo(
        headers=collect_headers(request),
        ip=ips[0] if ips else peer,
        ips=ips,
        hostname=resolve_hostname(request, trust_proxy),
        railway_region=region,
        timestamp=utc_timestamp(),
    )
