from fastapi import Request

from jobboard.config import settings

UNKNOWN_SUBMITTER = "unknown"


async def resolve_submitter_id(request: Request) -> str:
    """Best-effort network origin of the poster.

    Override this dependency to plug in another identity strategy. Requests
    with no resolvable origin all share the ``unknown`` rate-limit bucket.
    """
    if settings.trust_forwarded_headers:
        forwarded = request.headers.get("x-forwarded-for", "")
        first_hop = forwarded.split(",")[0].strip()
        if first_hop:
            return first_hop
        real_ip = request.headers.get("x-real-ip", "").strip()
        if real_ip:
            return real_ip
    if request.client and request.client.host:
        return request.client.host
    return UNKNOWN_SUBMITTER
