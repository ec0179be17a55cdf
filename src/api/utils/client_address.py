from typing import Optional

from fastapi import Request


def client_address(request: Request, trust_forwarded: bool = False) -> Optional[str]:
    """
    Address of the calling client.

    ``X-Forwarded-For`` is client-controlled, so its first hop is used only
    when the service runs behind a proxy that overwrites the header.
    """
    if trust_forwarded:
        forwarded = request.headers.get("X-Forwarded-For")
        if forwarded:
            return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None
