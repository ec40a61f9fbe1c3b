"""Identity payload returned by the `/` endpoint of each service."""

import socket
from datetime import datetime, timezone


def utc_timestamp():
    """Current UTC time as ISO-8601 with milliseconds and a `Z` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_identity(settings, message):
    """Describe the running service.

    The timestamp is taken here, when the payload is built, so it reflects
    response construction time.
    """
    return {
        "service": settings.service_name,
        "version": settings.service_version,
        "hostname": socket.gethostname(),
        "message": message,
        "timestamp": utc_timestamp(),
    }
