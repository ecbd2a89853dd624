"""Error codes that tie a user-facing failure to the server-side log record."""

import secrets
from datetime import datetime, timezone

__all__ = ("generate_error_code",)


def generate_error_code() -> str:
    """Return an opaque code such as ``261017:142355-0042``.

    The timestamp is UTC; the suffix makes codes distinct within a second.
    """
    now = datetime.now(timezone.utc)
    return f"{now:%y%m%d:%H%M%S}-{secrets.randbelow(10000):04d}"
