"""
Master key verification.

All mutating joke endpoints are protected by a single shared secret
passed as the ``key`` query parameter.  The comparison is a plain
equality check performed with ``hmac.compare_digest`` so that it runs
in constant time.  A missing key, or a service started without a
configured master key, never authorizes a request.
"""

import hmac
from typing import Optional


def verify_master_key(supplied: Optional[str], expected: Optional[str]) -> bool:
    """Return ``True`` if ``supplied`` equals the configured master key.

    Parameters
    ----------
    supplied : Optional[str]
        The key sent by the client, or ``None`` when absent.
    expected : Optional[str]
        The configured master key.  An empty value disables all
        mutating operations.
    """
    if not expected or supplied is None:
        return False
    return hmac.compare_digest(supplied.encode("utf-8"), expected.encode("utf-8"))
