"""Request signing for the PTV timetable API.

PTV requires every request to carry the developer id and an HMAC-SHA1
signature of the request path and query string (including ``devid``),
keyed with the developer's API key and hex-encoded in upper case.
"""

import hashlib
import hmac
from typing import Any
from urllib.parse import urlencode


def _encode_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_query(params: dict[str, Any] | None) -> list[tuple[str, str]]:
    """Flatten parameters into query pairs, repeating keys for list values."""
    pairs: list[tuple[str, str]] = []
    for key, value in (params or {}).items():
        if value is None:
            continue
        if isinstance(value, list | tuple):
            pairs.extend((key, _encode_value(item)) for item in value)
        else:
            pairs.append((key, _encode_value(value)))
    return pairs


def compute_signature(api_key: str, request: str) -> str:
    """HMAC-SHA1 of the path-and-query string, upper-case hex."""
    return hmac.new(api_key.encode("utf-8"), request.encode("utf-8"), hashlib.sha1).hexdigest().upper()


def sign_request(
    base_url: str,
    path: str,
    params: dict[str, Any] | None,
    dev_id: str,
    api_key: str,
) -> str:
    """Build the full signed URL for a request.

    Args:
        base_url: API base URL without trailing slash.
        path: Request path, already percent-encoded.
        params: Query parameters (lists become repeated keys).
        dev_id: Developer id issued by PTV.
        api_key: Signing key issued by PTV.

    Returns:
        URL with ``devid`` and ``signature`` appended.
    """
    pairs = build_query(params)
    pairs.append(("devid", dev_id))
    request = f"{path}?{urlencode(pairs)}"
    signature = compute_signature(api_key, request)
    return f"{base_url.rstrip('/')}{request}&signature={signature}"
