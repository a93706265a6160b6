from __future__ import annotations

from typing import Any, Dict, Optional, Tuple

import requests

from .config import DEFAULT_TIMEOUT_S, NATIONALIZE_API_URL, USER_AGENT

# Error kinds reported by safe_get() alongside the status code.
ERR_NONE = ""
ERR_NETWORK = "network"
ERR_HTTP = "http"
ERR_DECODE = "decode"


def make_session(user_agent: Optional[str] = None) -> requests.Session:
    s = requests.Session()
    s.headers.update(
        {
            "Accept": "application/json",
            "User-Agent": user_agent or USER_AGENT,
        }
    )
    return s


def safe_get(
    session: requests.Session,
    params: Dict[str, Any],
    *,
    url: str = NATIONALIZE_API_URL,
    timeout: float = DEFAULT_TIMEOUT_S,
) -> Tuple[Optional[Any], int, str, str]:
    """
    Return (json_or_None, status_code, text_snippet, error_kind). Never raises
    for transport or decoding problems.

    status_code is -1 when no response was received.
    """
    try:
        r = session.get(url, params=params, timeout=timeout)
    except requests.RequestException as e:
        return (None, -1, f"{type(e).__name__}: {e}", ERR_NETWORK)

    status = r.status_code
    text_snippet = (r.text or "")[:300].replace("\n", " ")
    if status >= 400:
        return (None, status, text_snippet, ERR_HTTP)
    try:
        return (r.json(), status, text_snippet, ERR_NONE)
    except ValueError:
        return (None, status, text_snippet, ERR_DECODE)
