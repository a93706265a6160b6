from __future__ import annotations

import sys
from typing import Optional

import requests

from .cache import NameCache
from .config import DEFAULT_TIMEOUT_S, NATIONALIZE_API_URL
from .core.contracts import FetchResult, FetchStatus
from .core.interfaces import NameSource
from .http import ERR_DECODE, ERR_HTTP, make_session, safe_get
from .parse import PayloadError, parse_country_payload


class NationalizeFetcher(NameSource):
    """
    nationalize.io adapter.

    GET {NATIONALIZE_API_URL}?name=<name>

    Notes:
      - On success the parsed NameRecordSet is stored in the cache under the
        exact name string sent (an empty country list is stored too).
      - Network, HTTP and decode failures leave the cache untouched and are
        returned as a FetchResult; nothing is raised.
      - No retries and no pacing.
    """

    def __init__(
        self,
        cache: NameCache,
        *,
        session: Optional[requests.Session] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        debug: bool = False,
    ) -> None:
        self._cache = cache
        self._session = session or make_session()
        self._url = api_url or NATIONALIZE_API_URL
        self._timeout = timeout if timeout is not None else DEFAULT_TIMEOUT_S
        self._debug = bool(debug)

    @property
    def cache(self) -> NameCache:
        return self._cache

    def _log(self, msg: str) -> None:
        if self._debug:
            print(f"[nationalize] {msg}", file=sys.stderr)

    def _fail(
        self, name: str, status: FetchStatus, error: str, status_code: int
    ) -> FetchResult:
        self._log(f"error for name={name!r}: {status.value}: {error}")
        return FetchResult(
            name=name, status=status, error=error, status_code=status_code
        )

    def fetch(self, name: str) -> FetchResult:
        payload, status, body, err = safe_get(
            self._session,
            {"name": name},
            url=self._url,
            timeout=self._timeout,
        )
        self._log(f"GET name={name!r} -> {status}")

        if err == ERR_HTTP:
            return self._fail(
                name, FetchStatus.HTTP_ERROR, f"HTTP {status}: {body}", status
            )
        if err == ERR_DECODE:
            return self._fail(
                name, FetchStatus.DECODE_ERROR, f"invalid JSON: {body}", status
            )
        if err:
            return self._fail(name, FetchStatus.NETWORK_ERROR, body, status)

        try:
            records = parse_country_payload(name, payload)
        except PayloadError as e:
            return self._fail(name, FetchStatus.DECODE_ERROR, str(e), status)

        self._cache.put(name, records)
        self._log(f"stored {len(records)} record(s) for name={name!r}")
        return FetchResult(
            name=name,
            status=FetchStatus.OK,
            records=records,
            status_code=status,
        )
