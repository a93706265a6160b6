import os
from typing import Any, Dict, List, Optional

import pytest

# Load .env if present, but don't fail if it's missing.
try:
    from dotenv import load_dotenv

    load_dotenv()
except Exception:
    pass

# ---- mode & env flags -------------------------------------------------------


def _truthy(s: str | None) -> bool:
    return str(s).strip().lower() in {"1", "true", "yes", "on"}


LIVE = _truthy(os.getenv("NAMEPROB_LIVE_TESTS"))


# =============================================================================
# MOCK HELPERS (used when NAMEPROB_LIVE_TESTS is NOT set)
# =============================================================================


class FakeResponse:
    def __init__(self, status=200, text="", json_obj=None):
        self.status_code = status
        self.text = text
        self._json = json_obj

    def json(self):
        if isinstance(self._json, Exception):
            raise self._json
        return self._json


def country_body(*pairs) -> Dict[str, Any]:
    """country_body(("NL", 0.85), ("BE", 0.12)) -> nationalize.io-shaped dict."""
    return {
        "count": 1,
        "name": "x",
        "country": [
            {"country_id": cc, "probability": p} for cc, p in pairs
        ],
    }


class FakeSession:
    """
    Stand-in for requests.Session. `routes` maps a name to either a JSON body
    (dict), a FakeResponse, or an Exception instance to raise.
    Unknown names get an empty country list.
    """

    def __init__(self, routes: Optional[Dict[str, Any]] = None) -> None:
        self.routes = dict(routes or {})
        self.calls: List[Dict[str, Any]] = []
        self.headers: Dict[str, str] = {}

    def get(self, url, params=None, timeout=None):
        self.calls.append({"url": url, "params": params, "timeout": timeout})
        name = (params or {}).get("name")
        route = self.routes.get(name, {"country": []})
        if isinstance(route, Exception):
            raise route
        if isinstance(route, FakeResponse):
            return route
        return FakeResponse(status=200, text=str(route), json_obj=route)

    def names_requested(self) -> List[str]:
        return [c["params"]["name"] for c in self.calls]


@pytest.fixture
def fake_session():
    return FakeSession(
        {
            "Aljosja": country_body(("NL", 0.85), ("BE", 0.12)),
            "Xz123": {"country": []},
        }
    )


@pytest.fixture
def cache():
    from nameprob.cache import NameCache

    return NameCache()


@pytest.fixture
def fetcher(cache, fake_session):
    from nameprob.fetch import NationalizeFetcher

    return NationalizeFetcher(
        cache, session=fake_session, api_url="https://mock.test"
    )


@pytest.fixture
def client(cache, fetcher):
    from nameprob.client import NameProb

    return NameProb(cache=cache, source=fetcher)


@pytest.fixture(scope="session")
def live_client():
    """Real nationalize.io client; only created in LIVE mode."""
    if not LIVE:
        pytest.skip("live_client skipped (offline mode)")
    from nameprob.client import NameProb

    return NameProb()


# =============================================================================
# PYTEST MARKER HANDLING
# =============================================================================


def pytest_configure(config: pytest.Config) -> None:
    # Register a 'live' marker for any tests that explicitly want real I/O.
    config.addinivalue_line("markers", "live: test requires live API access")


def pytest_runtest_setup(item: pytest.Item) -> None:
    # If a test is marked live but we're not in LIVE mode, skip it proactively.
    if "live" in item.keywords and not LIVE:
        pytest.skip("live test skipped (NAMEPROB_LIVE_TESTS not enabled)")
