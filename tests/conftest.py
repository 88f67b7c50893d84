import pytest

from extobadges import build_badges


class FakeStores:
    """Canned pages keyed by URL; any other URL fails like a 404."""

    def __init__(self):
        self.pages = {}
        self.fetched = []

    def __call__(self, url):
        self.fetched.append(url)
        if url not in self.pages:
            raise build_badges.FetchError(f"GET {url} failed: 404 Not Found")
        return self.pages[url]


@pytest.fixture()
def no_sleep(monkeypatch):
    delays = []
    monkeypatch.setattr(build_badges.time, "sleep", delays.append)
    return delays


@pytest.fixture()
def fake_stores(monkeypatch):
    stores = FakeStores()
    monkeypatch.setattr(build_badges, "fetch_page", stores)
    return stores
