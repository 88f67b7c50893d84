import requests

USER_AGENT = "extobadges/1.0 (+https://github.com/extobadges/extobadges)"
TIMEOUT = 30


class FetchError(RuntimeError):
    """Raised when a store page cannot be downloaded."""


def fetch_page(url: str) -> str:
    """GET ``url`` once and return the response body as text."""
    try:
        r = requests.get(url, headers={"User-Agent": USER_AGENT}, timeout=TIMEOUT)
        r.raise_for_status()
        return r.text
    except requests.RequestException as exc:
        raise FetchError(f"GET {url} failed: {exc}") from exc
