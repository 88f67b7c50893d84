"""User count extraction for the supported extension store pages.

Each extractor takes the raw HTML of a listing page and returns the user
count, or ``None`` when the page does not carry a usable one.
"""

from __future__ import annotations

from typing import Optional

from bs4 import BeautifulSoup

NOSCRIPT_OPEN = "<noscript>"
NOSCRIPT_CLOSE = "</noscript>"
U32_MAX = 2**32 - 1


class FatalScrapeError(RuntimeError):
    """Page structure is broken badly enough that the whole run must stop."""


class ChromeMarkupMissing(FatalScrapeError):
    """Raised when a Chrome Web Store page has no <noscript> section."""


def split_users_label(text: str) -> Optional[str]:
    """Return the count token of a ``"<count> users"`` label.

    The label must split on whitespace into exactly two tokens; anything
    else (``"1 234 users"``, ``"users"``, ``""``) yields ``None``.
    """
    parts = text.split()
    if len(parts) != 2:
        return None
    return parts[0]


def parse_count(token: str) -> Optional[int]:
    """Parse an unsigned 32-bit count made of ASCII digits only.

    Locale formatting is not understood: ``"1,234"``, ``"1.2K"``, ``"+5"``
    and ``"1_000"`` are all rejected.
    """
    if not token or not token.isascii() or not token.isdigit():
        return None
    value = int(token)
    if value > U32_MAX:
        return None
    return value


def extract_chrome_users(page: str) -> Optional[int]:
    start = page.find(NOSCRIPT_OPEN)
    end = page.rfind(NOSCRIPT_CLOSE)
    if start == -1 or end == -1:
        raise ChromeMarkupMissing("Chrome Web Store page has no <noscript> section")

    # Only the no-script fallback is rendered server side.
    soup = BeautifulSoup(page[start + len(NOSCRIPT_OPEN):end], "html.parser")

    for span in soup.find_all("span"):
        title = span.get("title")
        if title is None or title != span.get_text():
            continue
        token = split_users_label(title)
        if token is None:
            continue
        return parse_count(token)

    return None


def extract_addon_users(page: str) -> Optional[int]:
    soup = BeautifulSoup(page, "html.parser")

    for title in soup.select("dl.MetadataCard-list dt.MetadataCard-title"):
        if title.get_text().strip() != "Users":
            continue
        value = title.parent.find("dd", recursive=False)
        if value is None:
            continue
        # First labelled value decides, parse failure included.
        return parse_count(value.get_text().strip())

    return None
