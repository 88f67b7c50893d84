from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Tuple

from extobadges.extractors import extract_addon_users, extract_chrome_users


@dataclass(frozen=True)
class Store:
    name: str
    url_template: str
    extract: Callable[[str], Optional[int]]

    def url(self, identifier: str) -> str:
        return self.url_template.format(id=identifier)


CHROME = Store(
    "chrome",
    "https://chrome.google.com/webstore/detail/{id}",
    extract_chrome_users,
)
MOZILLA = Store(
    "mozilla",
    "https://addons.mozilla.org/en-US/firefox/addon/{id}/",
    extract_addon_users,
)

# Query order within an entry.
STORES: Tuple[Store, ...] = (CHROME, MOZILLA)


@dataclass(frozen=True)
class ExtensionEntry:
    name: str
    chrome: Optional[str] = None
    mozilla: Optional[str] = None

    def store_ids(self) -> Iterator[Tuple[Store, str]]:
        """Yield ``(store, identifier)`` for every store this entry is listed on."""
        for store in STORES:
            identifier = getattr(self, store.name)
            if identifier is not None:
                yield store, identifier
