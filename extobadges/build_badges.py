#!/usr/bin/env python3
"""Scrapes user count information from browser extension stores and writes
one "users" SVG badge per configured extension."""

from __future__ import annotations

import argparse
import sys
import time
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional

from extobadges.badge import BadgeRenderError, render_users_badge
from extobadges.extractors import FatalScrapeError
from extobadges.fetch import FetchError, fetch_page
from extobadges.stores import STORES, ExtensionEntry

DEFAULT_DELAY_MS = 1000
DEFAULT_DEST = "."
DEFAULT_BADGES = "./badges.toml"


class ConfigError(RuntimeError):
    """Raised when the badges file cannot be read or understood."""


class BadgeBuildError(RuntimeError):
    """Raised when a single entry's badge cannot be built."""


@dataclass(frozen=True)
class RunConfig:
    delay_ms: int = DEFAULT_DELAY_MS
    dest_path: Path = Path(DEFAULT_DEST)
    badges_path: Path = Path(DEFAULT_BADGES)


def load_entries(path: Path) -> List[ExtensionEntry]:
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot open badges file {path}: {exc}") from exc
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise ConfigError(f"Failed to parse badges TOML {path}: {exc}") from exc

    entries: List[ExtensionEntry] = []
    for name, table in data.items():
        if name in ("", ".", "..") or "/" in name or "\\" in name:
            raise ConfigError(f"Entry name '{name}' is not a valid file name")
        if not isinstance(table, dict):
            raise ConfigError(f"Entry '{name}' must be a table")
        ids: Dict[str, Optional[str]] = {}
        for store in STORES:
            value = table.get(store.name)
            if value is not None and not isinstance(value, str):
                raise ConfigError(f"Entry '{name}': '{store.name}' must be a string")
            ids[store.name] = value
        entries.append(ExtensionEntry(name=name, **ids))
    return entries


def count_users(entry: ExtensionEntry, delay_ms: int) -> int:
    """Sum user counts over every store the entry is listed on.

    A store page without a usable count adds zero. A failed download fails
    the whole entry; FatalScrapeError is left to abort the run.
    """
    total = 0
    for store, identifier in entry.store_ids():
        time.sleep(delay_ms / 1000)
        url = store.url(identifier)
        try:
            page = fetch_page(url)
        except FetchError as exc:
            raise BadgeBuildError(f"{store.name}: {exc}") from exc
        total += store.extract(page) or 0
    return total


def build_badge(entry: ExtensionEntry, delay_ms: int) -> str:
    return render_users_badge(count_users(entry, delay_ms))


def write_badge(dest: Path, name: str, svg: str) -> Path:
    out = dest / f"{name}.svg"
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(svg, encoding="utf-8")
    return out


def run(config: RunConfig) -> int:
    """Build every badge listed in the config; return how many were written."""
    entries = load_entries(config.badges_path)

    written = 0
    for entry in entries:
        print(f"Generating badge for '{entry.name}'...")
        try:
            total = count_users(entry, config.delay_ms)
            svg = render_users_badge(total)
            out = write_badge(config.dest_path, entry.name, svg)
        except (BadgeBuildError, OSError) as exc:
            print(f"Failed to generate badge for '{entry.name}': {exc}")
            continue
        print(f"Wrote {out} with users={total}")
        written += 1
    return written


def _delay(value: str) -> int:
    try:
        ms = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid delay: {value!r}")
    if ms < 0:
        raise argparse.ArgumentTypeError("delay must not be negative")
    return ms


def parse_args(argv: Optional[List[str]] = None) -> RunConfig:
    parser = argparse.ArgumentParser(prog="extobadges", description=__doc__)
    parser.add_argument(
        "--delay",
        type=_delay,
        default=DEFAULT_DELAY_MS,
        metavar="NUMBER",
        help=f"Delay in milliseconds before each outbound query (default: {DEFAULT_DELAY_MS})",
    )
    parser.add_argument(
        "--dest",
        default=DEFAULT_DEST,
        metavar="PATH",
        help="Directory to put resulting badge SVGs in (default: current directory)",
    )
    parser.add_argument(
        "--badges",
        default=DEFAULT_BADGES,
        metavar="PATH",
        help=f"Path to badge information TOML (default: {DEFAULT_BADGES})",
    )
    args = parser.parse_args(argv)
    return RunConfig(
        delay_ms=args.delay,
        dest_path=Path(args.dest),
        badges_path=Path(args.badges),
    )


def main(argv: Optional[List[str]] = None) -> int:
    config = parse_args(argv)
    try:
        run(config)
    except ConfigError as exc:
        print(exc, file=sys.stderr)
        return 1
    except (FatalScrapeError, BadgeRenderError) as exc:
        print(f"Aborting: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
