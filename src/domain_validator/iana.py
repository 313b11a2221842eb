from __future__ import annotations

import time
import urllib.request
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Iterable

from .tld_registry import ascii_lower, is_valid_tld

IANA_TLD_URL = "https://data.iana.org/TLD/tlds-alpha-by-domain.txt"

_VERSION_PREFIX = "# Version "


@dataclass(frozen=True)
class TldList:
    version: str
    entries: tuple[str, ...]


@dataclass(frozen=True)
class MissingTldsSummary:
    version: str
    entries: int
    missing: int
    elapsed_ms: int


def fetch_tld_list(url: str = IANA_TLD_URL, *, timeout: float = 10.0) -> str:
    if timeout <= 0:
        raise ValueError("timeout must be > 0")
    with urllib.request.urlopen(url, timeout=timeout) as resp:
        return resp.read().decode("utf-8")


def load_tld_list(source: str, *, timeout: float = 10.0) -> str:
    """Read the list from an http(s) URL, or from a local file otherwise."""
    if source.startswith(("http://", "https://")):
        return fetch_tld_list(source, timeout=timeout)
    return Path(source).read_text(encoding="utf-8")


def parse_tld_list(text: str) -> TldList:
    lines = text.splitlines()
    if not lines or not lines[0].startswith(_VERSION_PREFIX):
        raise ValueError("TLD list does not have expected Version header")
    version = lines[0][2:].strip()

    entries: list[str] = []
    for raw in lines[1:]:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        # ACE-encoded TLDs are not tracked by the registry.
        if line.upper().startswith("XN--"):
            continue
        entries.append(ascii_lower(line))
    return TldList(version=version, entries=tuple(entries))


def find_missing_tlds(
    entries: Iterable[str], *, is_known: Callable[[str], bool] = is_valid_tld
) -> list[str]:
    missing: list[str] = []
    seen: set[str] = set()
    for entry in entries:
        if entry in seen:
            continue
        seen.add(entry)
        if not is_known(entry):
            missing.append(entry)
    return missing


def missing_tlds(
    source: str = IANA_TLD_URL, *, timeout: float = 10.0
) -> tuple[list[str], MissingTldsSummary]:
    start = time.time()
    tld_list = parse_tld_list(load_tld_list(source, timeout=timeout))
    missing = find_missing_tlds(tld_list.entries)
    return (
        missing,
        MissingTldsSummary(
            version=tld_list.version,
            entries=len(tld_list.entries),
            missing=len(missing),
            elapsed_ms=int((time.time() - start) * 1000),
        ),
    )
