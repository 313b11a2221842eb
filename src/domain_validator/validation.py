from __future__ import annotations

from .tld_registry import ascii_lower, is_valid_tld
from .validator import DomainValidator


def normalize_domain(raw: str, *, allow_local: bool = False) -> str:
    domain = str(raw).strip()
    if domain.endswith("."):
        domain = domain[:-1]
    domain = ascii_lower(domain)
    if not domain:
        raise ValueError("domain must be non-empty")
    if not DomainValidator.get_instance(allow_local).is_valid(domain):
        raise ValueError(f"invalid domain: {raw!r}")
    return domain


def normalize_tld(raw: str) -> str:
    tld = ascii_lower(str(raw).strip())
    if tld.startswith("."):
        tld = tld[1:]
    if not tld:
        raise ValueError("tld must be non-empty")
    if not is_valid_tld(tld):
        raise ValueError(f"unknown tld: {raw!r}")
    return tld
