from __future__ import annotations

import re
import threading
from dataclasses import dataclass
from typing import Any, ClassVar

from . import tld_registry

MAX_DOMAIN_LENGTH = 253
MAX_LABEL_LENGTH = 63

_ALPHABET_RE = re.compile(r"[A-Za-z0-9.-]+")
_LABEL_RE = re.compile(r"[A-Za-z0-9](?:[A-Za-z0-9-]{0,61}[A-Za-z0-9])?")


@dataclass(frozen=True)
class DomainValidator:
    """
    Check domain names against DNS label rules and the TLD registry.

    Use `get_instance()` rather than the constructor: there is one shared
    validator per `allow_local` policy. With `allow_local`, bare hostnames
    ("localhost") and names under a local pseudo-TLD
    ("localhost.localdomain") are accepted as well.
    """

    allow_local: bool = False

    _instances: ClassVar[dict[bool, DomainValidator]] = {}
    _lock: ClassVar[threading.Lock] = threading.Lock()

    @classmethod
    def get_instance(cls, allow_local: bool = False) -> DomainValidator:
        key = bool(allow_local)
        inst = cls._instances.get(key)
        if inst is not None:
            return inst
        with cls._lock:
            inst = cls._instances.get(key)
            if inst is None:
                inst = cls(allow_local=key)
                cls._instances[key] = inst
            return inst

    def is_valid(self, candidate: Any) -> bool:
        labels = split_labels(candidate)
        if labels is None:
            return False
        if len(labels) == 1:
            return self.allow_local
        tld = labels[-1]
        if tld_registry.is_valid_tld(tld):
            return True
        return self.allow_local and tld_registry.is_valid_local_tld(tld)

    def is_valid_tld(self, token: str | None) -> bool:
        return tld_registry.is_valid_tld(token)

    def is_valid_infrastructure_tld(self, token: str | None) -> bool:
        return tld_registry.is_valid_infrastructure_tld(token)

    def is_valid_generic_tld(self, token: str | None) -> bool:
        return tld_registry.is_valid_generic_tld(token)

    def is_valid_generic_restricted_tld(self, token: str | None) -> bool:
        return tld_registry.is_valid_generic_restricted_tld(token)

    def is_valid_country_code_tld(self, token: str | None) -> bool:
        return tld_registry.is_valid_country_code_tld(token)

    def is_valid_local_tld(self, token: str | None) -> bool:
        return tld_registry.is_valid_local_tld(token)


def split_labels(candidate: Any) -> list[str] | None:
    """
    Split `candidate` into labels, or return None if any structural rule fails.

    This covers the character set, the overall length, empty labels, and the
    per-label grammar. It does not look at the TLD.
    """
    if not isinstance(candidate, str) or not candidate:
        return None
    if len(candidate) > MAX_DOMAIN_LENGTH or not _ALPHABET_RE.fullmatch(candidate):
        return None
    labels = candidate.split(".")
    for label in labels:
        if not is_valid_label(label):
            return None
    return labels


def is_valid_label(label: str) -> bool:
    # ACE labels ("xn--bcher-kva") need no special case here.
    return 0 < len(label) <= MAX_LABEL_LENGTH and _LABEL_RE.fullmatch(label) is not None


def is_valid(candidate: Any, *, allow_local: bool = False) -> bool:
    return DomainValidator.get_instance(allow_local).is_valid(candidate)
