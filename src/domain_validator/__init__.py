from __future__ import annotations

from .tld_registry import (
    TldCategory,
    classify_tld,
    is_valid_country_code_tld,
    is_valid_generic_restricted_tld,
    is_valid_generic_tld,
    is_valid_infrastructure_tld,
    is_valid_local_tld,
    is_valid_tld,
)
from .validation import normalize_domain, normalize_tld
from .validator import DomainValidator, is_valid

__all__ = [
    "DomainValidator",
    "TldCategory",
    "classify_tld",
    "is_valid",
    "is_valid_country_code_tld",
    "is_valid_generic_restricted_tld",
    "is_valid_generic_tld",
    "is_valid_infrastructure_tld",
    "is_valid_local_tld",
    "is_valid_tld",
    "normalize_domain",
    "normalize_tld",
]
