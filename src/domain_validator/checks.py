from __future__ import annotations

import contextlib
import json
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator, TextIO

from .tld_registry import ascii_lower, classify_tld, is_valid_local_tld
from .validator import DomainValidator

LOCAL_CATEGORY = "local"


@dataclass(frozen=True)
class CheckResult:
    domain: str
    valid: bool
    tld: str | None = None
    category: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain,
            "valid": self.valid,
            "tld": self.tld,
            "category": self.category,
        }


@dataclass(frozen=True)
class CheckSummary:
    checked: int
    valid: int
    invalid: int
    written: int
    elapsed_ms: int


def check_domain(candidate: str, *, validator: DomainValidator) -> CheckResult:
    if not validator.is_valid(candidate):
        return CheckResult(domain=candidate, valid=False)
    if "." not in candidate:
        # Bare hostname, only reachable with allow_local.
        return CheckResult(domain=candidate, valid=True)
    tld = ascii_lower(candidate.rsplit(".", 1)[1])
    category = classify_tld(tld)
    if category is not None:
        return CheckResult(domain=candidate, valid=True, tld=tld, category=category.value)
    if is_valid_local_tld(tld):
        return CheckResult(domain=candidate, valid=True, tld=tld, category=LOCAL_CATEGORY)
    return CheckResult(domain=candidate, valid=True, tld=tld)


def iter_candidates_lines(lines: Iterable[str]) -> Iterator[str]:
    """
    Yield candidates from an input stream, one per line.

    Blank lines and '#' comments are skipped. Other lines are passed through
    without trimming, so stray whitespace is reported as invalid rather than
    silently fixed.
    """
    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        yield line


def check_domains_summary(
    candidates: Iterable[str],
    *,
    out_path: Path | None,
    allow_local: bool = False,
    only_valid: bool = False,
    only_invalid: bool = False,
) -> CheckSummary:
    if only_valid and only_invalid:
        raise ValueError("only_valid and only_invalid cannot both be set")

    start = time.time()
    validator = DomainValidator.get_instance(allow_local)
    checked = 0
    valid = 0
    written = 0
    with _output_stream(out_path) as out:
        for candidate in candidates:
            res = check_domain(candidate, validator=validator)
            checked += 1
            if res.valid:
                valid += 1
            if (only_valid and not res.valid) or (only_invalid and res.valid):
                continue
            out.write(json.dumps(res.to_dict()) + "\n")
            written += 1

    return CheckSummary(
        checked=checked,
        valid=valid,
        invalid=checked - valid,
        written=written,
        elapsed_ms=int((time.time() - start) * 1000),
    )


@contextlib.contextmanager
def _output_stream(out_path: Path | None) -> Iterator[TextIO]:
    if out_path is None:
        yield sys.stdout
        return

    out_path.parent.mkdir(parents=True, exist_ok=True)
    tmp_path = out_path.with_name(out_path.name + ".tmp")
    try:
        with tmp_path.open("w", encoding="utf-8") as out:
            yield out
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
    tmp_path.replace(out_path)
