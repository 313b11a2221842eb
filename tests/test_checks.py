from __future__ import annotations

import json
from pathlib import Path
from typing import Iterator

import pytest

from domain_validator.checks import check_domains_summary


def test_check_domains_summary_writes_out_file(tmp_path: Path) -> None:
    out = tmp_path / "results.jsonl"
    summary = check_domains_summary(["apache.org", "apache.rog"], out_path=out)

    assert summary.checked == 2
    assert summary.valid == 1
    assert summary.written == 2
    rows = [json.loads(line) for line in out.read_text(encoding="utf-8").splitlines()]
    assert [row["valid"] for row in rows] == [True, False]
    assert not (tmp_path / "results.jsonl.tmp").exists()


def test_check_domains_summary_removes_tmp_on_failure(tmp_path: Path) -> None:
    out = tmp_path / "results.jsonl"

    def candidates() -> Iterator[str]:
        yield "apache.org"
        raise RuntimeError("input went away")

    with pytest.raises(RuntimeError, match="input went away"):
        check_domains_summary(candidates(), out_path=out)

    assert not out.exists()
    assert not (tmp_path / "results.jsonl.tmp").exists()
