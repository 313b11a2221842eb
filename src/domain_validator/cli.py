from __future__ import annotations

import argparse
import contextlib
import itertools
import json
import sys
from pathlib import Path
from typing import Iterable

from .checks import check_domains_summary, iter_candidates_lines
from .iana import IANA_TLD_URL, missing_tlds
from .tld_registry import ascii_lower, classify_tld
from .version import get_version

_SCHEMA_VERSION = 1


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="domain-validator")
    parser.add_argument("--version", action="version", version=get_version())

    sub = parser.add_subparsers(dest="cmd", required=True)
    p_check = sub.add_parser("check", help="Validate domain names")
    p_check.add_argument("domains", nargs="*", help="Domain names to validate")
    p_check.add_argument(
        "--input",
        default=None,
        help="Read candidates from a file, one per line (use '-' for stdin)",
    )
    p_check.add_argument(
        "--out",
        default="-",
        help="Output path (use '-' for stdout)",
    )
    p_check.add_argument(
        "--allow-local",
        action="store_true",
        help="Accept bare hostnames and local pseudo-TLDs (localhost, localdomain)",
    )
    p_check.add_argument(
        "--only-valid",
        action="store_true",
        help="Only write records for valid domains",
    )
    p_check.add_argument(
        "--only-invalid",
        action="store_true",
        help="Only write records for invalid domains",
    )
    p_check.add_argument(
        "--summary-json",
        action="store_true",
        help="Print check summary as JSON to stderr",
    )
    p_check.set_defaults(func=_run_check)

    p_tld = sub.add_parser("tld", help="Look up top-level domains in the registry")
    p_tld.add_argument("tlds", nargs="+", help="TLD tokens, with or without a leading dot")
    p_tld.set_defaults(func=_run_tld)

    p_missing = sub.add_parser(
        "missing-tlds", help="List IANA TLDs that are missing from the built-in registry"
    )
    p_missing.add_argument(
        "--source",
        default=IANA_TLD_URL,
        help="URL or local path of an IANA tlds-alpha-by-domain.txt list",
    )
    p_missing.add_argument("--timeout", type=float, default=10.0)
    p_missing.add_argument(
        "--summary-json",
        action="store_true",
        help="Print summary as JSON to stderr",
    )
    p_missing.set_defaults(func=_run_missing_tlds)

    args = parser.parse_args(argv)
    return int(args.func(args))


def _run_check(args: argparse.Namespace) -> int:
    if args.only_valid and args.only_invalid:
        print("error: --only-valid and --only-invalid cannot both be set", file=sys.stderr)
        return 2
    if not args.domains and args.input is None:
        print("error: no domains given (pass DOMAIN arguments or --input)", file=sys.stderr)
        return 2

    out_path = None if args.out == "-" else Path(args.out)
    try:
        with contextlib.ExitStack() as stack:
            candidates: Iterable[str] = list(args.domains)
            if args.input == "-":
                candidates = itertools.chain(candidates, iter_candidates_lines(sys.stdin))
            elif args.input is not None:
                in_stream = stack.enter_context(Path(args.input).open("r", encoding="utf-8"))
                candidates = itertools.chain(candidates, iter_candidates_lines(in_stream))

            summary = check_domains_summary(
                candidates,
                out_path=out_path,
                allow_local=bool(args.allow_local),
                only_valid=bool(args.only_valid),
                only_invalid=bool(args.only_invalid),
            )
    except FileNotFoundError as e:
        print(f"error: file not found: {e.filename}", file=sys.stderr)
        return 2
    except IsADirectoryError as e:
        print(f"error: is a directory: {e.filename}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    dest = "stdout" if out_path is None else str(out_path)
    if args.summary_json:
        sys.stderr.write(
            json.dumps(
                {
                    "kind": "check_summary",
                    "schema_version": _SCHEMA_VERSION,
                    "checked": summary.checked,
                    "valid": summary.valid,
                    "invalid": summary.invalid,
                    "wrote": summary.written,
                    "allow_local": bool(args.allow_local),
                    "elapsed_ms": summary.elapsed_ms,
                    "out": dest,
                }
            )
            + "\n"
        )
    else:
        print(
            "checked"
            f" total={summary.checked}"
            f" valid={summary.valid}"
            f" invalid={summary.invalid}"
            f" wrote={summary.written}"
            f" elapsed_ms={summary.elapsed_ms}"
            f" out={dest}",
            file=sys.stderr,
        )
    return 1 if summary.invalid else 0


def _run_tld(args: argparse.Namespace) -> int:
    unknown = 0
    for token in args.tlds:
        category = classify_tld(token)
        if category is None:
            unknown += 1
        tld = ascii_lower(token)
        if tld.startswith("."):
            tld = tld[1:]
        sys.stdout.write(
            json.dumps(
                {
                    "tld": tld,
                    "valid": category is not None,
                    "category": None if category is None else category.value,
                }
            )
            + "\n"
        )
    return 1 if unknown else 0


def _run_missing_tlds(args: argparse.Namespace) -> int:
    try:
        missing, summary = missing_tlds(str(args.source), timeout=float(args.timeout))
    except FileNotFoundError as e:
        print(f"error: file not found: {e.filename}", file=sys.stderr)
        return 2
    except IsADirectoryError as e:
        print(f"error: is a directory: {e.filename}", file=sys.stderr)
        return 2
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"error: TLD list download failed: {e}", file=sys.stderr)
        return 1

    for tld in missing:
        sys.stdout.write(tld + "\n")

    if args.summary_json:
        sys.stderr.write(
            json.dumps(
                {
                    "kind": "missing_tlds_summary",
                    "schema_version": _SCHEMA_VERSION,
                    "version": summary.version,
                    "entries": summary.entries,
                    "missing": summary.missing,
                    "elapsed_ms": summary.elapsed_ms,
                }
            )
            + "\n"
        )
    else:
        print(
            "missing-tlds"
            f" version={summary.version!r}"
            f" entries={summary.entries}"
            f" missing={summary.missing}"
            f" elapsed_ms={summary.elapsed_ms}",
            file=sys.stderr,
        )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
