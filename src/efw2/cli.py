"""Command-line entry point: wage CSV + employer sidecar -> EFW2 file.

Usage:
    efw2 --file wages.csv --config efw2.json --output W2REPORT
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from efw2.core.config import AppSettings
from efw2.core.exceptions import ConfigurationError, EFW2Error, InternalLengthInvariantError
from efw2.encoding.assembler import assemble
from efw2.ingest.config_loader import (
    build_run_parameters,
    load_employer_config,
    load_settings,
    resolve_config_path,
)
from efw2.ingest.file_parser import read_wage_records

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Convert W-2 wage data to an SSA EFW2 submission file")
    parser.add_argument("-f", "--file", required=True, help="Wage data file (.csv)")
    parser.add_argument("-c", "--config", default=None, help="Employer configuration JSON (default: efw2.json beside the executable)")
    parser.add_argument("-e", "--ein", default=None, help="Override the employer EIN from the configuration")
    parser.add_argument("-u", "--user-id", default=None, help="Override the BSO user ID from the configuration")
    parser.add_argument("-v", "--vendor-code", default=None, help="Override the software vendor code")
    parser.add_argument("-r", "--resub-wfid", default=None, help="Resubmission WFID (marks the file as a resubmission)")
    parser.add_argument("-y", "--tax-year", type=int, default=None, help="Tax year (default: previous calendar year)")
    parser.add_argument("--final-year", action="store_true", help="Employer is filing its final return")
    parser.add_argument("-o", "--output", default=None, help="Output path (default: standard output)")
    return parser.parse_args(argv)


def write_output(payload: bytes, output: str | None) -> None:
    """Write the finished file; a file target is replaced only once fully written."""
    if output is None:
        sys.stdout.buffer.write(payload)
        sys.stdout.buffer.flush()
        return
    target = Path(output)
    tmp = target.with_name(f".{target.name}.tmp")
    try:
        tmp.write_bytes(payload)
        os.replace(tmp, target)
    except OSError as exc:
        tmp.unlink(missing_ok=True)
        raise EFW2Error(f"Cannot write output file {target}: {exc}") from exc


def run(args: argparse.Namespace, settings: AppSettings) -> bytes:
    config_path = resolve_config_path(args.config, settings)
    employer = load_employer_config(
        config_path,
        overrides={"ein": args.ein, "user_id": args.user_id, "vendor_code": args.vendor_code},
    )
    params = build_run_parameters(
        tax_year=args.tax_year, resub_wfid=args.resub_wfid, final_year=args.final_year,
    )
    records = read_wage_records(args.file)
    return assemble(employer, records, params, settings.encoding).encode()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        _configure_logging("INFO")
        logger.error("%s", exc)
        return 1
    _configure_logging(settings.log_level)

    try:
        payload = run(args, settings)
        write_output(payload, args.output)
    except InternalLengthInvariantError:
        raise
    except EFW2Error as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Wrote %d bytes to %s", len(payload), args.output or "standard output")
    return 0


if __name__ == "__main__":
    sys.exit(main())
