"""Command line interface for running the contact discovery waterfall over a spreadsheet."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import ConfigurationError, load_configuration
from .factory import build_waterfall
from .ingestion import export_businesses, load_businesses
from .orchestrator import STAGE_NAMES
from .quota import QuotaStorageError

LOGGER = logging.getLogger(__name__)


def build_parser(prog: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=prog,
        description="Find owner names and email addresses for a list of businesses",
    )
    parser.add_argument("input", help="Path to the input spreadsheet (CSV, TSV or XLSX)")
    parser.add_argument("output", help="Path where the resolved records should be written")
    parser.add_argument(
        "--config",
        required=True,
        help="Path to the engine configuration file (YAML or JSON)",
    )
    parser.add_argument(
        "--stages",
        default=",".join(STAGE_NAMES),
        help=f"Comma separated stages to run (default: {','.join(STAGE_NAMES)})",
    )
    parser.add_argument(
        "--limit",
        type=int,
        default=None,
        help="Only process the first N businesses",
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Print the stages each business would go through without calling any service",
    )
    parser.add_argument(
        "--reverify",
        action="store_true",
        help="Re-check addresses that are not yet verified before running the stages",
    )
    parser.add_argument(
        "--only-exportable",
        action="store_true",
        help="Leave records that fail the export checks out of the output file",
    )
    parser.add_argument(
        "--allow-risky",
        action="store_true",
        help="Treat risky (catch-all) addresses as exportable",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Logging level (e.g. DEBUG, INFO, WARNING)",
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level.upper(), logging.INFO))

    stages = [stage.strip() for stage in args.stages.split(",") if stage.strip()]
    try:
        config = load_configuration(args.config)
        waterfall = build_waterfall(config, enabled_stages=stages)
    except ConfigurationError as exc:
        LOGGER.error("%s", exc)
        return 2

    businesses = load_businesses(args.input)
    if args.limit is not None:
        businesses = businesses[: max(0, args.limit)]
    if not businesses:
        LOGGER.warning("No businesses found in %s - nothing to do", args.input)

    if args.dry_run:
        for business in businesses:
            planned = waterfall.plan(business)
            print(f"{business.display_name()}: {', '.join(planned) if planned else '(nothing to do)'}")
        return 0

    try:
        if args.reverify:
            for business in businesses:
                waterfall.verify_current_email(business)
        waterfall.run_batch(businesses)
    except (ConfigurationError, QuotaStorageError) as exc:
        LOGGER.error("Stopping: %s", exc)
        return 1

    export_businesses(
        businesses,
        args.output,
        only_exportable=args.only_exportable,
        allow_risky=args.allow_risky,
    )
    LOGGER.info("Resolved records written to %s", Path(args.output).resolve())
    return 0


if __name__ == "__main__":  # pragma: no cover - CLI entry point
    sys.exit(main())
