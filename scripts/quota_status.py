"""CLI helper that prints today's usage of each paid service."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import List, Sequence

BASE_DIR = Path(__file__).resolve().parents[1]
if str(BASE_DIR) not in sys.path:
    sys.path.insert(0, str(BASE_DIR))

from contact_resolver.config import load_configuration, quota_settings, settings_from_config  # noqa: E402
from contact_resolver.factory import build_quota_tracker  # noqa: E402
from contact_resolver.models import QuotaStatus  # noqa: E402

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show remaining daily quota for paid services.")
    parser.add_argument("--config", required=True, help="Engine configuration file (YAML or JSON)")
    parser.add_argument(
        "services",
        nargs="*",
        help="Services to report (default: the configured verifier and finder plus any with a limit)",
    )
    parser.add_argument("--json", action="store_true", help="Print the statuses as JSON")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Console log level",
    )
    return parser.parse_args(argv)


def collect_statuses(config: dict, services: Sequence[str]) -> List[QuotaStatus]:
    if not services:
        settings = settings_from_config(config)
        _, _, _, limits = quota_settings(config)
        services = list(dict.fromkeys([settings.verifier_service, settings.finder_service, *limits]))
    tracker = build_quota_tracker(config)
    return [tracker.check_daily_limit(service) for service in services]


def pretty_print(statuses: Sequence[QuotaStatus]) -> None:
    for status in statuses:
        state = "available" if status.can_use else "exhausted"
        print(f"{status.service:<12} {status.used:>5}/{status.limit:<5} remaining={status.remaining:<5} {state}")


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    logging.basicConfig(level=getattr(logging, args.log_level))
    try:
        statuses = collect_statuses(load_configuration(args.config), args.services)
    except Exception as exc:  # pragma: no cover - CLI convenience
        LOGGER.exception("Could not read quota usage: %s", exc)
        sys.exit(1)

    if args.json:
        print(json.dumps([asdict(status) for status in statuses], indent=2))
    else:
        pretty_print(statuses)


if __name__ == "__main__":
    main()
