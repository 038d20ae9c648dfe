"""
kibana-rules — manage Kibana detection rules and signals from the shell.

Usage:
    kibana-rules create rules.json          # Bulk create rules from a file
    kibana-rules delete rules.yml           # Bulk delete the rules in a file
    kibana-rules hits                       # Show open signals per rule
    kibana-rules hits --report json         # Same, as JSON
    kibana-rules close                      # Close all open signals

Connection settings come from KIBANA_* environment variables and may be
overridden with --url, --space and --insecure.
"""

import argparse
import json
import logging
import sys
from collections import Counter

import httpx
from pydantic import ValidationError

from kibana_rules.config import Settings
from kibana_rules.errors import KibanaError
from kibana_rules.models.rules import DetectionRule
from kibana_rules.services.rule_loader import encode_rules, load_rules
from kibana_rules.services.rules_client import RulesClient
from kibana_rules.services.transport import HttpTransport

log = logging.getLogger("kibana-rules")


def format_hits_report(client: RulesClient, fmt: str) -> str:
    result = client.rules_get_hits()
    names = result.rule_names()

    if fmt == "json":
        return json.dumps(
            {"total": result.total, "rules": dict(Counter(names))},
            indent=2,
        )

    lines = [f"{'Hits':<6} Rule", f"{'-'*6} {'-'*40}"]
    for name, count in Counter(names).most_common():
        lines.append(f"{count:<6} {name}")
    lines.append(f"\n{result.total} open signals")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="kibana-rules",
        description="Manage Kibana detection engine rules and signals",
    )
    parser.add_argument("--url", default=None, help="Kibana base URL (overrides KIBANA_URL)")
    parser.add_argument("--space", default=None, help="Kibana space (overrides KIBANA_SPACE)")
    parser.add_argument(
        "--insecure", action="store_true",
        help="Skip TLS certificate verification",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Bulk create rules from a JSON/YAML file")
    create.add_argument("file", help="Rules file")

    delete = sub.add_parser("delete", help="Bulk delete the rules listed in a file")
    delete.add_argument("file", help="Rules file")

    hits = sub.add_parser("hits", help="Show open signals")
    hits.add_argument(
        "--report", choices=["text", "json"], default="text",
        help="Output format",
    )

    sub.add_parser("close", help="Close all open signals")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    settings = Settings()
    overrides = {}
    if args.url:
        overrides["url"] = args.url
    if args.space:
        overrides["space"] = args.space
    if args.insecure:
        overrides["verify_ssl"] = False
    return settings.model_copy(update=overrides)


def run(client: RulesClient, args: argparse.Namespace, rules: list[DetectionRule]) -> int:
    if args.command == "create":
        created = client.rules_bulk_create(encode_rules(rules))
        for rule in created:
            log.info("  created %s", rule.rule_id)
    elif args.command == "delete":
        client.rules_bulk_delete([r.id_only() for r in rules])
        log.info("Deleted %d rules", len(rules))
    elif args.command == "hits":
        print(format_hits_report(client, args.report))
    elif args.command == "close":
        client.rules_close_signals()
        log.info("Closed open signals")
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    rules: list[DetectionRule] = []
    if args.command in ("create", "delete"):
        try:
            rules = load_rules(args.file)
        except (OSError, ValueError) as e:
            log.error("Cannot load rules: %s", e)
            return 1

    try:
        settings = load_settings(args)
        log.debug("Kibana URL: %s", settings.url)
        transport = HttpTransport.from_settings(settings)
    except (ValidationError, httpx.InvalidURL) as e:
        log.error("Invalid configuration: %s", e)
        return 1

    with transport:
        try:
            return run(RulesClient(transport), args, rules)
        except KibanaError as e:
            log.error("%s error: %s", e.kind, e)
            return 1


if __name__ == "__main__":
    sys.exit(main())
