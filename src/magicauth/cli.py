"""Command line helpers for MagicAuth collections and context checks."""

import asyncio
import json
import logging
import sys
from typing import Any

from magicauth.adapters.config import AppConfig
from magicauth.adapters.magicauth_api import Collection
from magicauth.application import (
    ip_addresses_match,
    is_private_address,
    parse_user_agent,
    user_agents_match,
)
from magicauth.domain.models import CollectionDetails, MagicAuthError

logger = logging.getLogger(__name__)


def configure_logging(config: AppConfig) -> None:
    """Configure stderr logging at the configured level."""
    logging.basicConfig(
        level=config.log_level_value,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def format_collection(details: CollectionDetails, format_json: bool = False) -> str:
    """Render a newly created collection for output."""
    if format_json:
        return json.dumps(details.model_dump(), indent=2, ensure_ascii=False)
    return "\n".join(
        [
            f"Collection ID: {details.id}",
            f"Access key ID: {details.access_key.id}",
            f"Access key:    {details.access_key.key}",
        ]
    )


def compare_user_agents_report(request_ua: str, session_ua: str) -> dict[str, Any]:
    """Compare two user agents and describe the compared attributes."""
    request_parsed = parse_user_agent(request_ua)
    session_parsed = parse_user_agent(session_ua)
    return {
        "match": user_agents_match(request_ua, session_ua),
        "cpu_architecture": [request_parsed.cpu_architecture, session_parsed.cpu_architecture],
        "os_name": [request_parsed.os_name, session_parsed.os_name],
        "browser_name": [request_parsed.browser_name, session_parsed.browser_name],
    }


def compare_ips_report(request_ip: str, session_ip: str) -> dict[str, Any]:
    """Compare two IP addresses and describe why they (do not) match."""
    return {
        "match": ip_addresses_match(request_ip, session_ip),
        "session_ip_private": is_private_address(session_ip),
    }


def _print_report(report: dict[str, Any], format_json: bool) -> None:
    if format_json:
        print(json.dumps(report, indent=2))
        return
    print("match" if report["match"] else "mismatch")
    for key, value in report.items():
        if key == "match":
            continue
        if isinstance(value, list):
            print(f"  {key:>20} : {value[0]!r} = {value[1]!r}")
        else:
            print(f"  {key:>20} : {value}")


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Returns:
        Process exit code.
    """
    import argparse

    parser = argparse.ArgumentParser(
        description="MagicAuth client helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Create a collection (uses MAGICAUTH_API_URL)
  magicauth create-collection --json

  # Check whether two user agents would be accepted for the same session
  magicauth compare-user-agents "<request UA>" "<session UA>"

  # Check a request IP against the IP a session was created from
  magicauth compare-ips 8.8.8.8 192.168.1.1
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    create_parser = subparsers.add_parser("create-collection", help="Create a new collection")
    create_parser.add_argument("--json", action="store_true", help="Output as JSON")

    agents_parser = subparsers.add_parser(
        "compare-user-agents", help="Compare a request user agent with a session user agent"
    )
    agents_parser.add_argument("request_user_agent", help="User agent of the current request")
    agents_parser.add_argument("session_user_agent", help="User agent recorded for the session")
    agents_parser.add_argument("--json", action="store_true", help="Output as JSON")

    ip_parser = subparsers.add_parser(
        "compare-ips", help="Compare a request IP address with a session IP address"
    )
    ip_parser.add_argument("request_ip", help="IP address of the current request")
    ip_parser.add_argument("session_ip", help="IP address recorded for the session")
    ip_parser.add_argument("--json", action="store_true", help="Output as JSON")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = AppConfig()
        config.load_toml_overrides()
    except (ValueError, FileNotFoundError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    configure_logging(config)

    try:
        if args.command == "create-collection":
            details = await Collection.create(config)
            print(format_collection(details, format_json=args.json))
            return 0

        if args.command == "compare-user-agents":
            report = compare_user_agents_report(args.request_user_agent, args.session_user_agent)
        else:
            report = compare_ips_report(args.request_ip, args.session_ip)

        _print_report(report, args.json)
        return 0 if report["match"] else 1

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return 1
    except MagicAuthError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli_main()
