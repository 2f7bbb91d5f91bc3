#!/usr/bin/env python3
"""
evelib CLI Entry Point

Provides command-line access to the public EVE APIs.
Run with: python -m evelib <command> [args]
"""

import argparse
import json
import sys

from .core import EveLibError, get_utc_timestamp


def output_json(data: dict, indent: int = 2) -> None:
    """Print JSON output to stdout."""
    print(json.dumps(data, indent=indent))


def output_error(message: str, exit_code: int = 1, **kwargs) -> None:
    """Print error JSON and exit."""
    error_data = {
        "error": kwargs.pop("error_type", "error"),
        "message": message,
        "query_timestamp": get_utc_timestamp(),
    }
    error_data.update(kwargs)
    output_json(error_data)
    sys.exit(exit_code)


# =============================================================================
# Built-in Commands
# =============================================================================


def cmd_help(args: argparse.Namespace) -> dict:
    """Show help message."""
    help_text = """
═══════════════════════════════════════════════════════════════════
evelib - EVE Online API Client
───────────────────────────────────────────────────────────────────

CREST Commands:
  crest-root                 Server name, version and user counts
  alliances [--page N]       List alliances
  alliance <id>              Alliance details
  market-history <type> [opts]
                             Daily history (--region <id|hub>, --days N)
  market-prices [types...]   Adjusted and average prices
  wars [--page N]            List wars
  war <id>                   War details

eve-marketdata Commands:
  recent-uploads [opts]      Latest uploads (--type, --minutes N)
  item-history <types...>    Daily history (--region <id|hub>, --days N)

eve-central Commands:
  marketstat <types...>      Aggregate buy/sell statistics
  quicklook <type>           Individual orders (--limit N)
                             Filters: --region, --system, --hours, --min-quantity

XML API Map Commands:
  jumps [systems...]         Ship jumps per system
  kills [systems...]         Kills per system
  sovereignty [systems...]   Sovereignty per system
  fw-systems [systems...]    Faction warfare systems

System Commands:
  help                       Show this help message

Trade hubs: jita, amarr, dodixie, rens, hek

Examples:
  evelib market-history 34 --region jita --days 7
  evelib recent-uploads --type full
  evelib marketstat 34 35 --system 30000142
  evelib jumps 30000142

Usage:
  python3 -m evelib <command> [args]

═══════════════════════════════════════════════════════════════════
"""
    print(help_text)
    return {}


# =============================================================================
# Main Entry Point
# =============================================================================


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="evelib",
        description="evelib - EVE Online API access",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    help_parser = subparsers.add_parser("help", help="Show help message")
    help_parser.set_defaults(func=cmd_help)

    from .commands import crest, evecentral, marketdata, xmlmap

    crest.register_parsers(subparsers)
    marketdata.register_parsers(subparsers)
    evecentral.register_parsers(subparsers)
    xmlmap.register_parsers(subparsers)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    # Default to help if no command
    if not args.command:
        cmd_help(args)
        return 0

    if not hasattr(args, "func"):
        output_error(
            f"Unknown command: {args.command}",
            error_type="unknown_command",
            hint="Run 'evelib help' for usage",
        )

    try:
        result = args.func(args)

        if isinstance(result, dict) and result:
            output_json(result)

            # Return non-zero exit code if result contains error
            if "error" in result:
                return 1

        return 0

    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 130
    except EveLibError as e:
        output_json({**e.to_dict(), "query_timestamp": get_utc_timestamp()})
        return 1


if __name__ == "__main__":
    sys.exit(main())
