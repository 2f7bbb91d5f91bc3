"""
evelib CREST Commands

Public CREST lookups: API root, alliances, market history and prices, wars.
"""

import argparse

from ..clients.crest import EveCrest
from ..core.formatters import format_isk
from .common import resolve_region, run_command


def cmd_crest_root(args: argparse.Namespace) -> dict:
    """Show the CREST root document."""
    crest = EveCrest()
    return run_command(
        crest.get_root,
        lambda root: {
            "server_name": root.server_name,
            "server_version": root.server_version,
            "user_counts": root.user_counts.model_dump() if root.user_counts else None,
            "service_status": root.service_status,
        },
    )


def cmd_alliances(args: argparse.Namespace) -> dict:
    """List one page of alliances."""
    crest = EveCrest()
    return run_command(
        lambda: crest.get_alliances(args.page),
        lambda page: {
            "page": args.page,
            "page_count": page.page_count,
            "total_count": page.total_count,
            "alliances": [{"id": a.id, "name": a.name} for a in page.items],
        },
    )


def cmd_alliance(args: argparse.Namespace) -> dict:
    """Show one alliance."""
    crest = EveCrest()
    return run_command(
        lambda: crest.get_alliance(args.alliance_id),
        lambda alliance: {
            "alliance": alliance.model_dump(
                include={"id", "name", "short_name", "start_date", "corporations_count"}
            ),
            "executor_corporation": (
                alliance.executor_corporation.name if alliance.executor_corporation else None
            ),
        },
    )


def cmd_market_history(args: argparse.Namespace) -> dict:
    """Show daily market history for a type in a region."""
    crest = EveCrest()

    def render(history) -> dict:
        days = history.items[-args.days :] if args.days else history.items
        return {
            "region_id": args.region,
            "type_id": args.type_id,
            "days": [
                {
                    "date": day.date,
                    "volume": day.volume,
                    "orders": day.order_count,
                    "low": day.low_price,
                    "high": day.high_price,
                    "average": day.avg_price,
                    "average_display": format_isk(day.avg_price),
                }
                for day in days
            ],
        }

    return run_command(lambda: crest.get_market_history(args.region, args.type_id), render)


def cmd_market_prices(args: argparse.Namespace) -> dict:
    """Show adjusted and average prices, optionally for selected types only."""
    crest = EveCrest()
    wanted = set(args.type_ids or [])

    def render(collection) -> dict:
        prices = [
            {
                "type_id": price.item_type.id,
                "type_name": price.item_type.name,
                "adjusted_price": price.adjusted_price,
                "average_price": price.average_price,
            }
            for price in collection.items
            if not wanted or price.item_type.id in wanted
        ]
        return {"price_count": len(prices), "prices": prices}

    return run_command(crest.get_market_prices, render)


def cmd_wars(args: argparse.Namespace) -> dict:
    """List one page of wars."""
    crest = EveCrest()
    return run_command(
        lambda: crest.get_wars(args.page),
        lambda page: {
            "page": args.page,
            "page_count": page.page_count,
            "total_count": page.total_count,
            "wars": [{"id": war.id, "href": war.href} for war in page.items],
        },
    )


def cmd_war(args: argparse.Namespace) -> dict:
    """Show one war."""
    crest = EveCrest()
    return run_command(
        lambda: crest.get_war(args.war_id),
        lambda war: {"war": war.model_dump(mode="json", exclude={"killmails"})},
    )


def register_parsers(subparsers: argparse._SubParsersAction) -> None:
    """Register CREST command parsers."""

    root_parser = subparsers.add_parser("crest-root", help="Show the CREST root document")
    root_parser.set_defaults(func=cmd_crest_root)

    alliances_parser = subparsers.add_parser("alliances", help="List alliances")
    alliances_parser.add_argument("--page", type=int, default=1, help="Page number")
    alliances_parser.set_defaults(func=cmd_alliances)

    alliance_parser = subparsers.add_parser("alliance", help="Show an alliance")
    alliance_parser.add_argument("alliance_id", type=int, help="Alliance ID")
    alliance_parser.set_defaults(func=cmd_alliance)

    history_parser = subparsers.add_parser(
        "market-history", help="Daily market history for a type"
    )
    history_parser.add_argument("type_id", type=int, help="Type ID")
    history_parser.add_argument(
        "--region",
        type=resolve_region,
        default="jita",
        help="Region ID or trade hub name (default: jita)",
    )
    history_parser.add_argument(
        "--days", type=int, default=0, help="Only show the most recent N days"
    )
    history_parser.set_defaults(func=cmd_market_history)

    prices_parser = subparsers.add_parser("market-prices", help="Adjusted/average prices")
    prices_parser.add_argument("type_ids", type=int, nargs="*", help="Restrict to these types")
    prices_parser.set_defaults(func=cmd_market_prices)

    wars_parser = subparsers.add_parser("wars", help="List wars")
    wars_parser.add_argument("--page", type=int, default=1, help="Page number")
    wars_parser.set_defaults(func=cmd_wars)

    war_parser = subparsers.add_parser("war", help="Show a war")
    war_parser.add_argument("war_id", type=int, help="War ID")
    war_parser.set_defaults(func=cmd_war)
