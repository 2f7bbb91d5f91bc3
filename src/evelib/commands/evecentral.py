"""
evelib eve-central Commands

- marketstat: aggregate buy/sell statistics per type
- quicklook: individual orders for one type
"""

import argparse

from ..clients.evecentral import EveCentral, EveCentralOptions
from ..core.formatters import format_isk, format_security
from ..models.evecentral import MarketStatEntry, QuicklookOrder
from .common import resolve_region, run_command


def _side(entry: MarketStatEntry) -> dict:
    return {
        "volume": entry.volume,
        "min": entry.min,
        "max": entry.max,
        "avg": entry.avg,
        "median": entry.median,
        "percentile": entry.percentile,
        "median_display": format_isk(entry.median),
    }


def _order(order: QuicklookOrder) -> dict:
    return {
        "order_id": order.order_id,
        "station": order.station_name,
        "security": format_security(order.security_rating),
        "price": order.price,
        "volume_remaining": order.vol_remaining,
        "expires": order.expires,
    }


def _options(args: argparse.Namespace) -> EveCentralOptions:
    return EveCentralOptions(
        items=args.type_ids,
        regions=[args.region] if args.region else [],
        system=args.system,
        hour_limit=args.hours,
        min_quantity=args.min_quantity,
    )


def cmd_marketstat(args: argparse.Namespace) -> dict:
    """Show aggregate market statistics."""
    client = EveCentral()
    options = _options(args)
    return run_command(
        lambda: client.get_market_stat(options),
        lambda response: {
            "stats": [
                {
                    "type_id": stat.type_id,
                    "buy": _side(stat.buy),
                    "sell": _side(stat.sell),
                    "all": _side(stat.all),
                }
                for stat in response.result
            ]
        },
    )


def cmd_quicklook(args: argparse.Namespace) -> dict:
    """Show individual orders for a type."""
    client = EveCentral()
    options = _options(args)
    limit = args.limit

    def render(response) -> dict:
        quicklook = response.result
        return {
            "type_id": quicklook.type_id,
            "type_name": quicklook.type_name,
            "regions": quicklook.regions,
            "sell_orders": [_order(o) for o in quicklook.sell_orders[:limit]],
            "buy_orders": [_order(o) for o in quicklook.buy_orders[:limit]],
        }

    return run_command(lambda: client.get_quicklook(options), render)


def _add_filters(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--region", type=resolve_region, help="Region ID or trade hub name")
    parser.add_argument("--system", type=int, help="Restrict to one solar system ID")
    parser.add_argument("--hours", type=int, help="Only orders reported in the last N hours")
    parser.add_argument(
        "--min-quantity", dest="min_quantity", type=int, help="Minimum order quantity"
    )


def register_parsers(subparsers: argparse._SubParsersAction) -> None:
    """Register eve-central command parsers."""

    stat_parser = subparsers.add_parser("marketstat", help="Market statistics from eve-central")
    stat_parser.add_argument("type_ids", type=int, nargs="+", help="Type IDs")
    _add_filters(stat_parser)
    stat_parser.set_defaults(func=cmd_marketstat)

    quicklook_parser = subparsers.add_parser(
        "quicklook", help="Individual orders from eve-central"
    )
    quicklook_parser.add_argument("type_ids", type=int, nargs=1, help="Type ID")
    _add_filters(quicklook_parser)
    quicklook_parser.add_argument(
        "--limit", type=int, default=10, help="Orders per side to show (default: 10)"
    )
    quicklook_parser.set_defaults(func=cmd_quicklook)
