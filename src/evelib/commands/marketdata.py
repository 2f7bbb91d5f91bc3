"""
evelib eve-marketdata Commands

- recent-uploads: latest market uploads received by eve-marketdata
- item-history: daily price history per item and region
"""

import argparse

from ..clients.marketdata import EveMarketData, EveMarketDataOptions
from .common import resolve_region, run_command


def cmd_recent_uploads(args: argparse.Namespace) -> dict:
    """List recent market uploads."""
    client = EveMarketData()
    return run_command(
        lambda: client.get_recent_uploads(upload_type=args.type, minutes=args.minutes),
        lambda response: {
            "upload_count": len(response.uploads),
            "uploads": [upload.model_dump(mode="json") for upload in response.uploads],
        },
    )


def cmd_item_history(args: argparse.Namespace) -> dict:
    """Show daily price history for one or more items."""
    client = EveMarketData()
    options = EveMarketDataOptions(items=args.type_ids, regions=[args.region])
    return run_command(
        lambda: client.get_item_history(options, days=args.days),
        lambda response: {
            "region_id": args.region,
            "history": [entry.model_dump(mode="json") for entry in response.history],
        },
    )


def register_parsers(subparsers: argparse._SubParsersAction) -> None:
    """Register eve-marketdata command parsers."""

    uploads_parser = subparsers.add_parser(
        "recent-uploads", help="Latest uploads received by eve-marketdata"
    )
    uploads_parser.add_argument(
        "--type",
        help="Upload type: orders/o/0, history/h/1, full/2 or partial/3",
    )
    uploads_parser.add_argument("--minutes", type=int, help="Only the last N minutes")
    uploads_parser.set_defaults(func=cmd_recent_uploads)

    history_parser = subparsers.add_parser(
        "item-history", help="Daily price history from eve-marketdata"
    )
    history_parser.add_argument("type_ids", type=int, nargs="+", help="Type IDs")
    history_parser.add_argument(
        "--region",
        type=resolve_region,
        default="jita",
        help="Region ID or trade hub name (default: jita)",
    )
    history_parser.add_argument("--days", type=int, help="Number of days to include")
    history_parser.set_defaults(func=cmd_item_history)
