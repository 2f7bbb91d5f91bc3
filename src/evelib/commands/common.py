"""
Helpers shared by the command modules.
"""

from typing import Any, Callable, Optional

from ..core import EveLibError, get_utc_timestamp
from ..core.constants import TRADE_HUB_REGIONS
from ..core.formatters import format_datetime, parse_datetime


def resolve_region(value: str) -> int:
    """
    Resolve a region argument: a numeric region ID or a trade hub name.

    Raises:
        ValueError: If the value is neither
    """
    if value.isdigit():
        return int(value)
    region_id = TRADE_HUB_REGIONS.get(value.lower())
    if region_id is None:
        hubs = ", ".join(sorted(TRADE_HUB_REGIONS))
        raise ValueError(f"Unknown region '{value}'. Use a region ID or one of: {hubs}")
    return region_id


def format_api_time(value: Optional[str]) -> Optional[str]:
    """Render an API timestamp in the ISO layout used for query_timestamp."""
    if value is None:
        return None
    parsed = parse_datetime(value)
    # Unknown layouts are shown as received
    return format_datetime(parsed) if parsed else value


def run_command(fetch: Callable[[], Any], render: Callable[[Any], dict]) -> dict:
    """
    Run a client call and render its result for JSON output.

    evelib errors become error documents instead of tracebacks.
    """
    query_ts = get_utc_timestamp()
    try:
        resource = fetch()
    except EveLibError as e:
        result = e.to_dict()
        result["query_timestamp"] = query_ts
        return result

    result = {"query_timestamp": query_ts}
    result.update(render(resource))
    return result
