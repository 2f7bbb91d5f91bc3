"""
evelib Formatters

Display helpers used by the command line interface.
"""

from datetime import datetime, timezone
from typing import Optional

# =============================================================================
# ISK Formatting
# =============================================================================


_ISK_SCALES = ((1_000_000_000, "B"), (1_000_000, "M"), (1_000, "K"))


def format_isk(value: float, precision: int = 2) -> str:
    """
    Abbreviate an ISK amount with a B/M/K suffix.

    Amounts below one ISK keep four decimals so fractional prices stay visible.

    Examples:
        >>> format_isk(1500000000)
        '1.50B'
        >>> format_isk(15000)
        '15.00K'
        >>> format_isk(5.5)
        '5.50'
    """
    for threshold, suffix in _ISK_SCALES:
        if value >= threshold:
            return f"{value / threshold:.{precision}f}{suffix}"
    if value >= 1:
        return f"{value:.{precision}f}"
    return f"{value:.4f}"


def format_security(sec_status: float) -> str:
    """Format security status to one decimal, e.g. "0.9"."""
    return f"{sec_status:.1f}"


# =============================================================================
# Time Formatting
# =============================================================================

# CREST, the XML API and the market sites disagree on timestamp layout
_DATETIME_FORMATS = (
    "%Y-%m-%dT%H:%M:%SZ",
    "%Y-%m-%dT%H:%M:%S",
    "%Y-%m-%dT%H:%M:%S.%fZ",
    "%Y-%m-%d %H:%M:%S",
    "%Y-%m-%d",
)


def parse_datetime(dt_str: str) -> Optional[datetime]:
    """
    Parse an EVE API timestamp into a UTC datetime.

    Returns:
        datetime with UTC timezone, or None if no known layout matches

    Examples:
        >>> parse_datetime("2014-01-01 11:00:00")
        datetime.datetime(2014, 1, 1, 11, 0, tzinfo=datetime.timezone.utc)
    """
    if not dt_str:
        return None

    for fmt in _DATETIME_FORMATS:
        try:
            return datetime.strptime(dt_str, fmt).replace(tzinfo=timezone.utc)
        except ValueError:
            continue

    return None


def format_datetime(dt: datetime) -> str:
    return dt.strftime("%Y-%m-%dT%H:%M:%SZ")


def get_utc_timestamp() -> str:
    """
    Current UTC time in the layout stamped on command output.

    Returns:
        e.g. "2015-07-02T12:30:00Z"
    """
    return format_datetime(datetime.now(timezone.utc))
