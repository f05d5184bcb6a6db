"""Formatting helpers for unlinked-asset reports."""

import math
from datetime import datetime, timezone

SIZE_UNITS = ["Bytes", "KB", "MB", "GB", "TB"]

WEBAPP_URL = "https://app.contentful.com/spaces/{space}/environments/{environment}/assets/{asset}"


def format_file_size(value) -> str:
    """
    Render a byte count as a human-readable size.

    Examples:
        >>> format_file_size(0)
        '0 Bytes'
        >>> format_file_size(1024)
        '1.00 KB'
        >>> format_file_size(1536)
        '1.50 KB'
        >>> format_file_size(None)
        'Unknown'
    """
    if value is None or isinstance(value, bool):
        return "Unknown"
    try:
        size = float(value)
    except (TypeError, ValueError):
        return "Unknown"
    if math.isnan(size) or math.isinf(size) or size < 0:
        return "Unknown"
    if size == 0:
        return "0 Bytes"

    magnitude = math.floor(math.log(size) / math.log(1024))
    # log() can land either side of an exact power of 1024
    if magnitude + 1 < len(SIZE_UNITS) and size >= 1024 ** (magnitude + 1):
        magnitude += 1
    elif magnitude > 0 and size < 1024 ** magnitude:
        magnitude -= 1
    magnitude = max(0, min(magnitude, len(SIZE_UNITS) - 1))

    return f"{size / 1024 ** magnitude:.2f} {SIZE_UNITS[magnitude]}"


def format_date(timestamp: str | None) -> str:
    """Format an ISO-8601 timestamp as M/D/YYYY in the local time zone."""
    if not timestamp:
        return "Unknown"
    try:
        # fromisoformat() only accepts a trailing "Z" from 3.11 on
        dt = datetime.fromisoformat(timestamp.replace("Z", "+00:00"))
    except ValueError:
        return "Unknown"
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    local = dt.astimezone()
    return f"{local.month}/{local.day}/{local.year}"


def webapp_url(space_id: str, asset_id: str, environment_id: str = "master") -> str:
    """Deep link to an asset in the Contentful web app."""
    return WEBAPP_URL.format(space=space_id, environment=environment_id, asset=asset_id)


def report_timestamp(now: datetime | None = None) -> str:
    """UTC timestamp safe for file names, e.g. ``2026-10-18T08-49-12``."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return now.strftime("%Y-%m-%dT%H-%M-%S")
