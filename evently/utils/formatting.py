"""
String, URL and date formatting helpers.

All output follows en-US conventions (12-hour clock, USD) independent of the
process locale.
"""

from datetime import datetime
from typing import Dict, Iterable, List, Optional, Union
from urllib.parse import parse_qs, urlencode

WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

QueryDict = Dict[str, Union[str, List[str]]]

def _to_datetime(value: Union[datetime, str]) -> datetime:
    if isinstance(value, datetime):
        return value
    # fromisoformat does not accept a trailing "Z" before Python 3.11
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text)

def _clock(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d} {suffix}"

def format_date_time(value: Union[datetime, str]) -> Dict[str, str]:
    """
    Format a date in three display styles.

    Args:
        value: A datetime or an ISO-8601 string. No timezone conversion is applied.

    Returns:
        Dict with keys:
        - date_time: e.g. "Wed, Oct 25, 8:30 PM"
        - date_only: e.g. "Wed, Oct 25, 2023"
        - time_only: e.g. "8:30 PM"
    """
    dt = _to_datetime(value)
    weekday = WEEKDAYS[dt.weekday()]
    month = MONTHS[dt.month - 1]

    return {
        "date_time": f"{weekday}, {month} {dt.day}, {_clock(dt)}",
        "date_only": f"{weekday}, {month} {dt.day}, {dt.year}",
        "time_only": _clock(dt),
    }

def format_price(price: Union[str, float, int]) -> str:
    """
    Format an amount as US dollars, e.g. "1234.5" -> "$1,234.50".

    Raises:
        ValueError: If ``price`` is not numeric
    """
    amount = float(price)
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"

def parse_query(params: str) -> QueryDict:
    """Parse a query string into a dict; repeated keys become lists."""
    parsed = parse_qs(params.lstrip("?"), keep_blank_values=True)
    return {key: values[0] if len(values) == 1 else values for key, values in parsed.items()}

def stringify_url(path: str, query: Dict[str, Optional[Union[str, List[str]]]]) -> str:
    """Join ``path`` and ``query`` with keys sorted; None values are skipped."""
    items = [(key, query[key]) for key in sorted(query) if query[key] is not None]
    if not items:
        return path
    return f"{path}?{urlencode(items, doseq=True)}"

def form_url_query(params: str, key: str, value: Optional[str], path: str = "/") -> str:
    """
    Set one key in a query string and return the resulting URL.

    Args:
        params: Current query string, with or without a leading "?"
        key: Query key to set
        value: New value; None removes the key
        path: URL path the query is attached to

    Returns:
        str: ``path`` followed by the updated query string
    """
    current: Dict[str, Optional[Union[str, List[str]]]] = dict(parse_query(params))
    current[key] = value
    return stringify_url(path, current)

def remove_keys_from_query(params: str, keys_to_remove: Iterable[str], path: str = "/") -> str:
    """
    Remove keys from a query string and return the resulting URL.

    Args:
        params: Current query string
        keys_to_remove: Keys to drop; missing keys are ignored
        path: URL path the query is attached to

    Returns:
        str: ``path`` followed by the remaining query string, or just ``path``
    """
    current = parse_query(params)
    for key in keys_to_remove:
        current.pop(key, None)
    return stringify_url(path, current)
