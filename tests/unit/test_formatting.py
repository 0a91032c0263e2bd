"""
Unit tests for the string, URL and date formatting helpers.
"""

from datetime import datetime

import pytest

from evently.utils.formatting import (
    form_url_query,
    format_date_time,
    format_price,
    parse_query,
    remove_keys_from_query,
)

def test_format_date_time_evening():
    """Test the three display styles for an evening time."""
    result = format_date_time(datetime(2023, 10, 25, 20, 30))

    assert result == {
        "date_time": "Wed, Oct 25, 8:30 PM",
        "date_only": "Wed, Oct 25, 2023",
        "time_only": "8:30 PM",
    }

def test_format_date_time_midnight_and_noon():
    """Test that the 12-hour clock shows 12 rather than 0."""
    assert format_date_time(datetime(2024, 1, 1, 0, 5))["time_only"] == "12:05 AM"
    assert format_date_time(datetime(2024, 1, 1, 12, 0))["time_only"] == "12:00 PM"
    assert format_date_time(datetime(2024, 1, 1, 9, 7))["date_time"] == "Mon, Jan 1, 9:07 AM"

def test_format_date_time_accepts_iso_strings():
    """Test that ISO strings, including a trailing Z, are parsed."""
    assert format_date_time("2023-10-25T20:30:00Z") == format_date_time(datetime(2023, 10, 25, 20, 30))
    assert format_date_time("2023-10-25")["date_only"] == "Wed, Oct 25, 2023"

@pytest.mark.parametrize("price, expected", [
    ("1234.5", "$1,234.50"),
    ("0", "$0.00"),
    ("99.999", "$100.00"),
    ("-5", "-$5.00"),
    (1000000, "$1,000,000.00"),
])
def test_format_price(price, expected):
    assert format_price(price) == expected

def test_format_price_rejects_text():
    with pytest.raises(ValueError):
        format_price("free")

def test_parse_query_collapses_single_values():
    assert parse_query("?a=1&b=2&b=3&c=") == {"a": "1", "b": ["2", "3"], "c": ""}

def test_form_url_query_sets_key_and_sorts():
    """Test that the key is set and keys come out sorted."""
    assert form_url_query("query=jazz&page=1", "page", "2") == "/?page=2&query=jazz"
    assert form_url_query("b=2&a=1", "c", "3", path="/events") == "/events?a=1&b=2&c=3"

def test_form_url_query_encodes_values():
    assert form_url_query("", "query", "jazz night") == "/?query=jazz+night"

def test_form_url_query_none_removes_key():
    assert form_url_query("page=2&query=jazz", "query", None) == "/?page=2"

def test_form_url_query_is_idempotent():
    """Test that setting the same key twice gives the same URL."""
    once = form_url_query("category=Music&page=1", "page", "3")
    twice = form_url_query(once.split("?", 1)[1], "page", "3")
    assert once == twice

def test_remove_keys_from_query():
    assert remove_keys_from_query("category=Music&query=jazz", ["query"]) == "/?category=Music"
    assert remove_keys_from_query("?query=jazz", ["query"], path="/events") == "/events"
    assert remove_keys_from_query("query=jazz", ["missing"]) == "/?query=jazz"

def test_remove_keys_from_query_is_idempotent():
    once = remove_keys_from_query("category=Music&page=2&query=jazz", ["query", "page"])
    twice = remove_keys_from_query(once.split("?", 1)[1], ["query", "page"])
    assert once == twice == "/?category=Music"
