"""Tests for explorer links."""

import pytest

from defi_utils.eth.explorer import EXPLORER_URLS, get_explorer_url


@pytest.mark.parametrize(
    "network,expected",
    [
        ("polygon", "https://polygonscan.com/tx/0xhash"),
        ("ethereum", "https://etherscan.io/tx/0xhash"),
        ("bsc", "https://bscscan.com/tx/0xhash"),
    ],
)
def test_get_explorer_url(network, expected):
    """Test each built-in network."""
    assert get_explorer_url("0xhash", network) == expected


def test_get_explorer_url_defaults_to_polygon():
    """Test default and unknown networks use Polygon."""
    assert get_explorer_url("0xhash") == "https://polygonscan.com/tx/0xhash"
    assert get_explorer_url("0xhash", "unknownnet") == "https://polygonscan.com/tx/0xhash"


def test_get_explorer_url_no_encoding():
    """Test the hash is appended verbatim."""
    assert get_explorer_url("a b/c") == "https://polygonscan.com/tx/a b/c"


def test_get_explorer_url_extra_explorers():
    """Test extra entries extend the table without changing it."""
    extra = {"arbitrum": "https://arbiscan.io/tx/"}

    assert get_explorer_url("0xhash", "arbitrum", extra) == "https://arbiscan.io/tx/0xhash"
    assert get_explorer_url("0xhash", "bsc", extra) == "https://bscscan.com/tx/0xhash"
    assert get_explorer_url("0xhash", "arbitrum") == "https://polygonscan.com/tx/0xhash"
    assert "arbitrum" not in EXPLORER_URLS
