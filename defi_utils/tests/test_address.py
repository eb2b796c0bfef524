"""Tests for address and hash helpers."""

from unittest.mock import patch

import pytest

from defi_utils.eth.address import (
    format_tx_hash,
    get_token_symbol,
    is_valid_address,
    truncate_address,
)

CHECKSUM_ADDRESS = "0x5FbDB2315678afecb367f032d93F642f64180aa3"


@pytest.fixture
def popular_tokens():
    """Sample token registry."""
    return {
        "USDC": {"address": "0x2791Bca1f2de4661ED88A30C99A7a9449Aa84174", "symbol": "USDC", "decimals": 6},
        "WMATIC": {"address": "0x0d500B1d8E8eF31E21C99d1Db9A6444d3ADf1270", "symbol": "WMATIC", "decimals": 18},
    }


def test_is_valid_address():
    """Test checksummed and single-case addresses are valid."""
    assert is_valid_address(CHECKSUM_ADDRESS) is True
    assert is_valid_address(CHECKSUM_ADDRESS.lower()) is True
    assert is_valid_address("0x" + CHECKSUM_ADDRESS[2:].upper()) is True


@pytest.mark.parametrize(
    "address",
    [
        "0x5fbDB2315678afecb367f032d93F642f64180aa3",  # bad checksum
        "0x5FbDB2315678afecb367f032d93F642f64180aA3",  # bad checksum, last char
        bytes.fromhex("5fbdb2315678afecb367f032d93f642f64180aa3"),
        "0x123",
        "0x" + "g" * 40,
        "",
        None,
        12345,
    ],
)
def test_is_valid_address_rejects(address):
    """Test invalid addresses are rejected."""
    assert is_valid_address(address) is False


def test_is_valid_address_never_raises():
    """Test validator errors are swallowed."""
    with patch("defi_utils.eth.address.Web3.is_address", side_effect=TypeError("boom")):
        assert is_valid_address(CHECKSUM_ADDRESS) is False


def test_truncate_address():
    """Test address truncation with default and custom widths."""
    assert truncate_address(CHECKSUM_ADDRESS) == "0x5FbD...0aa3"
    assert truncate_address(CHECKSUM_ADDRESS, 4, 6) == "0x5F...180aa3"


@pytest.mark.parametrize("value", ["", None])
def test_truncate_address_empty(value):
    """Test empty input returns an empty string."""
    assert truncate_address(value) == ""


def test_truncate_address_without_tail():
    """Test end_chars=0 keeps only the head."""
    assert truncate_address(CHECKSUM_ADDRESS, 6, 0) == "0x5FbD..."


def test_truncate_address_short_strings_unchanged():
    """Test strings no longer than start + end are returned as-is."""
    assert truncate_address("0x12345678") == "0x12345678"
    assert truncate_address("0x1234567") == "0x1234567"


@pytest.mark.parametrize("start,end", [(6, 4), (2, 2), (10, 8)])
def test_truncate_address_length(start, end):
    """Test truncated output length is start + 3 + end."""
    assert len(truncate_address(CHECKSUM_ADDRESS, start, end)) == start + 3 + end


def test_format_tx_hash():
    """Test transaction hashes keep 10 leading and 8 trailing characters."""
    tx_hash = "0x" + "a" * 56 + "12345678"
    formatted = format_tx_hash(tx_hash)

    assert formatted == "0xaaaaaaaa...12345678"
    assert len(formatted) == 21
    assert len(format_tx_hash("0x" + "a" * 64)) == 21


def test_format_tx_hash_empty():
    """Test empty hash returns an empty string."""
    assert format_tx_hash("") == ""
    assert format_tx_hash(None) == ""


def test_get_token_symbol_case_insensitive(popular_tokens):
    """Test lookup ignores address case."""
    assert get_token_symbol("0x2791bca1f2de4661ed88a30c99a7a9449aa84174", popular_tokens) == "USDC"
    assert get_token_symbol("0x0D500B1D8E8EF31E21C99D1DB9A6444D3ADF1270", popular_tokens) == "WMATIC"


def test_get_token_symbol_unknown(popular_tokens):
    """Test unknown addresses and empty registries return TOKEN."""
    assert get_token_symbol(CHECKSUM_ADDRESS, popular_tokens) == "TOKEN"
    assert get_token_symbol(CHECKSUM_ADDRESS) == "TOKEN"
    assert get_token_symbol(CHECKSUM_ADDRESS, {}) == "TOKEN"


def test_get_token_symbol_skips_entries_without_address(popular_tokens):
    """Test malformed registry entries are ignored."""
    popular_tokens["BROKEN"] = {"symbol": "BROKEN"}
    assert get_token_symbol(CHECKSUM_ADDRESS, popular_tokens) == "TOKEN"
