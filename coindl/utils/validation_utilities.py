"""
Utilities for validating command arguments.
Provides standardized validators that return (is_valid, error_message).
"""

import re
from typing import List, Tuple

COIN_ID_PATTERN = re.compile(r"^[a-z0-9][a-z0-9._-]*$")
CURRENCY_PATTERN = re.compile(r"^[a-z0-9]{2,10}$")


def split_list(value: str) -> List[str]:
    """
    Split a space or comma separated flag value.

    Args:
        value: Raw flag value, e.g. "bitcoin ethereum"

    Returns:
        Lower-cased items, empty ones dropped
    """
    if not value:
        return []
    return [item.lower() for item in value.replace(",", " ").split()]


def validate_coin_id(value: str) -> Tuple[bool, str]:
    """
    Validate a CoinGecko coin id.

    Args:
        value: Coin id to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if COIN_ID_PATTERN.match(value.lower()):
        return True, ""
    return False, f"Invalid coin id '{value}'. Use CoinGecko ids such as bitcoin or ethereum."


def validate_currency(value: str) -> Tuple[bool, str]:
    """
    Validate a currency code.

    Args:
        value: Currency code to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if CURRENCY_PATTERN.match(value.lower()):
        return True, ""
    return False, f"Invalid currency '{value}'. Use codes such as usd or eur."


def validate_single_currency(value: str) -> Tuple[bool, str]:
    """Validate that exactly one currency code was given"""
    items = split_list(value)
    if len(items) != 1:
        return False, "One currency only."
    return validate_currency(items[0])
