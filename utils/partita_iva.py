"""
Partita IVA (Italian VAT number) validation and formatting.

A Partita IVA is 11 digits, optionally written with a leading "IT". The last
digit is a Luhn-style check digit: digits in even (1-based) positions are
doubled, subtracting 9 when the result exceeds 9, and the total of all digits
must be a multiple of 10.
"""

from __future__ import annotations

import re
from typing import Optional

from utils.errors import InvalidArgumentError
from utils.logger import logger

COUNTRY_PREFIX = "IT"
# Exactly 11 digits
PARTITA_IVA_PATTERN = re.compile(r"[0-9]{11}")


def _strip_prefix(value: str) -> str:
    if value.startswith(COUNTRY_PREFIX):
        return value[len(COUNTRY_PREFIX):]
    return value


def _has_valid_check_digit(digits: str) -> bool:
    total = 0
    for position, ch in enumerate(digits, start=1):
        digit = int(ch)
        if position % 2 == 0:
            digit *= 2
            if digit > 9:
                digit -= 9
        total += digit
    return total % 10 == 0


def is_valid_partita_iva(value: Optional[str]) -> bool:
    """True for 11 digits (optional "IT" prefix) with a correct check digit."""
    if value is None:
        return False
    digits = _strip_prefix(value)
    if PARTITA_IVA_PATTERN.fullmatch(digits) is None:
        return False
    return _has_valid_check_digit(digits)


def format_partita_iva(value: Optional[str]) -> str:
    """
    Return the number in the canonical "IT" + 11 digits form.

    Only the 11-digit shape is checked here, not the check digit; use
    :func:`is_valid_partita_iva` for that.

    Raises:
        InvalidArgumentError: if ``value`` is None or not 11 digits after
            removing an optional "IT" prefix.
    """
    if value is None:
        raise InvalidArgumentError("Partita IVA cannot be null")
    digits = _strip_prefix(value)
    if PARTITA_IVA_PATTERN.fullmatch(digits) is None:
        logger.debug("format_partita_iva: rejected %r", value)
        raise InvalidArgumentError("Invalid Partita IVA")
    return COUNTRY_PREFIX + digits
