"""CIE (Carta d'Identità Elettronica) checks."""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

# Two letters, five digits, two letters (e.g. CA12345AB)
CIE_SERIAL_PATTERN = re.compile(r"[A-Z]{2}[0-9]{5}[A-Z]{2}")


def is_valid_cie_serial(serial_number: Optional[str]) -> bool:
    """Case-insensitive match of the CIE serial layout."""
    if serial_number is None:
        return False
    return CIE_SERIAL_PATTERN.fullmatch(serial_number.upper()) is not None


def is_valid_cie(
    serial_number: Optional[str],
    issue_date: Optional[date],
    expiration_date: Optional[date],
) -> bool:
    """
    Validate a CIE by serial and dates.

    Both dates are required and the issue date must be strictly before the
    expiration date. Expiry relative to today is not checked.
    """
    if not is_valid_cie_serial(serial_number):
        return False
    if issue_date is None or expiration_date is None:
        return False
    return issue_date < expiration_date
