"""Tessera Sanitaria (health insurance card) checks."""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

from utils.dates import today

# 20 numeric digits
HIC_SERIAL_PATTERN = re.compile(r"[0-9]{20}")


def is_valid_hic_serial(serial_number: Optional[str]) -> bool:
    if serial_number is None:
        return False
    return HIC_SERIAL_PATTERN.fullmatch(serial_number.upper()) is not None


def is_card_currently_valid(expiration_date: Optional[date]) -> bool:
    """True while today is strictly before ``expiration_date``."""
    if expiration_date is None:
        return False
    return today() < expiration_date


def is_valid_health_insurance_card(
    serial_number: Optional[str], expiration_date: Optional[date]
) -> bool:
    return is_valid_hic_serial(serial_number) and is_card_currently_valid(expiration_date)
