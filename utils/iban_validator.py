"""IBAN validation using MOD-97 algorithm (ISO 13616), IBAN formatting and SWIFT/BIC checks."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from utils.errors import InvalidArgumentError
from utils.logger import logger

# Country code, check digits, 1-30 alphanumeric BBAN characters
_IBAN_RE = re.compile(r"[A-Z]{2}[0-9]{2}[A-Z0-9]{1,30}")
# Institution, country, location, optional branch
_SWIFT_RE = re.compile(r"[A-Z]{4}[A-Z]{2}[A-Z0-9]{2}(?:[A-Z0-9]{3})?")
_GROUP_RE = re.compile(r".{4}(?!$)")


@dataclass
class ValidationResult:
    valid: bool
    masked: str
    error: str = ""


def _iban_to_int(iban: str) -> int:
    rearranged = iban[4:] + iban[:4]
    digits = "".join(
        str(ord(ch) - 55) if ch.isalpha() else ch for ch in rearranged
    )
    return int(digits)


def _mask_iban(iban: str) -> str:
    if len(iban) < 8:
        return iban
    return iban[:4] + "*" * (len(iban) - 8) + iban[-4:]


def is_valid_iban(iban: Optional[str]) -> bool:
    """True if ``iban`` has the IBAN shape and its MOD-97 remainder is 1. Input is not normalised."""
    if iban is None or _IBAN_RE.fullmatch(iban) is None:
        return False
    return _iban_to_int(iban) % 97 == 1


def format_iban(iban: Optional[str]) -> str:
    """
    Group a valid IBAN in blocks of four characters separated by single spaces.

    Raises:
        InvalidArgumentError: if ``iban`` is not a valid IBAN.
    """
    if not is_valid_iban(iban):
        logger.debug("format_iban: rejected %s", iban)
        raise InvalidArgumentError("Invalid IBAN")
    return _GROUP_RE.sub(lambda m: m.group(0) + " ", iban)


def validate_iban(raw: str) -> ValidationResult:
    """Normalise user input (spaces, case) and validate it via MOD-97. Returns ValidationResult."""
    iban = raw.strip().replace(" ", "").upper()
    if not iban:
        return ValidationResult(False, "", "IBAN vuoto.")
    if _IBAN_RE.fullmatch(iban) is None:
        return ValidationResult(
            False,
            _mask_iban(iban),
            "Formato IBAN non valido (2 lettere, 2 cifre, 1-30 caratteri alfanumerici).",
        )
    if not is_valid_iban(iban):
        return ValidationResult(False, _mask_iban(iban), "Checksum IBAN (MOD-97) non valido.")
    return ValidationResult(True, _mask_iban(iban))


def is_valid_swift(swift: Optional[str]) -> bool:
    """8 or 11 character SWIFT/BIC code, upper case only."""
    return swift is not None and _SWIFT_RE.fullmatch(swift) is not None
