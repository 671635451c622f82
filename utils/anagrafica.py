"""
Personal-data ("anagrafica") helpers: names, surnames, titles, gender and age.

Patterns are ASCII-only and must match the whole input.
"""

from __future__ import annotations

import re
from datetime import date
from typing import Optional

from utils.dates import today, whole_years_between

NAME_PATTERN = re.compile(r"[A-Za-z ]+")
SURNAME_PATTERN = re.compile(r"[A-Za-z]+")
VALID_TITLES = frozenset({"Sig.", "Sig.ra", "Dott."})
VALID_GENDERS = frozenset({"M", "F"})
ADULT_AGE = 18


def is_valid_name(name: Optional[str]) -> bool:
    """Letters and spaces only (e.g. "Anna Maria")."""
    return name is not None and NAME_PATTERN.fullmatch(name) is not None


def is_valid_surname(surname: Optional[str]) -> bool:
    """Letters only, no spaces."""
    return surname is not None and SURNAME_PATTERN.fullmatch(surname) is not None


def is_valid_title(title: Optional[str]) -> bool:
    return title in VALID_TITLES


def is_valid_gender(gender: Optional[str]) -> bool:
    """Case-insensitive "M" or "F"."""
    return gender is not None and gender.upper() in VALID_GENDERS


def calculate_age(birthdate: date) -> int:
    """Whole years elapsed from ``birthdate`` to today."""
    return whole_years_between(birthdate, today())


def is_over_18(birthdate: date) -> bool:
    return calculate_age(birthdate) >= ADULT_AGE


def format_full_name(title: Optional[str], name: Optional[str], surname: Optional[str]) -> str:
    """
    Join title, name and surname with single spaces.

    A missing title is omitted; the result is stripped of surrounding
    whitespace, e.g. ``format_full_name(None, "Anna", "Verdi") == "Anna Verdi"``.
    """
    prefix = f"{title} " if title is not None else ""
    return f"{prefix}{name or ''} {surname or ''}".strip()


def get_initials(name: Optional[str], surname: Optional[str]) -> str:
    """Upper-cased first letters of name and surname; empty parts are skipped."""
    return "".join(part[0].upper() for part in (name, surname) if part)


def normalize_name(value: Optional[str]) -> Optional[str]:
    """First character upper case, the rest lower case. ``None``/"" pass through."""
    if not value:
        return value
    return value[0].upper() + value[1:].lower()


def is_name_length_valid(name: Optional[str], min_length: int, max_length: int) -> bool:
    return name is not None and min_length <= len(name) <= max_length
