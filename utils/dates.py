"""Date helpers shared by the age and document-expiry checks."""

from __future__ import annotations

from datetime import date
from typing import Optional

from utils.errors import InvalidArgumentError


def today() -> date:
    """Current local date. Single seam for every "now"-relative check."""
    return date.today()


def whole_years_between(start: date, end: date) -> int:
    """
    Number of complete years elapsed from ``start`` to ``end``.

    A year is complete once the month/day of ``start`` has been reached, so a
    29 February start completes its year on 1 March in non-leap years.
    Negative when ``end`` precedes ``start``.
    """
    years = end.year - start.year
    if years > 0 and (end.month, end.day) < (start.month, start.day):
        years -= 1
    elif years < 0 and (end.month, end.day) > (start.month, start.day):
        years += 1
    return years


def parse_iso_date(raw: Optional[str]) -> Optional[date]:
    """
    Parse a ``YYYY-MM-DD`` string. Empty or missing input yields ``None``.

    Raises:
        InvalidArgumentError: if the string is not a valid ISO date.
    """
    if raw is None or not raw.strip():
        return None
    try:
        return date.fromisoformat(raw.strip())
    except ValueError as exc:
        raise InvalidArgumentError(f"Data non valida (atteso YYYY-MM-DD): {raw!r}") from exc
