"""Tests for utils.health_card."""

from datetime import date, timedelta

import pytest

from utils.health_card import (
    is_card_currently_valid,
    is_valid_health_insurance_card,
    is_valid_hic_serial,
)

SERIAL = "80380001234567890123"


class TestSerial:
    def test_valid(self) -> None:
        assert is_valid_hic_serial(SERIAL)

    @pytest.mark.parametrize(
        "serial",
        [None, "", SERIAL[:-1], SERIAL + "4", "8038000123456789012A", " " + SERIAL[1:], "١" * 20],
    )
    def test_invalid(self, serial) -> None:
        assert not is_valid_hic_serial(serial)


class TestExpiry:
    def test_future_date(self) -> None:
        assert is_card_currently_valid(date.today() + timedelta(days=365))

    def test_past_date(self) -> None:
        assert not is_card_currently_valid(date.today() - timedelta(days=1))

    def test_expires_today(self) -> None:
        assert not is_card_currently_valid(date.today())

    def test_missing_date(self) -> None:
        assert not is_card_currently_valid(None)


class TestCombined:
    def test_valid_card(self) -> None:
        assert is_valid_health_insurance_card(SERIAL, date.today() + timedelta(days=30))

    def test_expired_card(self) -> None:
        assert not is_valid_health_insurance_card(SERIAL, date.today() - timedelta(days=30))

    def test_bad_serial(self) -> None:
        assert not is_valid_health_insurance_card("123", date.today() + timedelta(days=30))

    def test_missing_date(self) -> None:
        assert not is_valid_health_insurance_card(SERIAL, None)
