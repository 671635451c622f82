"""Tests for utils.partita_iva."""

import pytest

from utils.errors import InvalidArgumentError
from utils.partita_iva import format_partita_iva, is_valid_partita_iva


class TestIsValidPartitaIva:
    @pytest.mark.parametrize("value", ["12345678903", "IT12345678903", "00743110157", "IT00743110157"])
    def test_valid(self, value) -> None:
        assert is_valid_partita_iva(value)

    @pytest.mark.parametrize("value", ["12345678900", "IT12345678900", "00743110158"])
    def test_wrong_check_digit(self, value) -> None:
        assert not is_valid_partita_iva(value)

    @pytest.mark.parametrize(
        "value",
        [
            None,
            "",
            "IT",
            "1234567890",
            "123456789031",
            "1234567890A",
            "it12345678903",
            "ITIT12345678903",
            " 12345678903",
            "12345678903\n",
            "١٢٣٤٥٦٧٨٩٠٣",
        ],
    )
    def test_shape_rejected(self, value) -> None:
        assert not is_valid_partita_iva(value)

    def test_prefix_insensitive(self) -> None:
        for last in "0123456789":
            digits = "1234567890" + last
            assert is_valid_partita_iva("IT" + digits) == is_valid_partita_iva(digits)

    def test_exactly_one_check_digit_per_body(self) -> None:
        valid = [d for d in "0123456789" if is_valid_partita_iva("0074311015" + d)]
        assert valid == ["7"]


class TestFormatPartitaIva:
    def test_adds_prefix(self) -> None:
        assert format_partita_iva("12345678903") == "IT12345678903"

    def test_keeps_single_prefix(self) -> None:
        assert format_partita_iva("IT12345678903") == "IT12345678903"

    def test_idempotent(self) -> None:
        once = format_partita_iva("00743110157")
        assert format_partita_iva(once) == once

    def test_does_not_check_digit(self) -> None:
        assert format_partita_iva("12345678900") == "IT12345678900"

    def test_none_raises(self) -> None:
        with pytest.raises(InvalidArgumentError, match="cannot be null"):
            format_partita_iva(None)

    @pytest.mark.parametrize("value", ["", "123", "ITIT12345678903", "1234567890A", "it12345678903"])
    def test_invalid_raises(self, value) -> None:
        with pytest.raises(InvalidArgumentError, match="Invalid Partita IVA"):
            format_partita_iva(value)
