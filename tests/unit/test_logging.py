"""Tests for IBAN masking in structured logs."""

import pytest

from girocode.core.logging import mask_account_number, redact_account_numbers


class TestMaskAccountNumber:
    def test_keeps_country_code_and_last_four(self) -> None:
        assert mask_account_number("DE74500105176879856947") == "DE****************6947"

    def test_ignores_grouping_whitespace(self) -> None:
        assert mask_account_number("DE74 5001 0517 6879 8569 47") == "DE****************6947"

    def test_is_idempotent(self) -> None:
        masked = mask_account_number("DE74500105176879856947")
        assert mask_account_number(masked) == masked

    @pytest.mark.parametrize("value", ["", "DE12", "DE1234"])
    def test_short_values_fully_masked(self, value: str) -> None:
        assert mask_account_number(value) == "*" * len(value)


def test_processor_masks_iban_only() -> None:
    event = {"event": "girocode_generation_failed", "iban": "DE74500105176879856947", "charset": 1}
    result = redact_account_numbers(None, "warning", event)
    assert result["iban"] == "DE****************6947"
    assert result["charset"] == 1
    assert result["event"] == "girocode_generation_failed"
