import pytest

from dogewallet.amounts import (
    RECOMMENDED_FEE_PER_BYTE,
    AmountError,
    Recipient,
    fee_for_slider,
    parse_amount,
)


def test_whole_number_scales_by_decimal_places():
    assert parse_amount("3", 8) == 3 * 10**8


def test_fraction_is_padded():
    assert parse_amount("0.5", 2) == parse_amount("0.50", 2)
    assert parse_amount(".5", 2) == parse_amount("0.5", 2)


def test_trailing_separator_is_whole_number():
    assert parse_amount("7.", 4) == parse_amount("7", 4)


def test_extra_fraction_digits_are_truncated():
    assert parse_amount("1.123456789", 8) == parse_amount("1.12345678", 8)


def test_signs():
    assert parse_amount("-1.5", 8) == -parse_amount("1.5", 8)
    assert parse_amount("+2", 8) == parse_amount("2", 8)


def test_whitespace_is_trimmed():
    assert parse_amount("  4.2  ", 3) == parse_amount("4.2", 3)


def test_zero_decimal_places_ignores_fraction():
    assert parse_amount("9.99", 0) == 9


def test_too_large_amount():
    with pytest.raises(AmountError):
        parse_amount("99999999999999999999", 8)


def test_amount_error_is_value_error():
    with pytest.raises(ValueError):
        parse_amount("nope", 2)


def test_fee_default_is_recommended():
    assert fee_for_slider(2) == RECOMMENDED_FEE_PER_BYTE == 700
    assert fee_for_slider(0) == RECOMMENDED_FEE_PER_BYTE
    assert fee_for_slider(9) == RECOMMENDED_FEE_PER_BYTE


def test_fee_levels_are_ordered():
    fees = [fee_for_slider(level) for level in (1, 2, 3, 4)]
    assert fees == sorted(fees)
    assert fees[0] * 2 == fees[1]
    assert fees[3] == 2 * fees[1]


def test_fee_with_custom_recommendation():
    assert fee_for_slider(4, 10) == 20
    assert fee_for_slider(1, 10) == 5


def test_recipient_strips_fields():
    recipient = Recipient("  addr  ", "1", "  friend ")
    assert recipient.address == "addr"
    assert recipient.label == "friend"


def test_recipient_ready_to_send():
    assert Recipient("addr", "1.5").ready_to_send() is True
    assert Recipient("", "1.5").ready_to_send() is False
    assert Recipient("addr", "0").ready_to_send() is False
    assert Recipient("addr", "junk").ready_to_send() is False


def test_recipient_amount():
    assert Recipient("addr", "2.5").amount(2) == parse_amount("2.5", 2)


def test_recipient_negative_amount_rejected():
    with pytest.raises(AmountError):
        Recipient("addr", "-1").amount(2)