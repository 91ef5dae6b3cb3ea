"""Parsing of typed coin amounts, fee levels and send recipients."""

from __future__ import annotations

from dataclasses import dataclass

RECOMMENDED_FEE_PER_BYTE = 700

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_SEPARATOR = "."


class AmountError(ValueError):
    """Raised when a typed amount cannot be understood."""


def _parse_digits(text: str, what: str, source: str) -> int:
    if not (text.isascii() and text.isdigit()):
        raise AmountError(f"invalid {what} part in amount {source!r}")
    value = int(text)
    if value > _INT64_MAX:
        raise AmountError(f"amount {source!r} is too large")
    return value


def parse_amount(text: str, decimal_places: int) -> int:
    """Convert a decimal amount such as ``"1.25"`` to atomic units.

    Fraction digits beyond ``decimal_places`` are dropped.
    """
    if decimal_places < 0:
        raise ValueError("decimal_places must not be negative")
    trimmed = text.strip()
    if not trimmed:
        raise AmountError("amount is empty")

    negative = trimmed[0] == "-"
    if trimmed[0] in "+-":
        trimmed = trimmed[1:]

    if trimmed.count(_SEPARATOR) > 1:
        raise AmountError(f"amount {text!r} has more than one separator")
    integer_part, _, fractional_part = trimmed.partition(_SEPARATOR)
    fraction = fractional_part.ljust(decimal_places, "0")[:decimal_places]

    integer = _parse_digits(integer_part, "integer", text) if integer_part else 0
    frac = _parse_digits(fraction, "fractional", text) if fraction else 0

    value = integer * 10**decimal_places + frac
    if value > _INT64_MAX:
        raise AmountError(f"amount {text!r} is too large")
    result = -value if negative else value
    if result < _INT64_MIN:
        raise AmountError(f"amount {text!r} is too large")
    return result


def fee_for_slider(value: int, recommended_fee: int = RECOMMENDED_FEE_PER_BYTE) -> int:
    """Fee per byte for a position of the fee slider (1 to 4)."""
    if value == 1:
        return recommended_fee * 1 // 2
    if value == 3:
        return recommended_fee * 3 // 2
    if value == 4:
        return recommended_fee * 2
    return recommended_fee


@dataclass
class Recipient:
    """One destination of an outgoing payment as entered by the user."""

    address: str = ""
    amount_text: str = ""
    label: str = ""

    def __post_init__(self) -> None:
        self.address = self.address.strip()
        self.label = self.label.strip()

    def ready_to_send(self) -> bool:
        """True when an address is given and the amount is positive."""
        if not self.address:
            return False
        try:
            return float(self.amount_text) > 0
        except ValueError:
            return False

    def amount(self, decimal_places: int) -> int:
        """The entered amount in atomic units; negative amounts are refused."""
        value = parse_amount(self.amount_text, decimal_places)
        if value < 0:
            raise AmountError(f"amount {self.amount_text!r} is negative")
        return value