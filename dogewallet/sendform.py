"""State of the send form: recipients, payment id and the fee level."""

from __future__ import annotations

from dogewallet.amounts import AmountError, Recipient, fee_for_slider, parse_amount
from dogewallet.records import Transaction, Transfer


def _is_valid_payment_id(payment_id: str) -> bool:
    return True


def _to_float(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


class SendForm:
    """Recipients of an outgoing payment; the form always holds at least one."""

    def __init__(self, decimal_places: int) -> None:
        self.decimal_places = decimal_places
        self.payment_id = ""
        self._recipients: list[Recipient] = [Recipient()]

    @property
    def recipients(self) -> tuple[Recipient, ...]:
        return tuple(self._recipients)

    def add_recipient(self, address: str, label: str = "") -> Recipient:
        """Fill the single empty recipient, or append a new one."""
        if len(self._recipients) == 1 and not self._recipients[0].address:
            recipient = self._recipients[0]
        else:
            recipient = Recipient()
            self._recipients.append(recipient)
        recipient.address = address.strip()
        if label:
            recipient.label = label.strip()
        return recipient

    def remove_recipient(self, index: int) -> None:
        """Remove a recipient; the last remaining one cannot be removed."""
        if len(self._recipients) == 1:
            raise ValueError("the last recipient cannot be removed")
        del self._recipients[index]

    def clear(self) -> None:
        """Drop every recipient and the payment id, leaving one empty recipient."""
        self._recipients = [Recipient()]
        self.payment_id = ""

    def total_amount(self) -> int:
        """Sum of all entered amounts in atomic units; blank amounts count as zero."""
        return sum(
            recipient.amount(self.decimal_places)
            for recipient in self._recipients
            if recipient.amount_text.strip()
        )

    def ready_to_send(self) -> bool:
        return all(r.ready_to_send() for r in self._recipients) and _is_valid_payment_id(
            self.payment_id
        )

    def build_transaction(self, fee_slider: int) -> tuple[Transaction, int]:
        """The transaction to create and its fee per byte.

        Raises AmountError naming the first recipient whose amount is not positive.
        """
        transfers = []
        for position, recipient in enumerate(self._recipients):
            if _to_float(recipient.amount_text) <= 0:
                raise AmountError(f"recipient {position} has a wrong amount")
            transfers.append(
                Transfer(
                    address=recipient.address,
                    amount=parse_amount(recipient.amount_text, self.decimal_places),
                )
            )
        transaction = Transaction(
            transfers=transfers,
            payment_id=self.payment_id,
            anonymity=0,
            unlock_time=0,
        )
        return transaction, fee_for_slider(fee_slider)