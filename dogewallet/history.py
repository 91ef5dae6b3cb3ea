"""Transaction history kept as unconfirmed transactions followed by confirmed ones."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from dogewallet.records import Transaction, Transfers

logger = logging.getLogger(__name__)

MAX_BLOCK_HEIGHT = 2**32 - 1


@dataclass(frozen=True)
class RowChange:
    """Rows ``first`` to ``last`` inclusive that are inserted or removed."""

    kind: str
    first: int
    last: int


def row_change(rows: int, old_size: int, new_size: int, rest_size: int) -> RowChange | None:
    """Rows of a table that change when one of its columns is resized.

    ``rows`` is the current row count, ``rest_size`` the length of the other
    data sharing the table; the table never has fewer than one row.
    """
    if new_size < old_size:
        kept = max(max(rest_size, 1), new_size)
        if kept < rows:
            return RowChange("remove", kept, rows - 1)
        return None
    if new_size > rows:
        return RowChange("insert", rows, new_size - 1)
    return None


class TransactionHistory:
    """Wallet transactions: the unconfirmed first, then confirmed, newest first."""

    def __init__(self) -> None:
        self._txs: list[Transaction] = []
        self._unconfirmed_size = 0
        self._can_fetch_more = True

    @property
    def transactions(self) -> list[Transaction]:
        return list(self._txs)

    @property
    def unconfirmed_size(self) -> int:
        return self._unconfirmed_size

    @property
    def can_fetch_more(self) -> bool:
        return self._can_fetch_more

    def __len__(self) -> int:
        return len(self._txs)

    def __getitem__(self, row: int) -> Transaction:
        return self._txs[row]

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self._txs)

    def top_confirmed_block(self) -> int:
        """Height of the newest confirmed transaction, or 0 when there is none."""
        if self._unconfirmed_size < len(self._txs):
            return self._txs[self._unconfirmed_size].block_height
        return 0

    def bottom_confirmed_block(self) -> int:
        """Height of the oldest confirmed transaction, or the largest height."""
        if self._unconfirmed_size < len(self._txs):
            return self._txs[-1].block_height
        return MAX_BLOCK_HEIGHT

    def receive(self, transfers: Transfers, highest_confirmed_block: int) -> bool:
        """Merge a page of history; False when nothing needs to be redrawn."""
        if transfers.next_from_height >= highest_confirmed_block:
            received = transfers.transactions()
            if received == self._txs[: self._unconfirmed_size]:
                return False
            confirmed = self._txs[self._unconfirmed_size:]
            self._unconfirmed_size = len(received)
            self._txs = received + confirmed
        elif transfers.next_to_height < highest_confirmed_block:
            received = transfers.transactions()
            if not received:
                return False
            if received[0].block_height < self.bottom_confirmed_block():
                self._txs = self._txs + received
                self._can_fetch_more = transfers.next_to_height != 0
            elif received[-1].block_height > self.top_confirmed_block():
                self._txs = (
                    self._txs[: self._unconfirmed_size]
                    + received
                    + self._txs[self._unconfirmed_size:]
                )
        else:
            logger.debug(
                "Got %d block, but %d expected",
                transfers.next_from_height,
                highest_confirmed_block,
            )
        return True