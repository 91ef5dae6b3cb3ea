"""Records exchanged with the wallet daemon over RPC."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Transfer:
    """One output of a transaction: an address and the amount sent to it."""

    address: str = ""
    amount: int = 0
    ours: bool = False


@dataclass
class Transaction:
    """A wallet transaction with the transfers it carries."""

    hash: str = ""
    public_key: str = ""
    extra: str = ""
    payment_id: str = ""
    anonymity: int = 0
    unlock_time: int = 0
    fee: int = 0
    coinbase: bool = False
    block_height: int = 0
    block_hash: str = ""
    timestamp: datetime | None = None
    transfers: list[Transfer] = field(default_factory=list)

    def our_amount(self) -> int:
        """Sum of the transfers that belong to this wallet."""
        return sum(transfer.amount for transfer in self.transfers if transfer.ours)

    def has_foreign_transfer(self) -> bool:
        """True when some transfer goes to an address outside this wallet."""
        return any(not transfer.ours for transfer in self.transfers)


@dataclass
class Block:
    """A block together with the wallet transactions found in it."""

    hash: str = ""
    height: int = 0
    transactions: list[Transaction] = field(default_factory=list)


@dataclass
class Transfers:
    """A page of wallet history, grouped by block."""

    blocks: list[Block] = field(default_factory=list)
    next_from_height: int = 0
    next_to_height: int = 0

    def transactions(self) -> list[Transaction]:
        """All transactions of all blocks, in block order."""
        return [tx for block in self.blocks for tx in block.transactions]


@dataclass
class Addresses:
    """The wallet's addresses and whether it can only view, not spend."""

    addresses: list[str] = field(default_factory=list)
    view_only: bool = False


@dataclass
class Status:
    """State of the daemon and of the chain it follows."""

    top_block_hash: str = ""
    transaction_pool_version: int = 0
    outgoing_peer_count: int = 0
    incoming_peer_count: int = 0
    lower_level_error: str = ""
    top_block_height: int = 0
    top_block_difficulty: int = 0
    top_block_timestamp: datetime | None = None
    top_block_timestamp_median: datetime | None = None
    next_block_effective_median_size: int = 0
    recommended_fee_per_byte: int = 0
    top_known_block_height: int = 0

    def peer_count(self) -> int:
        """Number of connected peers in both directions."""
        return self.outgoing_peer_count + self.incoming_peer_count


@dataclass
class Balance:
    """Wallet balance split by availability."""

    spendable: int = 0
    spendable_dust: int = 0
    locked_or_unconfirmed: int = 0

    def total(self) -> int:
        """All funds, spendable or not."""
        return self.spendable + self.spendable_dust + self.locked_or_unconfirmed


@dataclass
class TransfersRequest:
    """Range of block heights to ask the daemon history for."""

    from_height: int | None = None
    to_height: int | None = None