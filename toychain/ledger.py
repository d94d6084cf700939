"""A chain of blocks carrying transactions, with a binary file format."""

from __future__ import annotations

import io
import struct
import time
from dataclasses import dataclass, field
from os import PathLike
from typing import BinaryIO, Iterator, Union

from toychain.sha256 import DIGEST_SIZE, Sha256

MAX_TRANSACTIONS = 100
NAME_SIZE = 64

_DIFFICULTY = struct.Struct("<i")
_BLOCK_HEAD = struct.Struct("<Iqi")
_TRANSACTION = struct.Struct(f"<{NAME_SIZE}s{NAME_SIZE}sdq")
_INT32_MAX = 0x7FFFFFFF

PathType = Union[str, "PathLike[str]"]


class LedgerError(Exception):
    """Raised when a ledger operation is rejected or a file cannot be read."""


def _now() -> int:
    return int(time.time())


def _stored_name(name: str) -> str:
    """Cut a name at the first NUL and to the storable number of bytes."""
    encoded = name.split("\0", 1)[0].encode("utf-8")[:NAME_SIZE - 1]
    return encoded.decode("utf-8", "ignore")


@dataclass(frozen=True)
class Transaction:
    """A transfer of an amount from one party to another."""

    sender: str
    receiver: str
    amount: float
    timestamp: int = field(default_factory=_now)

    def __post_init__(self) -> None:
        object.__setattr__(self, "sender", _stored_name(self.sender))
        object.__setattr__(self, "receiver", _stored_name(self.receiver))
        object.__setattr__(self, "amount", float(self.amount))

    def _hash_parts(self) -> Iterator[bytes]:
        yield self.sender.encode("utf-8")
        yield self.receiver.encode("utf-8")
        yield struct.pack("<d", self.amount)
        yield struct.pack("<q", self.timestamp)

    def _to_bytes(self) -> bytes:
        return _TRANSACTION.pack(
            self.sender.encode("utf-8"),
            self.receiver.encode("utf-8"),
            self.amount,
            self.timestamp,
        )

    @classmethod
    def _from_bytes(cls, raw: bytes) -> "Transaction":
        sender, receiver, amount, timestamp = _TRANSACTION.unpack(raw)
        return cls(
            sender.split(b"\0", 1)[0].decode("utf-8", "replace"),
            receiver.split(b"\0", 1)[0].decode("utf-8", "replace"),
            amount,
            timestamp,
        )


@dataclass
class Block:
    """One block: its position, time, transactions and link to the previous hash."""

    index: int = 0
    timestamp: int = field(default_factory=_now)
    transactions: list[Transaction] = field(default_factory=list)
    previous_hash: bytes = bytes(DIGEST_SIZE)
    hash: bytes = field(init=False, default=b"")

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 0xFFFFFFFF:
            raise LedgerError(f"block index out of range: {self.index}")
        if len(self.previous_hash) != DIGEST_SIZE:
            raise LedgerError("previous hash must be 32 bytes")
        if len(self.transactions) > MAX_TRANSACTIONS:
            raise LedgerError("too many transactions for one block")
        self.previous_hash = bytes(self.previous_hash)
        self.transactions = list(self.transactions)
        self.rehash()

    def add_transaction(self, sender: str, receiver: str, amount: float) -> Transaction:
        """Record a transaction; the stored hash is not refreshed."""
        if sender is None or receiver is None:
            raise LedgerError("sender and receiver are required")
        if amount <= 0:
            raise LedgerError(f"amount must be positive: {amount}")
        if len(self.transactions) >= MAX_TRANSACTIONS:
            raise LedgerError("block already holds the maximum number of transactions")
        transaction = Transaction(sender, receiver, amount)
        self.transactions.append(transaction)
        return transaction

    def calculate_hash(self) -> bytes:
        """Compute the hash of the block's current contents."""
        hasher = Sha256(struct.pack("<I", self.index))
        hasher.update(struct.pack("<q", self.timestamp))
        for transaction in self.transactions:
            for part in transaction._hash_parts():
                hasher.update(part)
        hasher.update(self.previous_hash)
        return hasher.digest()

    def rehash(self) -> None:
        """Store the hash of the block's current contents."""
        self.hash = self.calculate_hash()

    def describe(self) -> str:
        """Return a human-readable description of the block."""
        lines = [
            "",
            f"Block #{self.index}",
            f"Timestamp: {self.timestamp}",
            f"Previous Hash: {self.previous_hash.hex()}",
            f"Hash: {self.hash.hex()}",
            "Transactions:",
        ]
        lines.extend(
            f"  {number}. {tx.sender} -> {tx.receiver}: {tx.amount:.2f}"
            for number, tx in enumerate(self.transactions, start=1)
        )
        return "\n".join(lines) + "\n\n"

    def _to_bytes(self) -> bytes:
        head = _BLOCK_HEAD.pack(self.index, self.timestamp, len(self.transactions))
        body = b"".join(tx._to_bytes() for tx in self.transactions)
        return head + body + self.previous_hash + self.hash

    @classmethod
    def _read(cls, stream: BinaryIO) -> "Block | None":
        """Read one block record, or return None at a clean end of data."""
        head = stream.read(_BLOCK_HEAD.size)
        if not head:
            return None
        index, timestamp, count = _BLOCK_HEAD.unpack(_complete(head, _BLOCK_HEAD.size))
        if not 0 <= count <= MAX_TRANSACTIONS:
            raise LedgerError(f"invalid transaction count in file: {count}")
        transactions = [
            Transaction._from_bytes(_read_exact(stream, _TRANSACTION.size))
            for _ in range(count)
        ]
        previous_hash = _read_exact(stream, DIGEST_SIZE)
        stored_hash = _read_exact(stream, DIGEST_SIZE)
        block = cls(index, timestamp, transactions, previous_hash)
        block.hash = stored_hash
        return block


def _complete(data: bytes, size: int) -> bytes:
    if len(data) != size:
        raise LedgerError("unexpected end of blockchain file")
    return data


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    return _complete(stream.read(size), size)


class Blockchain:
    """A chain of transaction blocks starting from a genesis block."""

    def __init__(self, difficulty: int) -> None:
        if not 0 <= difficulty <= _INT32_MAX:
            raise LedgerError(f"invalid difficulty: {difficulty}")
        self.difficulty = difficulty
        self._blocks: list[Block] = [Block()]

    @property
    def genesis(self) -> Block:
        return self._blocks[0]

    @property
    def latest(self) -> Block:
        return self._blocks[-1]

    def __iter__(self) -> Iterator[Block]:
        return iter(self._blocks)

    def __len__(self) -> int:
        return len(self._blocks)

    def add_block(self) -> Block:
        """Append an empty block linked to the latest one and return it."""
        block = Block(index=self.latest.index + 1, previous_hash=self.latest.hash)
        self._blocks.append(block)
        return block

    def is_valid(self) -> bool:
        """Check every stored hash and every link between blocks."""
        for current, following in zip(self._blocks, self._blocks[1:] + [None]):
            if current.calculate_hash() != current.hash:
                return False
            if following is not None and following.previous_hash != current.hash:
                return False
        return True

    def describe(self) -> str:
        """Return descriptions of all blocks in order."""
        return "".join(block.describe() for block in self._blocks)

    def save(self, path: PathType) -> None:
        """Write the chain to a binary file."""
        with open(path, "wb") as handle:
            handle.write(_DIFFICULTY.pack(self.difficulty))
            for block in self._blocks:
                handle.write(block._to_bytes())

    @classmethod
    def load(cls, path: PathType) -> "Blockchain":
        """Read a chain from a file written by :meth:`save`."""
        with open(path, "rb") as handle:
            stream = io.BytesIO(handle.read())
        (difficulty,) = _DIFFICULTY.unpack(_read_exact(stream, _DIFFICULTY.size))
        chain = cls(difficulty)
        blocks: list[Block] = []
        while (block := Block._read(stream)) is not None:
            blocks.append(block)
        if blocks:
            chain._blocks = blocks
        return chain