"""A minimal linked chain of data-carrying blocks."""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass, field
from typing import Iterator

from toychain.sha256 import DIGEST_SIZE, Sha256

MAX_DATA_SIZE = 1024
GENESIS_DATA = "Genesis Block"


def _now() -> int:
    return int(time.time())


def _stored_text(data: str) -> str:
    """Cut text at the first NUL and to the storable number of bytes."""
    encoded = data.split("\0", 1)[0].encode("utf-8")[:MAX_DATA_SIZE - 1]
    return encoded.decode("utf-8", "ignore")


@dataclass
class Block:
    """One block: its data, position, time and link to the previous hash."""

    data: str
    index: int = 0
    timestamp: int = field(default_factory=_now)
    previous_hash: bytes = bytes(DIGEST_SIZE)
    hash: bytes = field(init=False, default=b"")

    def __post_init__(self) -> None:
        if not 0 <= self.index <= 0xFFFFFFFF:
            raise ValueError(f"block index out of range: {self.index}")
        if len(self.previous_hash) != DIGEST_SIZE:
            raise ValueError("previous hash must be 32 bytes")
        self.data = _stored_text(self.data)
        self.previous_hash = bytes(self.previous_hash)
        self.rehash()

    def calculate_hash(self) -> bytes:
        """Compute the hash of the block's current contents."""
        hasher = Sha256(self.data.split("\0", 1)[0].encode("utf-8"))
        hasher.update(self.previous_hash)
        hasher.update(struct.pack("<q", self.timestamp))
        hasher.update(struct.pack("<I", self.index))
        return hasher.digest()

    def rehash(self) -> None:
        """Store the hash of the block's current contents."""
        self.hash = self.calculate_hash()

    def describe(self) -> str:
        """Return a human-readable description of the block."""
        return (
            f"Block #{self.index}\n"
            f"Timestamp: {self.timestamp}\n"
            f"Data: {self.data}\n"
            f"Previous Hash: {self.previous_hash.hex()}\n"
            f"Hash: {self.hash.hex()}\n\n"
        )


class Blockchain:
    """A chain of blocks starting from a genesis block."""

    def __init__(self) -> None:
        self._blocks: list[Block] = [Block(GENESIS_DATA)]

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

    def add_block(self, data: str) -> Block:
        """Append a block holding ``data`` and return it."""
        block = Block(
            data,
            index=self.latest.index + 1,
            previous_hash=self.latest.hash,
        )
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