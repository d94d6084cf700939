"""Demonstration of a transaction chain saved to and loaded from a file."""

from __future__ import annotations

import argparse

from toychain.ledger import Blockchain, LedgerError

DEFAULT_FILE = "blockchain.dat"


def _build_chain() -> Blockchain:
    chain = Blockchain(4)
    chain.genesis.add_transaction("King", "Jack", 10.5)
    chain.genesis.add_transaction("Jack", "Kraed", 5.0)
    chain.genesis.rehash()

    block = chain.add_block()
    block.add_transaction("Kraed", "King", 7.5)
    block.add_transaction("Jack", "King", 3.0)
    block.rehash()

    block = chain.add_block()
    block.add_transaction("King", "Kraed", 2.5)
    block.rehash()
    return chain


def main(argv: list[str] | None = None) -> int:
    """Build, print, validate, save and reload a small transaction chain."""
    parser = argparse.ArgumentParser(
        description="Build a transaction blockchain, save it and load it back."
    )
    parser.add_argument("--file", default=DEFAULT_FILE, help="where to save the chain")
    args = parser.parse_args(argv)

    print("Enhanced Blockchain Implementation")
    print("================================")
    print()

    try:
        chain = _build_chain()
    except LedgerError:
        print("Failed to add transaction to block")
        return 0

    print("Blockchain Contents:")
    print(chain.describe(), end="")

    print("Validating blockchain...")
    print("Blockchain is valid!" if chain.is_valid() else "Blockchain is invalid!")

    print()
    print("Saving blockchain to file...")
    try:
        chain.save(args.file)
    except OSError:
        print("Failed to save blockchain to file")
        return 0

    print("Loading blockchain from file...")
    try:
        loaded = Blockchain.load(args.file)
    except (OSError, LedgerError):
        print("Failed to load blockchain from file")
        return 0

    print()
    print("Loaded Blockchain Contents:")
    print(loaded.describe(), end="")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())