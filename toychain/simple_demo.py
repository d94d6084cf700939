"""Demonstration of hashing and a simple data chain."""

from __future__ import annotations

import argparse

from toychain.sha256 import sha256
from toychain.simple import Blockchain

DEMO_INPUT = "Blockchain Cryptography"
DEMO_BLOCKS = ("First Block Data", "Second Block Data", "Third Block Data")


def main(argv: list[str] | None = None) -> int:
    """Print a hash demonstration and a validated three-block chain."""
    parser = argparse.ArgumentParser(
        description="Show SHA-256 hashing and a simple blockchain."
    )
    parser.parse_args(argv)

    print("Task 1: SHA-256 Hashing")
    print("=======================")
    print(f"Input: {DEMO_INPUT}")
    print(f"SHA-256 Hash: {sha256(DEMO_INPUT.encode('utf-8')).hex()}")
    print()

    print("Task 2: Simple Blockchain Simulation")
    print("===================================")
    chain = Blockchain()
    for text in DEMO_BLOCKS:
        chain.add_block(text)

    print("Blockchain Contents:")
    print(chain.describe(), end="")

    print("Validating blockchain...")
    print("Blockchain is valid!" if chain.is_valid() else "Blockchain is invalid!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())