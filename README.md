# toychain

A small, self-contained blockchain for learning how hash-linked chains work.
It has no dependencies outside the standard library.

It includes:

- `toychain.sha256`: a SHA-256 implementation in pure Python.
  `sha256(data)` returns a 32-byte digest. The `Sha256` class supports
  incremental `update`, `digest`, `hexdigest` and `copy`. Calling `digest`
  does not end the hasher, so you can keep feeding it data afterwards.
- `toychain.simple`: a chain of blocks that each carry a text payload.
  Each block is linked to the previous one by its hash.
- `toychain.ledger`: a chain of blocks that carry transactions
  (sender, receiver, amount). You can save it to a binary file and
  load it back.

## Installation

```
pip install .
```

To also install the test tools:

```
pip install ".[test]"
```

## Usage

### Hashing

```python
from toychain.sha256 import Sha256, sha256

digest = sha256(b"Blockchain Cryptography")
print(digest.hex())

h = Sha256(b"Blockchain ")
h.update(b"Cryptography")
assert h.digest() == digest
```

### A simple chain

```python
from toychain.simple import Blockchain

chain = Blockchain()          # starts with a "Genesis Block"
chain.add_block("First Block Data")
chain.add_block("Second Block Data")

print(len(chain))             # 3
print(chain.is_valid())       # True
print(chain.describe())
```

The data in each block is cut at the first NUL character. It is also cut so
that it fits in 1023 UTF-8 bytes.

### A transaction ledger

```python
from toychain.ledger import Blockchain

chain = Blockchain(difficulty=4)
chain.genesis.add_transaction("King", "Jack", 10.5)
chain.genesis.rehash()

block = chain.add_block()
block.add_transaction("Kraed", "King", 7.5)
block.rehash()

print(chain.is_valid())

chain.save("blockchain.dat")
restored = Blockchain.load("blockchain.dat")
print(restored.describe())
```

The ledger has these rules:

- A block holds at most 100 transactions.
- Amounts must be positive.
- The difficulty must be a non-negative 32-bit integer.

Breaking any of these rules raises `LedgerError`. `Blockchain.load` also
raises `LedgerError` when a file ends in the middle of a record or holds an
invalid transaction count.

Adding transactions to a block does not update its stored hash. Call
`rehash()` afterwards, or `is_valid()` will report the chain as invalid.

Sender and receiver names are stored in at most 63 UTF-8 bytes.

Loaded blocks keep the hashes that were stored in the file. This means that
`is_valid()` on a loaded chain checks the file's contents.

## Command-line demos

```
toychain-simple
```

This hashes a sample string. It then builds, prints and validates a
four-block chain: the genesis block and three data blocks.

```
toychain-ledger [--file PATH]
```

This builds a three-block transaction ledger, prints it and validates it.
It then saves the ledger to `PATH`, loads it back and prints the loaded
copy. `PATH` defaults to `blockchain.dat` in the current directory.

## What it does not do

- The ledger's `difficulty` is stored and saved with the chain, but it is not
  used. There is no mining or proof-of-work.
- There is no networking and no consensus between peers.
- There is no check of balances or signatures on transactions.
- The simple chain has no file storage. Only the ledger can be saved and
  loaded.

## Running the tests

```
pytest
```