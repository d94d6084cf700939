import pytest

from toychain.simple import MAX_DATA_SIZE, Block, Blockchain


def test_new_chain_has_genesis_block():
    chain = Blockchain()
    assert len(chain) == 1
    genesis = chain.genesis
    assert genesis.data == "Genesis Block"
    assert genesis.index == 0
    assert genesis.previous_hash == bytes(32)
    assert chain.latest is genesis


def test_add_block_links_to_previous():
    chain = Blockchain()
    first = chain.add_block("First Block Data")
    second = chain.add_block("Second Block Data")
    assert [b.index for b in chain] == [0, 1, 2]
    assert first.previous_hash == chain.genesis.hash
    assert second.previous_hash == first.hash
    assert chain.latest is second


def test_chain_is_valid():
    chain = Blockchain()
    for text in ("First Block Data", "Second Block Data", "Third Block Data"):
        chain.add_block(text)
    assert chain.is_valid()


def test_tampered_data_is_detected():
    chain = Blockchain()
    block = chain.add_block("original")
    chain.add_block("after")
    block.data = "forged"
    assert not chain.is_valid()


def test_rehash_alone_breaks_the_link():
    chain = Blockchain()
    block = chain.add_block("original")
    chain.add_block("after")
    block.data = "forged"
    block.rehash()
    assert block.calculate_hash() == block.hash
    assert not chain.is_valid()


def test_rehashed_last_block_keeps_chain_valid():
    chain = Blockchain()
    last = chain.add_block("original")
    last.data = "edited"
    last.rehash()
    assert chain.is_valid()


def test_hash_is_deterministic_and_field_sensitive():
    base = Block("payload", index=3, timestamp=1_700_000_000)
    same = Block("payload", index=3, timestamp=1_700_000_000)
    assert base.hash == same.hash
    assert len(base.hash) == 32
    assert Block("payload", index=4, timestamp=1_700_000_000).hash != base.hash
    assert Block("payload", index=3, timestamp=1_700_000_001).hash != base.hash
    assert Block("payloaD", index=3, timestamp=1_700_000_000).hash != base.hash
    linked = Block("payload", index=3, timestamp=1_700_000_000, previous_hash=b"\x01" * 32)
    assert linked.hash != base.hash


def test_long_data_is_truncated():
    block = Block("a" * (MAX_DATA_SIZE + 50), timestamp=0)
    assert block.data == "a" * (MAX_DATA_SIZE - 1)


def test_data_stops_at_nul():
    block = Block("visible\0hidden", timestamp=0)
    assert block.data == "visible"
    assert block.hash == Block("visible", timestamp=0).hash


def test_invalid_index_rejected():
    with pytest.raises(ValueError):
        Block("x", index=-1)
    with pytest.raises(ValueError):
        Block("x", index=2**32)


def test_invalid_previous_hash_rejected():
    with pytest.raises(ValueError):
        Block("x", previous_hash=b"short")


def test_describe_format():
    block = Block("payload", index=2, timestamp=12345)
    text = block.describe()
    assert text == (
        "Block #2\n"
        "Timestamp: 12345\n"
        "Data: payload\n"
        f"Previous Hash: {'00' * 32}\n"
        f"Hash: {block.hash.hex()}\n\n"
    )


def test_chain_describe_concatenates_blocks():
    chain = Blockchain()
    chain.add_block("one")
    assert chain.describe() == "".join(b.describe() for b in chain)
    assert chain.describe().count("Block #") == 2