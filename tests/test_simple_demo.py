import hashlib

import pytest

from toychain.simple_demo import main


def test_main_prints_hash_and_valid_chain(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    expected_hash = hashlib.sha256(b"Blockchain Cryptography").hexdigest()
    assert f"SHA-256 Hash: {expected_hash}\n" in out
    assert out.startswith("Task 1: SHA-256 Hashing\n")
    assert out.rstrip().endswith("Blockchain is valid!")


def test_main_prints_four_blocks_in_order(capsys):
    main([])
    out = capsys.readouterr().out
    positions = [out.index(f"Block #{i}\n") for i in range(4)]
    assert positions == sorted(positions)
    assert "Data: Genesis Block\n" in out
    assert "Data: Third Block Data\n" in out
    assert "Block #4\n" not in out


def test_main_rejects_unknown_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2