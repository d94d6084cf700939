from toychain.ledger import Blockchain
from toychain.ledger_demo import main


def test_demo_builds_saves_and_loads(tmp_path, capsys):
    path = tmp_path / "chain.dat"
    assert main(["--file", str(path)]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Enhanced Blockchain Implementation\n")
    assert "Blockchain is valid!" in out
    assert "Saving blockchain to file..." in out
    assert "Loaded Blockchain Contents:" in out
    assert out.count("Block #") == 6
    assert out.count("  1. King -> Jack: 10.50\n") == 2


def test_demo_file_holds_the_chain(tmp_path, capsys):
    path = tmp_path / "chain.dat"
    main(["--file", str(path)])
    capsys.readouterr()
    loaded = Blockchain.load(path)
    assert loaded.difficulty == 4
    assert len(loaded) == 3
    assert [len(block.transactions) for block in loaded] == [2, 2, 1]
    assert loaded.is_valid()


def test_demo_uses_default_file(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0
    capsys.readouterr()
    assert (tmp_path / "blockchain.dat").is_file()


def test_demo_reports_save_failure(tmp_path, capsys):
    assert main(["--file", str(tmp_path)]) == 0
    out = capsys.readouterr().out
    assert "Failed to save blockchain to file" in out
    assert "Loaded Blockchain Contents:" not in out