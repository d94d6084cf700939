"""A small educational blockchain: pure-Python SHA-256, a simple data chain and a transaction ledger."""

__version__ = "0.1.0"
__all__ = ["sha256", "simple", "simple_demo", "ledger", "ledger_demo"]