"""Polkadot Cloud Starter -- scaffolds Polkadot dApp projects."""

__version__ = "0.1.0"
