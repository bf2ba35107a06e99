"""Toss Vault - coin toss statistics and records engine."""

__version__ = "0.1.0"
