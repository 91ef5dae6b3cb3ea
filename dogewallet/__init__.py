"""Wallet settings, amounts, send form, transaction history and status text."""

__version__ = "1.0.0"