"""Movements ledger application package."""
