"""Adapters exposing the ledger to users."""

__all__: list[str] = []
