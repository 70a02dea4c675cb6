"""Application use cases package."""

from .get_ledger_view import GetLedgerViewUseCase, PresentationModel

__all__ = ["GetLedgerViewUseCase", "PresentationModel"]
