"""Composition root for wiring infrastructure adapters."""

from src.application.ports.transactions_source import TransactionsSourcePort
from src.application.use_cases.get_ledger_view import GetLedgerViewUseCase
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.sample_payload import SAMPLE_MOVEMENTS_JSON
from src.infrastructure.settings import LedgerSettings
from src.infrastructure.transactions_source import (
    FileTransactionsSource,
    InlinePayloadTransactionsSource,
)


def build_transactions_source(
    settings: LedgerSettings | None = None,
) -> TransactionsSourcePort:
    """Return the configured movements source."""
    resolved = settings or LedgerSettings.from_env()
    if resolved.payload_file is not None:
        return FileTransactionsSource(
            resolved.payload_file,
            logger=get_app_logger(),
        )
    return InlinePayloadTransactionsSource(SAMPLE_MOVEMENTS_JSON)


def build_get_ledger_view_use_case(
    transactions_source: TransactionsSourcePort | None = None,
) -> GetLedgerViewUseCase:
    """Return the movements screen use case."""
    resolved_source = transactions_source or build_transactions_source()
    return GetLedgerViewUseCase(
        transactions_source=resolved_source,
        logger=get_app_logger(),
    )


__all__ = ["build_transactions_source", "build_get_ledger_view_use_case"]
