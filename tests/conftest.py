"""Shared pytest fixtures."""

from decimal import Decimal

import pytest

from src.domain.models import Transaction, TransactionCollection
from src.infrastructure.logging import logger as logger_module


@pytest.fixture(autouse=True)
def _isolate_log_files(tmp_path, monkeypatch):
    """Keep log files written during tests out of the project tree."""
    monkeypatch.setattr(logger_module, "get_project_root", lambda: tmp_path)


@pytest.fixture
def make_transaction():
    """Factory building transactions with sensible defaults."""

    def _make(
        id: int = 1,
        kind: str = "ingreso",
        amount: str = "10.00",
        date: str = "2025-09-01T10:30:00Z",
        description: str = "Venta",
        owner: str = "Ronald",
    ) -> Transaction:
        return Transaction(
            id=id,
            kind=kind,
            amount=Decimal(amount),
            date=date,
            description=description,
            owner=owner,
        )

    return _make


@pytest.fixture
def sample_collection(make_transaction) -> TransactionCollection:
    """Collection matching the embedded sample payload."""
    return TransactionCollection(
        transactions=(
            make_transaction(1, "ingreso", "2500.5"),
            make_transaction(2, "egreso", "300.0", owner="Pedro"),
            make_transaction(3, "ingreso", "1500.0", owner="María"),
            make_transaction(4, "ingreso", "100.0", owner="Abel"),
            make_transaction(5, "ingreso", "100.0", owner="Abel"),
            make_transaction(6, "ingreso", "1100.0", owner="Abel"),
        )
    )
