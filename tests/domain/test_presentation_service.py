"""Tests for the table presenter."""

from decimal import Decimal

from src.domain.constants import (
    BALANCE_NEGATIVE_COLOR,
    BALANCE_NON_NEGATIVE_COLOR,
    EXPENSE_AMOUNT_COLOR,
    INCOME_AMOUNT_COLOR,
)
from src.domain.models import (
    AmountStatus,
    BalanceStatus,
    TransactionCollection,
)
from src.domain.services.presentation import (
    build_balance_display,
    build_ledger_row,
    present,
)


def test_present_sample_balance_and_rows(sample_collection) -> None:
    """Sample movements should produce the known header and six rows."""
    view = present(sample_collection)

    assert view.balance.text == "5,000.50"
    assert view.balance.value == Decimal("5000.5")
    assert view.balance.status is BalanceStatus.NON_NEGATIVE
    assert view.balance.color == BALANCE_NON_NEGATIVE_COLOR
    assert [row.key for row in view.rows] == [1, 2, 3, 4, 5, 6]
    assert view.rows[0].date == "2025-09-01"
    assert view.rows[0].amount_text == "2,500.50"
    assert view.rows[1].status is AmountStatus.EXPENSE
    assert view.rows[1].amount_text == "300.00"


def test_present_empty_collection() -> None:
    view = present(TransactionCollection())

    assert view.rows == ()
    assert view.balance.text == "0.00"
    assert view.balance.status is BalanceStatus.NON_NEGATIVE


def test_present_keeps_payload_order(make_transaction) -> None:
    """Rows follow the input order, not dates or ids."""
    transactions = [
        make_transaction(id=9, date="2025-09-05T00:00:00Z"),
        make_transaction(id=2, date="2025-09-01T00:00:00Z"),
        make_transaction(id=5, date="2025-09-03T00:00:00Z"),
    ]

    view = present(transactions)

    assert [row.key for row in view.rows] == [9, 2, 5]


def test_present_is_repeatable(sample_collection) -> None:
    assert present(sample_collection) == present(sample_collection)


def test_present_tolerates_duplicate_ids(make_transaction) -> None:
    """Duplicate ids keep every row; keyed lookup keeps the last one."""
    transactions = [
        make_transaction(id=5, description="primero"),
        make_transaction(id=5, description="segundo"),
    ]

    view = present(transactions)

    assert len(view.rows) == 2
    assert view.rows_by_key == {5: view.rows[1]}
    assert view.rows_by_key[5].description == "segundo"


def test_build_balance_display_negative() -> None:
    display = build_balance_display(Decimal("-1234.5"))

    assert display.text == "-1,234.50"
    assert display.status is BalanceStatus.NEGATIVE
    assert display.color == BALANCE_NEGATIVE_COLOR


def test_build_balance_display_zero_is_non_negative() -> None:
    display = build_balance_display(Decimal("0"))

    assert display.status is BalanceStatus.NON_NEGATIVE


def test_build_ledger_row_income(make_transaction) -> None:
    row = build_ledger_row(
        make_transaction(
            id=7,
            kind="INGRESO",
            amount="1500",
            date="2025-09-03T14:10:00Z",
            description="Servicio técnico",
            owner="María",
        )
    )

    assert row.key == 7
    assert row.date == "2025-09-03"
    assert row.description == "Servicio técnico"
    assert row.amount == Decimal("1500")
    assert row.amount_text == "1,500.00"
    assert row.status is AmountStatus.INCOME
    assert row.color == INCOME_AMOUNT_COLOR
    assert row.owner == "María"


def test_build_ledger_row_unknown_kind_uses_expense_status(
    make_transaction,
) -> None:
    row = build_ledger_row(make_transaction(kind="transferencia"))

    assert row.status is AmountStatus.EXPENSE
    assert row.color == EXPENSE_AMOUNT_COLOR


def test_build_ledger_row_does_not_flip_sign(make_transaction) -> None:
    """Expense status is visual only; the amount text keeps its sign."""
    row = build_ledger_row(make_transaction(kind="egreso", amount="300"))

    assert row.amount_text == "300.00"
