"""Domain constants for the movements ledger."""

INCOME_TAG = "ingreso"
EXPENSE_TAG = "egreso"

DATE_DISPLAY_LENGTH = 10

BALANCE_TITLE = "Saldo actual"
COLUMN_HEADERS = ("Fecha", "Descripción", "Monto", "Usuario")

BALANCE_NON_NEGATIVE_COLOR = "#1B5E20"
BALANCE_NEGATIVE_COLOR = "#B71C1C"
INCOME_AMOUNT_COLOR = "#2E7D32"
EXPENSE_AMOUNT_COLOR = "#C62828"


__all__ = [
    "INCOME_TAG",
    "EXPENSE_TAG",
    "DATE_DISPLAY_LENGTH",
    "BALANCE_TITLE",
    "COLUMN_HEADERS",
    "BALANCE_NON_NEGATIVE_COLOR",
    "BALANCE_NEGATIVE_COLOR",
    "INCOME_AMOUNT_COLOR",
    "EXPENSE_AMOUNT_COLOR",
]
