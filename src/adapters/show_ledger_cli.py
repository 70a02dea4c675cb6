"""CLI adapter printing the movements table to the terminal.

This module wires the GetLedgerViewUseCase through the composition root
and renders the balance header and rows as aligned plain text.
"""

import sys

from src.domain.constants import BALANCE_TITLE, COLUMN_HEADERS
from src.domain.errors import MalformedInputError
from src.domain.models import LedgerRow, PresentationModel
from src.infrastructure.container import build_get_ledger_view_use_case


def _row_cells(row: LedgerRow) -> tuple[str, str, str, str]:
    return (row.date, row.description, row.amount_text, row.owner)


def render_table(view: PresentationModel) -> str:
    """Render a presentation model as aligned text.

    Args:
        view: Balance header and rows to render.

    Returns:
        str: Multi-line text with the balance and the table.
    """
    table = [COLUMN_HEADERS, *(_row_cells(row) for row in view.rows)]
    widths = [max(len(line[idx]) for line in table) for idx in range(4)]

    def _line(cells) -> str:
        date, description, amount, owner = cells
        return "  ".join(
            [
                date.ljust(widths[0]),
                description.ljust(widths[1]),
                amount.rjust(widths[2]),
                owner.rjust(widths[3]),
            ]
        )

    lines = [
        BALANCE_TITLE,
        f"{view.balance.text} ({view.balance.status.value})",
        "",
        _line(COLUMN_HEADERS),
        "-" * (sum(widths) + 6),
    ]
    lines.extend(_line(_row_cells(row)) for row in view.rows)
    return "\n".join(lines)


def main() -> None:
    """Run the movements use case and print its table."""
    use_case = build_get_ledger_view_use_case()
    try:
        view = use_case.execute()
    except MalformedInputError as exc:
        print(f"Unable to display movements: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(render_table(view))


if __name__ == "__main__":  # pragma: no cover
    main()
