"""Streamlit movements screen entry point."""

from collections.abc import Sequence
from html import escape

import streamlit as st

from src.domain.constants import BALANCE_TITLE, COLUMN_HEADERS
from src.domain.errors import MalformedInputError
from src.domain.models import BalanceDisplay, LedgerRow, PresentationModel
from src.infrastructure.container import build_get_ledger_view_use_case
from src.infrastructure.logging.logger import get_usage_logger

COLUMN_WEIGHTS = (1, 2, 1, 1)
RIGHT_ALIGNED_COLUMNS = (2, 3)


def _fetch_ledger_view() -> PresentationModel:
    """Build the movements view through the composition root."""
    use_case = build_get_ledger_view_use_case()
    return use_case.execute()


@st.cache_data(show_spinner=False)
def _load_ledger_view(schema_version: int = 1) -> PresentationModel:
    """Cached wrapper around _fetch_ledger_view."""
    _ = schema_version
    return _fetch_ledger_view()


def _cell_html(
    text: str,
    *,
    color: str | None = None,
    bold: bool = False,
    align: str = "left",
) -> str:
    """Return an HTML snippet for a single table cell."""
    styles = [f"text-align:{align}"]
    if color:
        styles.append(f"color:{color}")
    if bold:
        styles.append("font-weight:bold")
    return f"<div style='{';'.join(styles)}'>{escape(text)}</div>"


def _render_balance(balance: BalanceDisplay) -> None:
    """Render the balance header."""
    st.subheader(BALANCE_TITLE)
    st.markdown(
        f"<h2 style='color:{balance.color};margin-top:0'>"
        f"{escape(balance.text)}</h2>",
        unsafe_allow_html=True,
    )


def _render_row(
    cells: Sequence[str],
    *,
    color: str | None = None,
    bold: bool = False,
) -> None:
    """Render one line of the table using weighted columns."""
    columns = st.columns(list(COLUMN_WEIGHTS))
    for idx, (column, text) in enumerate(zip(columns, cells)):
        align = "right" if idx in RIGHT_ALIGNED_COLUMNS else "left"
        column.markdown(
            _cell_html(
                text,
                color=color if idx == 2 else None,
                bold=bold,
                align=align,
            ),
            unsafe_allow_html=True,
        )


def _render_rows(rows: Sequence[LedgerRow]) -> None:
    """Render the movements table."""
    _render_row(COLUMN_HEADERS, bold=True)
    st.divider()
    if not rows:
        st.info("No hay movimientos para mostrar.")
        return
    for row in rows:
        _render_row(
            (row.date, row.description, row.amount_text, row.owner),
            color=row.color,
        )


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Historial de movimientos", layout="wide")
    st.title("Historial de movimientos")

    try:
        view = _load_ledger_view()
    except MalformedInputError as exc:
        st.error(f"No se pudieron cargar los movimientos: {exc}")
        return

    get_usage_logger().info(
        f"Rendered movements screen rows={len(view.rows)} "
        f"balance_status={view.balance.status.value}"
    )
    _render_balance(view.balance)
    _render_rows(view.rows)


if __name__ == "__main__":  # pragma: no cover
    main()
