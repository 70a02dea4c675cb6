"""Use case to build the movements screen model."""

from src.application.ports.transactions_source import TransactionsSourcePort
from src.domain.errors import MalformedInputError
from src.domain.models import PresentationModel, TransactionCollection
from src.domain.services.presentation import present
from src.infrastructure.logging.logger import get_app_logger


class GetLedgerViewUseCase:
    """Decode movements and project them into a presentation model."""

    def __init__(
        self,
        transactions_source: TransactionsSourcePort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            transactions_source: Port providing the decoded movements.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._transactions_source = transactions_source
        self._logger = logger or get_app_logger()
        self._last_collection: TransactionCollection | None = None
        self._last_view: PresentationModel | None = None

    def execute(self) -> PresentationModel:
        """Return the balance header and rows for the movements screen.

        Returns:
            PresentationModel: Display model for rendering surfaces.

        Raises:
            MalformedInputError: If the source payload cannot be decoded.
        """
        try:
            collection = self._transactions_source.fetch_transactions()
        except MalformedInputError as exc:
            self._logger.error(
                f"Movements payload rejected: {exc} "
                f"locations={list(exc.locations)}"
            )
            raise

        if (
            self._last_view is not None
            and collection is self._last_collection
        ):
            return self._last_view

        view = present(collection)
        self._last_collection = collection
        self._last_view = view
        self._logger.info(
            f"Presented {len(view.rows)} movements "
            f"with balance {view.balance.text}"
        )
        return view


__all__ = ["GetLedgerViewUseCase", "PresentationModel"]
