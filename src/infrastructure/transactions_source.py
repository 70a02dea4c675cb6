"""Payload-backed implementations of the transactions source port."""

from functools import cached_property
from pathlib import Path

from src.domain.models import TransactionCollection
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.movements_decoder import decode_movements


class InlinePayloadTransactionsSource:
    """Decode movements from a payload string supplied by the caller.

    The payload never changes, so it is decoded once and the same
    collection is returned on every fetch.
    """

    def __init__(self, payload: str) -> None:
        self._payload = payload

    @cached_property
    def _collection(self) -> TransactionCollection:
        return decode_movements(self._payload)

    def fetch_transactions(self) -> TransactionCollection:
        """Return the movements decoded from the inline payload."""
        return self._collection


class FileTransactionsSource:
    """Decode movements from a JSON file on disk."""

    def __init__(self, path: Path | str, logger=None) -> None:
        """Initialize the source.

        Args:
            path: Path to a UTF-8 JSON payload file.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._path = Path(path)
        self._logger = logger or get_app_logger()

    def fetch_transactions(self) -> TransactionCollection:
        """Return the movements decoded from the payload file.

        Raises:
            RuntimeError: If the file cannot be read.
            MalformedInputError: If the file content is not a valid payload.
        """
        try:
            payload = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise RuntimeError(
                f"Unable to read movements file at {self._path}"
            ) from exc
        self._logger.info(f"Loaded movements payload from {self._path}")
        return decode_movements(payload)


__all__ = ["InlinePayloadTransactionsSource", "FileTransactionsSource"]
