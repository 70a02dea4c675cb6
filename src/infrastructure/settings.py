"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import os
from pathlib import Path
from urllib.parse import unquote, urlparse

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

DEFAULT_PAYLOAD_FILENAME = "movimientos.json"


@dataclass(frozen=True)
class LedgerSettings:
    """Settings for selecting the movements payload.

    Attributes:
        payload_file: Optional path to a JSON payload file. When None the
            embedded sample payload is used.
    """

    payload_file: Path | None = None

    @classmethod
    def from_env(cls) -> "LedgerSettings":
        """Build settings from environment variables.

        Returns:
            LedgerSettings: Settings sourced from environment variables.
        """
        raw_file = os.getenv("MOVIMIENTOS_FILE", "").strip()
        logger = get_app_logger()
        if raw_file:
            payload_file = cls._normalize_path(raw_file, logger=logger)
        else:
            payload_file = cls._default_payload_file()
        return cls(payload_file=payload_file)

    @staticmethod
    def _normalize_path(raw_path: str, logger) -> Path:
        """Normalize the payload file path or ``file://`` URI.

        Args:
            raw_path: Raw file path string.
            logger: Logger used for warnings.

        Returns:
            Path: Absolute filesystem path.
        """
        parsed = urlparse(raw_path)
        if parsed.scheme == "file":
            raw_path = unquote(parsed.path)
        path = Path(raw_path).expanduser().resolve()
        if not path.exists():
            logger.warning(f"Movements file does not exist at {path}")
        return path

    @staticmethod
    def _default_payload_file() -> Path | None:
        """Return data/movimientos.json when it exists."""
        candidate = get_project_root() / "data" / DEFAULT_PAYLOAD_FILENAME
        if candidate.is_file():
            return candidate.resolve()
        return None


__all__ = ["LedgerSettings", "DEFAULT_PAYLOAD_FILENAME"]
