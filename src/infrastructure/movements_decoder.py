"""Decoder turning a movements JSON payload into domain records."""

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from src.domain.errors import MalformedInputError
from src.domain.models import Transaction, TransactionCollection
from src.utils.decimal_utils import coerce_decimal


class MovementPayload(BaseModel):
    """Wire schema of a single movement.

    Strict so numbers and strings are never coerced into each other; extra
    keys are ignored to stay compatible with richer payloads.
    """

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    id: int
    tipo: str
    monto: float = Field(allow_inf_nan=False)
    fecha: str
    descripcion: str
    usuario: str

    def to_domain(self) -> Transaction:
        return Transaction(
            id=self.id,
            kind=self.tipo,
            amount=coerce_decimal(self.monto),
            date=self.fecha,
            description=self.descripcion,
            owner=self.usuario,
        )


class MovementsResponsePayload(BaseModel):
    """Top-level wire schema: ``{"movimientos": [...]}``."""

    model_config = ConfigDict(strict=True, extra="ignore", frozen=True)

    movimientos: list[MovementPayload]


def decode_movements(payload: str | bytes) -> TransactionCollection:
    """Decode a movements payload into an ordered collection.

    Args:
        payload: Raw JSON text.

    Returns:
        TransactionCollection: Movements in payload order.

    Raises:
        MalformedInputError: If the payload is not valid JSON or any
            movement is missing a field or carries a wrong type.
    """
    try:
        parsed = MovementsResponsePayload.model_validate_json(payload)
    except ValidationError as exc:
        locations = tuple(
            ".".join(str(part) for part in error["loc"])
            for error in exc.errors()
        )
        raise MalformedInputError(
            f"Could not decode movements payload "
            f"({exc.error_count()} error(s))",
            error_count=exc.error_count(),
            locations=locations,
        ) from exc

    try:
        transactions = tuple(item.to_domain() for item in parsed.movimientos)
    except ValueError as exc:
        raise MalformedInputError(
            f"Could not convert movements payload: {exc}"
        ) from exc
    return TransactionCollection(transactions=transactions)


__all__ = [
    "MovementPayload",
    "MovementsResponsePayload",
    "decode_movements",
]
