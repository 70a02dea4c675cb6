"""Domain error taxonomy."""


class MalformedInputError(ValueError):
    """Raised when a movements payload does not match the expected shape.

    Attributes:
        error_count: Number of validation problems found.
        locations: Dotted paths of the offending fields, when known.
    """

    def __init__(
        self,
        message: str,
        *,
        error_count: int = 1,
        locations: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message)
        self.error_count = error_count
        self.locations = locations


__all__ = ["MalformedInputError"]
