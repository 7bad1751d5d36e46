"""Error types raised across the service boundary."""


class InvalidInputError(ValueError):
    """Input outside its documented bounds."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


class DiaryConflictError(RuntimeError):
    """Concurrent write collision on a diary slot."""
