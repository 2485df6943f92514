"""Exception type raised by the package."""


class OdbcError(Exception):
    """Raised when a value, conversion or database operation is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message