class SalesDeskError(Exception):
    """Base class for errors that end a session."""


class InvalidNumberError(SalesDeskError, ValueError):
    """Raised when text that should be an integer is not one."""

    def __init__(self, field: str, raw: str, expected: str = "an integer") -> None:
        self.field = field
        self.raw = raw
        super().__init__(f"Invalid {field}: {raw!r} is not {expected}")


class CatalogError(SalesDeskError):
    """Raised on a duplicate code or a write after the catalog was frozen."""


class SessionAborted(SalesDeskError):
    """Raised when the user runs out of retries."""
