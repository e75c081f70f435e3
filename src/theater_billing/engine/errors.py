"""Errors raised by the billing engine."""


class BillingError(Exception):
    """Base class for statement computation failures."""


class UnknownPlayError(BillingError, LookupError):
    """Raised when a performance references a play that is not in the catalog."""

    def __init__(self, play_id: str) -> None:
        super().__init__(f"unknown play: {play_id}")
        self.play_id = play_id


class UnknownPlayTypeError(BillingError, ValueError):
    """Raised when a play's type is not one of the known genres."""

    def __init__(self, play_type: str) -> None:
        super().__init__(f"unknown type: {play_type}")
        self.play_type = play_type
