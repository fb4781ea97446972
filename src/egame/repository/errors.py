"""Repository errors."""


class WorldNotFoundError(LookupError):
    """No world document has been stored yet."""
