"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created."""


class SessionError(Exception):
    """Raised when a game session is driven out of order."""
