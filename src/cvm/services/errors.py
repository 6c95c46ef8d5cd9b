"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a runtime entity cannot be created from the given input."""
