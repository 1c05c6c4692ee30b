"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a character cannot be created."""


class SaveLoadError(Exception):
    """Raised when save or load operations fail."""
