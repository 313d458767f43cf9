"""Service-layer exceptions."""


class InvalidSelectionError(Exception):
    """Raised when a choice index was not offered or is disabled."""


class SaveLoadError(Exception):
    """Raised when a persisted snapshot cannot be decoded."""
