class SnapshotFormatError(ValueError):
    """Raised when a persisted snapshot is not a well-formed locations array."""
    pass
