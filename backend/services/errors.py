"""Error types raised by the resume parsing and profile population services."""


class ResumeBrainError(Exception):
    """Base class for service-level errors."""


class ValidationError(ResumeBrainError):
    """Resume text is missing or too short to be worth parsing."""


class PersistenceError(ResumeBrainError):
    """The profile store failed to read or write a record."""
