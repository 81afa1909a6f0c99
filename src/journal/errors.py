"""Error kinds raised by the journal core and adapters."""


class JournalError(Exception):
    """Base class for all journal errors."""

    pass


class ParseError(JournalError):
    """Raised when a date or interval expression cannot be parsed."""

    def __init__(self, token: str, message: str):
        self.token = token
        super().__init__(message)


class DateConstructionError(JournalError):
    """Raised when a day/month does not exist in the target year."""

    pass


class NotFoundError(JournalError):
    """Raised when a reminder number does not exist."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"No reminder with number {position}")


class StorageError(JournalError):
    """Raised when a persisted record cannot be read or written."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")


class ConfigError(JournalError):
    """Raised when a configuration value is malformed."""

    pass
